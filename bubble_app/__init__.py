"""
Bubble App - AI vs Dotcom Bubble Candlestick Dashboard

Data acquisition layer for a two-chart dashboard: fetches daily OHLC series
for a selectable AI stock through rotating CORS proxies, normalizes and
downsamples them for rendering, caches them with time-based invalidation,
and generates a synthetic dotcom-bubble series for comparison.
"""

__version__ = "0.1.0"
__author__ = "Bubble App Team"
