"""
Candle series acquisition and shaping.

Parses upstream chart payloads, normalizes series to a date window,
downsamples them for rendering, and generates the synthetic dotcom series.
"""
