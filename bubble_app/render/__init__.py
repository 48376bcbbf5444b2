"""
Payloads handed to the external candlestick chart renderer.
"""
