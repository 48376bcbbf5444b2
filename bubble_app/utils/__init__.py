"""
Utility functions module.

Time Semantics:
- Candle timestamps are integer epoch milliseconds, always UTC
- The upstream quote endpoint speaks epoch seconds; conversion happens once
- Calendar days are UTC days keyed by ``timestamp // MS_PER_DAY``
- Wall-clock reads go through ``now_ms`` so callers can inject a clock
"""
