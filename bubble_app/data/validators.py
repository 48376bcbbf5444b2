"""
Candle quality checks.

Positivity is enforced while parsing. OHLC ordering (``low <= open, close <= high``)
is only audited: upstream data occasionally violates it and such candles are
kept and rendered as delivered.
"""

from collections.abc import Iterable
from typing import Optional

from .models import Candle


def has_positive_prices(open_: Optional[float], high: Optional[float],
                        low: Optional[float], close: Optional[float]) -> bool:
    """True when all four prices are present and strictly positive."""
    prices = (open_, high, low, close)
    return all(price is not None and price > 0 for price in prices)


def is_ohlc_consistent(candle: Candle) -> bool:
    """True when ``low <= min(open, close)`` and ``max(open, close) <= high``."""
    return candle.low <= min(candle.open, candle.close) and max(candle.open, candle.close) <= candle.high


def count_ohlc_inconsistencies(candles: Iterable[Candle]) -> int:
    """Number of candles violating OHLC ordering."""
    return sum(1 for candle in candles if not is_ohlc_consistent(candle))


def is_ascending_unique(candles: list[Candle]) -> bool:
    """True when timestamps strictly increase."""
    return all(a.timestamp < b.timestamp for a, b in zip(candles, candles[1:]))
