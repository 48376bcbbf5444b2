"""
Canonical data models for candle series.

This module defines immutable data structures for normalized daily candles,
the company roster and cache entries.
"""

from dataclasses import dataclass
from typing import Generic, TypedDict, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Candle:
    """Daily OHLC candle keyed by UTC epoch milliseconds."""
    timestamp: int     # UTC epoch milliseconds
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price

    @property
    def ohlc(self) -> list[float]:
        """Prices in ``[open, high, low, close]`` order."""
        return [self.open, self.high, self.low, self.close]

    def at(self, timestamp: int) -> "Candle":
        """Copy of this candle's prices stamped at another time."""
        return Candle(timestamp, self.open, self.high, self.low, self.close)

    def to_point(self) -> "ChartPoint":
        """Rendering point ``{"x": timestamp, "y": [o, h, l, c]}``."""
        return {"x": self.timestamp, "y": self.ohlc}


# Ascending by timestamp, unique timestamps.
Series = list[Candle]


class ChartPoint(TypedDict):
    """Renderer point: x is the timestamp, y is [open, high, low, close]."""
    x: int
    y: list[float]


@dataclass(frozen=True)
class CompanyInfo:
    """Tracked company shown in the symbol selector."""
    symbol: str
    display_name: str


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached value with the wall-clock time it was fetched (epoch ms)."""
    value: T
    fetched_at: int

    def is_fresh(self, now: int, ttl_ms: int) -> bool:
        """True while ``now - fetched_at < ttl_ms``."""
        return now - self.fetched_at < ttl_ms
