"""Pytest configuration and shared fixtures."""

import pytest
from typing import Callable, List

from bubble_app.data.models import Candle
from bubble_app.utils.time import MS_PER_DAY

from helpers import WINDOW_START, FakeClock, ProxyRouter


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_candle() -> Callable[..., Candle]:
    """Factory for candles around a single price."""
    def _make(timestamp: int, price: float = 100.0) -> Candle:
        return Candle(timestamp, price, price + 1, price - 1, price + 0.5)
    return _make


@pytest.fixture
def make_daily_series(make_candle) -> Callable[..., List[Candle]]:
    """Factory for ``count`` candles spaced ``every_days`` apart from ``start``."""
    def _make(count: int, start: int = WINDOW_START, every_days: int = 1) -> List[Candle]:
        return [make_candle(start + i * every_days * MS_PER_DAY, 100.0 + i) for i in range(count)]
    return _make


@pytest.fixture
def proxy_router() -> ProxyRouter:
    return ProxyRouter()
