"""
Synthetic dotcom bubble series.

Generates a fixed-shape candle series over 1995-2003 in three phases: run-up
to the March 2000 peak, crash to the October 2002 trough, and a flat recovery
through 2003. Each phase follows a linear trend with a sinusoidal wobble of
its own frequency; per-candle prices add uniform noise.
"""

import math
import random
from typing import Optional

from ..config.defaults import SyntheticParams
from ..utils.time import MS_PER_DAY, date_to_ms
from .models import Candle, Series


class DotcomSeriesGenerator:
    """Builds the synthetic dotcom bubble candle series."""

    def __init__(self, params: Optional[SyntheticParams] = None, rng: Optional[random.Random] = None):
        self.params = params or SyntheticParams()
        self.rng = rng or random.Random()

        self.start = date_to_ms(self.params.start_date)
        self.peak = date_to_ms(self.params.peak_date)
        self.crash = date_to_ms(self.params.crash_date)
        self.end = date_to_ms(self.params.end_date)

    def generate(self) -> Series:
        """Return exactly ``samples`` candles, ascending, all prices positive."""
        total_days = (self.end - self.start) // MS_PER_DAY
        step_days = total_days // self.params.samples

        series: Series = []
        for i in range(self.params.samples):
            timestamp = self.start + i * step_days * MS_PER_DAY
            series.append(self._candle(timestamp, self.target_price(timestamp)))
        return series

    def target_price(self, timestamp: int) -> float:
        """Deterministic phase curve value at ``timestamp``."""
        p = self.params

        if timestamp < self.peak:
            progress = (timestamp - self.start) / (self.peak - self.start)
            price = p.base_price + (p.peak_price - p.base_price) * progress
            return price + math.sin(progress * math.pi * 4) * 20

        if timestamp < self.crash:
            progress = (timestamp - self.peak) / (self.crash - self.peak)
            price = p.peak_price - (p.peak_price - p.crash_price) * progress
            return price - math.sin(progress * math.pi) * 50

        progress = (timestamp - self.crash) / (self.end - self.crash)
        price = p.crash_price + (p.base_price - p.crash_price) * progress * 0.3
        return price + math.sin(progress * math.pi * 2) * 10

    def _candle(self, timestamp: int, target: float) -> Candle:
        rand = self.rng.random
        volatility = self.params.min_volatility + rand() * self.params.volatility_range

        open_ = target + (rand() - 0.5) * volatility
        high = max(open_, target) + rand() * volatility
        low = min(open_, target) - rand() * volatility
        close = target + (rand() - 0.5) * volatility * 0.5

        return Candle(timestamp, open_, high, low, close)


def generate_dotcom_series(rng: Optional[random.Random] = None) -> Series:
    """Generate the dotcom series with default parameters."""
    return DotcomSeriesGenerator(rng=rng).generate()
