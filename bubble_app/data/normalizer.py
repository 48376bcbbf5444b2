"""
Series normalization: window filtering and sparse-coverage gap filling.

Takes parsed candles for one symbol and produces the series handed to the
cache and the renderer: ascending, inside the requested window, with missing
calendar days filled from the nearest real candle when coverage is sparse.
"""

from typing import Optional

import structlog

from ..config.defaults import WindowParams
from ..errors import EmptyDataError
from ..utils.time import MS_PER_DAY, Clock, day_key, format_ms_iso, now_ms
from .models import Candle, Series
from .validators import count_ohlc_inconsistencies

logger = structlog.get_logger(__name__)


class SeriesNormalizer:
    """
    Normalizes raw candle series to a date window.

    Dense series (at least ``min_density`` candles inside the window) pass
    through filtered and sorted. Sparse series are expanded to one candle per
    calendar day, reusing the nearest real candle's prices when it lies within
    ``max_gap_days``; days without a close enough neighbour stay absent.
    """

    def __init__(self, params: Optional[WindowParams] = None, clock: Clock = now_ms):
        self.params = params or WindowParams()
        self.clock = clock

    @property
    def max_gap_ms(self) -> int:
        return self.params.max_gap_days * MS_PER_DAY

    def normalize(self,
                  raw: Series,
                  window_start: int,
                  window_end: Optional[int] = None,
                  symbol: str = "") -> Series:
        """
        Normalize a raw series to ``[window_start, window_end]``.

        Args:
            raw: Parsed candles in any order
            window_start: Inclusive window start (epoch ms)
            window_end: Inclusive window end (epoch ms), defaults to now
            symbol: Ticker, used for logging only

        Returns:
            Ascending series inside the window

        Raises:
            EmptyDataError: If nothing survives filtering or gap filling
        """
        if window_end is None:
            window_end = self.clock()

        if not raw:
            raise EmptyDataError("No data available", required_count=1, available_count=0,
                                 context={"symbol": symbol})

        ordered = sorted(raw, key=lambda candle: candle.timestamp)
        filtered = [c for c in ordered if window_start <= c.timestamp <= window_end]

        if not filtered:
            raise EmptyDataError("No data in date range", required_count=1, available_count=0,
                                 context={"symbol": symbol, "window_start": window_start,
                                          "window_end": window_end})

        inconsistent = count_ohlc_inconsistencies(filtered)
        if inconsistent:
            logger.debug("Candles with inconsistent OHLC ordering kept as delivered",
                         symbol=symbol, count=inconsistent)

        if len(filtered) < self.params.min_density:
            return self.fill_gaps(filtered, window_start, window_end, symbol=symbol)

        last = filtered[-1]
        logger.info("Using real data", symbol=symbol, candles=len(filtered),
                    last_price=round(last.close, 2), last_date=format_ms_iso(last.timestamp))
        return filtered

    def fill_gaps(self,
                  candles: Series,
                  window_start: int,
                  window_end: int,
                  symbol: str = "") -> Series:
        """
        Expand a sparse, ascending, in-window series to one candle per day.

        Each day from ``window_start`` through ``window_end`` uses the real
        candle recorded on that UTC day if there is one; otherwise the nearest
        real candle's prices are stamped at ``window_start + i days``, provided
        that neighbour is strictly less than ``max_gap_days`` away.

        Raises:
            EmptyDataError: If no day could be filled
        """
        by_day: dict[int, Candle] = {}
        for candle in candles:
            by_day[day_key(candle.timestamp)] = candle

        filled: Series = []
        days = (window_end - window_start) // MS_PER_DAY + 1
        for i in range(days):
            time = window_start + i * MS_PER_DAY
            exact = by_day.get(day_key(time))
            if exact is not None:
                filled.append(exact)
                continue

            nearest = self.find_nearest(candles, time)
            if nearest is not None:
                filled.append(nearest.at(time))

        if not filled:
            raise EmptyDataError("Insufficient data after filling", required_count=1,
                                 available_count=0, context={"symbol": symbol})

        last = filled[-1]
        logger.info("Filled data", symbol=symbol, real_candles=len(candles), candles=len(filled),
                    last_price=round(last.close, 2), last_date=format_ms_iso(last.timestamp))
        return filled

    def find_nearest(self, candles: Series, time: int) -> Optional[Candle]:
        """
        Nearest candle to ``time`` by linear scan; the earliest wins ties.

        Returns None when the series is empty or the nearest candle is not
        strictly closer than ``max_gap_days``.
        """
        if not candles:
            return None

        nearest = candles[0]
        min_diff = abs(candles[0].timestamp - time)
        for candle in candles:
            diff = abs(candle.timestamp - time)
            if diff < min_diff:
                min_diff = diff
                nearest = candle

        return nearest if min_diff < self.max_gap_ms else None
