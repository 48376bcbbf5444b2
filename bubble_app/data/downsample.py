"""Point-budget reduction for rendering."""

import math

from .models import Series

DEFAULT_MAX_POINTS = 500


def downsample(series: Series, max_points: int = DEFAULT_MAX_POINTS) -> Series:
    """
    Reduce a series to roughly ``max_points`` candles by fixed striding.

    Series at or under the budget are returned unchanged (the same list).
    Otherwise every ``ceil(len / max_points)``-th candle from index 0 is kept,
    and the input's final candle object is appended if striding skipped it,
    so the result holds at most ``max_points + 1`` candles. A budget below one
    is treated as one, which keeps only the first and last candles.
    """
    max_points = max(max_points, 1)
    if len(series) <= max_points:
        return series

    step = math.ceil(len(series) / max_points)
    sampled = series[::step]

    if sampled[-1] is not series[-1]:
        sampled.append(series[-1])

    return sampled
