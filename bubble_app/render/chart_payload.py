"""
Chart payload builder for the rendering collaborator.

The renderer itself is external; it receives candle points plus display
metadata and responsive sizing hints derived from the viewport width.
"""

from typing import Any, Optional

from ..config.defaults import ChartParams
from ..data.models import Series

# (max viewport width, value); first matching breakpoint wins
HEIGHT_BREAKPOINTS = [(360, 300), (480, 350), (768, 400), (1024, 450)]
TITLE_FONT_BREAKPOINTS = [(360, "12px"), (480, "13px"), (768, "14px")]
LABEL_FONT_BREAKPOINTS = [(360, "9px"), (480, "10px"), (768, "11px")]

DEFAULT_HEIGHT = 500
DEFAULT_TITLE_FONT = "16px"
DEFAULT_LABEL_FONT = "12px"


def _for_width(breakpoints: list, width: Optional[int], default: Any) -> Any:
    if width is None:
        return default
    for max_width, value in breakpoints:
        if width <= max_width:
            return value
    return default


def chart_height(viewport_width: Optional[int]) -> int:
    return _for_width(HEIGHT_BREAKPOINTS, viewport_width, DEFAULT_HEIGHT)


def title_font_size(viewport_width: Optional[int]) -> str:
    return _for_width(TITLE_FONT_BREAKPOINTS, viewport_width, DEFAULT_TITLE_FONT)


def label_font_size(viewport_width: Optional[int]) -> str:
    return _for_width(LABEL_FONT_BREAKPOINTS, viewport_width, DEFAULT_LABEL_FONT)


def chart_title(params: ChartParams, symbol: Optional[str], is_dotcom: bool) -> str:
    if is_dotcom:
        return params.dotcom_title
    return params.ai_title_format.format(symbol=symbol)


def build_chart_payload(series: Series,
                        title: str,
                        symbol: Optional[str] = None,
                        viewport_width: Optional[int] = None,
                        series_name: str = "Candlestick") -> dict[str, Any]:
    """
    Build the renderer payload.

    Args:
        series: Normalized (typically downsampled) candles
        title: Chart title
        symbol: Ticker shown, None for the synthetic series
        viewport_width: Viewport width in pixels; None means no viewport (server side)

    Returns:
        ``{"series": [{"name", "data": [{"x", "y"}]}], "title", "symbol",
        "height", "title_font_size", "label_font_size"}``
    """
    return {
        "series": [{
            "name": series_name,
            "data": [candle.to_point() for candle in series],
        }],
        "title": title,
        "symbol": symbol,
        "height": chart_height(viewport_width),
        "title_font_size": title_font_size(viewport_width),
        "label_font_size": label_font_size(viewport_width),
    }
