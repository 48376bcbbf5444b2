"""
Chart payload parsers for converting upstream quote responses to candles.

Handles the proxy envelope (``{"contents": "<json>"}``), structural validation
of the ``chart.result[0]`` wrapper and conversion of the parallel
timestamp/OHLC arrays into normalized ``Candle`` objects.
"""

from typing import Any, Optional, Union

import orjson

from ..errors import ParseError
from ..utils.time import epoch_seconds_to_ms
from .models import Candle, Series
from .validators import has_positive_prices

ENVELOPE_FIELD = "contents"
OHLC_FIELDS = ("open", "high", "low", "close")


def parse_json_payload(raw_data: Union[str, bytes]) -> Any:
    """
    Parse a raw JSON document.

    Args:
        raw_data: Response body as text or bytes

    Returns:
        Decoded JSON value

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", raw_data=str(raw_data)[:100], expected_format="json")


def decode_proxy_body(raw_data: Union[str, bytes]) -> Any:
    """
    Decode a proxy response body, unwrapping a string-embedded envelope.

    Step one decodes the body and, if it carries a string ``contents`` field,
    decodes that field as the real payload. If the field is absent or does not
    hold valid JSON, step two falls back to the top-level body as the payload.

    Raises:
        ParseError: If the body itself is not valid JSON
    """
    payload = parse_json_payload(raw_data)

    envelope = payload.get(ENVELOPE_FIELD) if isinstance(payload, dict) else None
    if isinstance(envelope, str):
        try:
            return parse_json_payload(envelope)
        except ParseError:
            return payload

    return payload


def extract_chart_result(payload: Any) -> dict[str, Any]:
    """
    Validate the quote payload structure and return ``chart.result[0]``.

    Expected format::

        {"chart": {"result": [{"timestamp": [...],
                               "indicators": {"quote": [{"open": [...], ...}]}}]}}

    Raises:
        ParseError: If the wrapper, result list or timestamp array is missing or empty
            or the quote containers have the wrong shape
    """
    if not isinstance(payload, dict):
        raise ParseError("Payload must be a JSON object", raw_data=str(payload)[:100])

    chart = payload.get("chart")
    if not isinstance(chart, dict):
        raise ParseError("Missing 'chart' field", raw_data=str(payload)[:100])

    results = chart.get("result")
    if not isinstance(results, list) or not results:
        raise ParseError("Missing or empty 'chart.result'", raw_data=str(chart)[:100])

    result = results[0]
    if not isinstance(result, dict):
        raise ParseError("'chart.result[0]' must be an object", raw_data=str(result)[:100])

    timestamps = result.get("timestamp")
    if not isinstance(timestamps, list) or not timestamps:
        raise ParseError("Missing or empty 'timestamp' array", raw_data=str(result)[:100])

    _check_quote_shape(result)

    return result


def parse_chart_result(result: dict[str, Any]) -> Series:
    """
    Convert a chart result into candles sorted ascending by timestamp.

    Records with any missing, non-numeric or non-positive OHLC component are
    dropped; mis-shaped quote containers count as missing. When a timestamp
    repeats, the later record wins.

    Args:
        result: ``chart.result[0]`` as returned by ``extract_chart_result``

    Returns:
        Parsed candles, possibly empty
    """
    timestamps = _as_list(result.get("timestamp"))
    quote = _first_quote(result.get("indicators"))

    opens = _as_list(quote.get("open"))
    highs = _as_list(quote.get("high"))
    lows = _as_list(quote.get("low"))
    closes = _as_list(quote.get("close"))

    by_timestamp: dict[int, Candle] = {}
    for i, raw_ts in enumerate(timestamps):
        if not _is_number(raw_ts):
            continue

        open_ = _price_at(opens, i)
        high = _price_at(highs, i)
        low = _price_at(lows, i)
        close = _price_at(closes, i)

        if not has_positive_prices(open_, high, low, close):
            continue

        timestamp = epoch_seconds_to_ms(raw_ts)
        by_timestamp[timestamp] = Candle(timestamp, open_, high, low, close)

    return sorted(by_timestamp.values(), key=lambda candle: candle.timestamp)


def parse_quote_payload(raw_data: Union[str, bytes]) -> Series:
    """Decode, validate and parse a full proxy response body."""
    return parse_chart_result(extract_chart_result(decode_proxy_body(raw_data)))


def _check_quote_shape(result: dict[str, Any]) -> None:
    indicators = result.get("indicators")
    if indicators is None:
        return
    if not isinstance(indicators, dict):
        raise ParseError("'indicators' must be an object", raw_data=str(indicators)[:100])

    quotes = indicators.get("quote")
    if quotes is None:
        return
    if not isinstance(quotes, list) or (quotes and not isinstance(quotes[0], dict)):
        raise ParseError("'indicators.quote' must be a list of objects", raw_data=str(quotes)[:100])

    for name in OHLC_FIELDS:
        values = quotes[0].get(name) if quotes else None
        if values is not None and not isinstance(values, list):
            raise ParseError(f"'indicators.quote[0].{name}' must be an array",
                             raw_data=str(values)[:100])


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _first_quote(indicators: Any) -> dict[str, Any]:
    """``indicators.quote[0]``, or an empty quote when any level has the wrong shape."""
    if not isinstance(indicators, dict):
        return {}
    quotes = _as_list(indicators.get("quote"))
    if not quotes or not isinstance(quotes[0], dict):
        return {}
    return quotes[0]


def _price_at(values: list[Any], index: int) -> Optional[float]:
    if index >= len(values):
        return None
    value = values[index]
    return float(value) if _is_number(value) else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
