"""Shared builders for quote payloads, HTTP responses and clocks."""

from typing import Any, Dict, List, Optional

import httpx
import orjson

from bubble_app.utils.time import MS_PER_DAY, date_to_ms

WINDOW_START = date_to_ms("2020-01-01")
NOW = date_to_ms("2024-06-01")


class FakeClock:
    """Manually advanced epoch-ms clock."""

    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def chart_body(timestamps_s: List[int],
               opens: List[Optional[float]],
               highs: Optional[List[Optional[float]]] = None,
               lows: Optional[List[Optional[float]]] = None,
               closes: Optional[List[Optional[float]]] = None) -> Dict[str, Any]:
    """Quote payload in upstream chart format; missing arrays copy ``opens``."""
    return {
        "chart": {
            "result": [{
                "meta": {"symbol": "TEST"},
                "timestamp": timestamps_s,
                "indicators": {"quote": [{
                    "open": opens,
                    "high": highs if highs is not None else opens,
                    "low": lows if lows is not None else opens,
                    "close": closes if closes is not None else opens,
                }]},
            }],
            "error": None,
        }
    }


def daily_body(start_ms: int, days: int, price: float = 100.0) -> Dict[str, Any]:
    """Chart payload with one candle per day starting at ``start_ms``."""
    timestamps = [(start_ms + i * MS_PER_DAY) // 1000 for i in range(days)]
    opens = [price + i for i in range(days)]
    return chart_body(timestamps, opens,
                      highs=[p + 2 for p in opens],
                      lows=[p - 2 for p in opens],
                      closes=[p + 1 for p in opens])


def json_response(body: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=orjson.dumps(body),
                          headers={"content-type": "application/json"})


class ProxyRouter:
    """
    Serves an ``httpx.AsyncClient`` whose responses are chosen by proxy host.

    ``responses`` maps a host substring to an ``httpx.Response`` or an
    exception instance to raise. Requests are recorded in ``requests``.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[str, Any] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for host, outcome in self.responses.items():
            if host in request.url.host:
                if isinstance(outcome, Exception):
                    raise outcome
                # Fresh copy per request so one outcome can serve repeated fetches
                return httpx.Response(outcome.status_code, headers=outcome.headers,
                                      content=outcome.content)
        return httpx.Response(404, text="not found")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def hosts(self) -> List[str]:
        return [request.url.host for request in self.requests]
