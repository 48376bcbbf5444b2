"""
Market data client fetching daily candles through rotating CORS proxies.

The upstream quote endpoint is reached only through public relay services.
Each fetch builds one upstream URL and walks the proxy list once in priority
order; the first proxy that returns a structurally valid chart payload wins.
"""

from typing import Any, Optional

import httpx

from ..config.defaults import FetchParams, WindowParams
from ..data.models import Series
from ..data.parsers import parse_quote_payload
from ..errors import MissingDataError, NetworkError, ParseError
from ..logging.config import get_fetch_logger, log_proxy_attempt
from ..utils.time import Clock, date_to_ms, format_ms_iso, ms_to_epoch_seconds, now_ms
from .proxies import ProxyEndpoint, build_proxy_endpoints, build_upstream_url

logger = get_fetch_logger(__name__)


class MarketDataClient:
    """Fetches raw candle series for a symbol over ``[window_start, now)``."""

    def __init__(self,
                 params: Optional[FetchParams] = None,
                 window: Optional[WindowParams] = None,
                 http_client: Optional[httpx.AsyncClient] = None,
                 clock: Clock = now_ms):
        """
        Initialize the client.

        Args:
            params: Upstream host, interval and proxy templates
            window: Supplies the fixed window start
            http_client: Shared client; when omitted each fetch opens its own
            clock: Epoch-ms clock for the window end
        """
        self.params = params or FetchParams()
        self.window = window or WindowParams()
        self.http_client = http_client
        self.clock = clock
        self.proxies: list[ProxyEndpoint] = build_proxy_endpoints(self.params.proxy_templates)

        self.window_start = date_to_ms(self.window.window_start)
        self._stats = {
            proxy.index: {"attempts": 0, "successes": 0, "failures": 0}
            for proxy in self.proxies
        }

    def upstream_url(self, symbol: str) -> str:
        """Direct quote URL for ``symbol`` over the fixed window."""
        return build_upstream_url(
            self.params,
            symbol,
            ms_to_epoch_seconds(self.window_start),
            ms_to_epoch_seconds(self.clock()),
        )

    async def fetch_series(self, symbol: str) -> Series:
        """
        Fetch the raw series for ``symbol``.

        Each proxy is tried exactly once, in order. Transport errors, non-2xx
        responses and payloads failing structural validation advance to the
        next proxy.

        Raises:
            MissingDataError: If ``symbol`` is blank
            NetworkError: If every proxy failed
        """
        if not symbol or not symbol.strip():
            raise MissingDataError("symbol is required", data_type="symbol")
        symbol = symbol.strip()

        upstream_url = self.upstream_url(symbol)

        if self.http_client is not None:
            return await self._walk_proxies(self.http_client, symbol, upstream_url)

        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await self._walk_proxies(client, symbol, upstream_url)

    async def _walk_proxies(self, client: httpx.AsyncClient, symbol: str, upstream_url: str) -> Series:
        attempts: list[tuple[int, str]] = []

        for proxy in self.proxies:
            stats = self._stats[proxy.index]
            stats["attempts"] += 1
            try:
                series = await self._fetch_via_proxy(client, proxy, upstream_url)
            except (httpx.HTTPError, ParseError) as e:
                stats["failures"] += 1
                reason = f"{type(e).__name__}: {e}"
                attempts.append((proxy.index, reason))
                log_proxy_attempt(logger, symbol, proxy.index, succeeded=False, reason=reason)
                continue

            stats["successes"] += 1
            if series:
                last = series[-1]
                log_proxy_attempt(logger, symbol, proxy.index, succeeded=True,
                                  last_price=last.close, last_date=format_ms_iso(last.timestamp))
            else:
                log_proxy_attempt(logger, symbol, proxy.index, succeeded=True)
            return series

        logger.error("All proxies exhausted", symbol=symbol, attempts=len(attempts))
        raise NetworkError(
            f"All {len(self.proxies)} proxies failed for {symbol}",
            symbol=symbol,
            attempts=attempts,
        )

    async def _fetch_via_proxy(self, client: httpx.AsyncClient, proxy: ProxyEndpoint, upstream_url: str) -> Series:
        response = await client.get(proxy.wrap(upstream_url))
        response.raise_for_status()
        return parse_quote_payload(response.content)

    def get_stats(self) -> dict[int, dict[str, Any]]:
        """Per-proxy attempt counters."""
        return {index: dict(counts) for index, counts in self._stats.items()}

    def reset_stats(self) -> None:
        """Reset per-proxy counters."""
        for counts in self._stats.values():
            for key in counts:
                counts[key] = 0
