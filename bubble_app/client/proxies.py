"""Upstream quote URL construction and CORS proxy wrapping."""

from dataclasses import dataclass
from urllib.parse import quote, urlencode

from ..config.defaults import FetchParams

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ProxyEndpoint:
    """One relay service; ``template`` holds a ``{url}`` placeholder."""
    index: int
    template: str

    def wrap(self, upstream_url: str) -> str:
        """Route ``upstream_url`` through this proxy."""
        return self.template.replace("{url}", quote(upstream_url, safe=_URI_COMPONENT_SAFE))


def build_proxy_endpoints(templates: tuple) -> list[ProxyEndpoint]:
    """Proxy endpoints in priority order."""
    return [ProxyEndpoint(index=i, template=template) for i, template in enumerate(templates)]


def build_upstream_url(params: FetchParams, symbol: str, period1: int, period2: int) -> str:
    """
    Direct quote URL for a symbol over ``[period1, period2)`` epoch seconds.

    Example: ``{host}/v8/finance/chart/NVDA?period1=1577836800&period2=...&interval=1d``
    """
    query = urlencode({"period1": period1, "period2": period2, "interval": params.interval})
    return f"{params.quote_host.rstrip('/')}{params.chart_path}/{quote(symbol, safe='')}?{query}"
