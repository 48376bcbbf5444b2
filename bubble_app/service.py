"""
Stock data service: cached series and roster access for the dashboard views.

Flow for a modern symbol:
    cache lookup → MarketDataClient (proxies in order) → SeriesNormalizer → cache store

Concurrent requests for the same symbol before a fetch completes each run
their own fetch; there is no in-flight de-duplication.
"""

import random
from typing import Optional

import structlog

from .cache.ttl_cache import TTLCache
from .client.market_data import MarketDataClient
from .client.roster import RemoteRosterSource, RosterFetcher, static_roster
from .config.defaults import DefaultConfig, get_default_config
from .config.symbols import AI_COMPANIES
from .data.models import CompanyInfo, Series
from .data.normalizer import SeriesNormalizer
from .data.synthetic import DotcomSeriesGenerator
from .utils.time import Clock, date_to_ms, now_ms

logger = structlog.get_logger(__name__)


class StockService:
    """Memoizes per-symbol series and the company roster with independent TTLs."""

    def __init__(self,
                 config: Optional[DefaultConfig] = None,
                 client: Optional[MarketDataClient] = None,
                 roster_fetcher: Optional[RosterFetcher] = None,
                 clock: Clock = now_ms,
                 rng: Optional[random.Random] = None):
        self.config = config or get_default_config()
        self.clock = clock
        self.client = client or MarketDataClient(self.config.fetch, self.config.window, clock=clock)
        self.normalizer = SeriesNormalizer(self.config.window, clock=clock)
        self.roster_fetcher = roster_fetcher or RemoteRosterSource()
        self.dotcom_generator = DotcomSeriesGenerator(self.config.synthetic, rng=rng)

        self.series_cache: TTLCache[Series] = TTLCache(self.config.cache.series_ttl_ms, clock=clock)
        self.roster_cache: TTLCache[list[CompanyInfo]] = TTLCache(self.config.cache.roster_ttl_ms, clock=clock)

        self.window_start = date_to_ms(self.config.window.window_start)

    async def get_series(self, symbol: Optional[str] = None) -> Series:
        """
        Normalized series for ``symbol`` (default: first tracked ticker).

        Served from cache while fresh. On a miss the series is fetched and
        normalized, then cached. Failures propagate and leave the cache as it was.

        Raises:
            NetworkError: All proxies failed
            EmptyDataError: Nothing usable after normalization
            MissingDataError: Symbol is blank after trimming
        """
        symbol = symbol.strip() if symbol else AI_COMPANIES[0]

        cached = self.series_cache.get(symbol)
        if cached is not None:
            logger.debug("Series cache hit", symbol=symbol)
            return cached

        logger.debug("Series cache miss", symbol=symbol)
        raw = await self.client.fetch_series(symbol)
        series = self.normalizer.normalize(raw, self.window_start, self.clock(), symbol=symbol)
        self.series_cache.put(series, key=symbol)
        return series

    async def get_companies(self) -> list[CompanyInfo]:
        """
        Tracked companies, refreshed from the roster source at most once per TTL.

        A failing roster source degrades to the static table, which is then
        cached as if it were a fresh result.
        """
        cached = self.roster_cache.get()
        if cached is not None:
            return cached

        try:
            companies = await self.roster_fetcher()
        except Exception as e:
            logger.warning("Roster fetch failed, using static table", error=str(e))
            companies = static_roster()

        self.roster_cache.put(companies)
        return companies

    async def get_dotcom_series(self) -> Series:
        """Freshly generated synthetic dotcom series; never cached."""
        return self.dotcom_generator.generate()
