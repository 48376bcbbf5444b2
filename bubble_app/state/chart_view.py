"""
Chart view state: loading, rendering payloads and the auto-refresh lifecycle.

A view is either the AI chart (selectable symbol, optional auto-refresh) or
the dotcom chart (synthetic, loaded once). Load failures are logged and leave
the view exactly as it was: the loader or the stale chart stays visible.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from ..config.defaults import DefaultConfig
from ..data.downsample import downsample
from ..errors import DataQualityError, SystemFailureError
from ..logging.config import get_view_logger
from ..render.chart_payload import build_chart_payload, chart_title
from ..service import StockService
from .refresh import RefreshScheduler

logger = get_view_logger(__name__)


class ChartView:
    """One candlestick chart and the timers that keep it fresh."""

    def __init__(self,
                 service: StockService,
                 is_dotcom: bool = False,
                 symbol: str = "",
                 auto_update: bool = True,
                 config: Optional[DefaultConfig] = None,
                 viewport_width: Optional[int] = None):
        self.service = service
        self.config = config or service.config
        self.is_dotcom = is_dotcom
        self.symbol = symbol
        self.auto_update = auto_update
        self.viewport_width = viewport_width

        refresh = self.config.refresh
        self.update_interval = int(refresh.update_interval_seconds)
        self.scheduler = RefreshScheduler(refresh.update_interval_seconds, refresh.countdown_interval_seconds)

        self.is_loading = True
        self.payload: Optional[dict[str, Any]] = None
        self.last_update_time: Optional[datetime] = None
        self.next_update_in = self.update_interval
        self.closed = False

    @property
    def uses_timers(self) -> bool:
        return not self.is_dotcom and self.auto_update and not self.closed

    async def start(self) -> None:
        """Initial load, then timers when auto-update applies."""
        await self.load_data()
        if self.uses_timers:
            await self._start_timers()

    async def set_symbol(self, symbol: str) -> None:
        """Switch the AI chart to another ticker and reload."""
        if self.is_dotcom or not symbol or symbol == self.symbol:
            return
        self.symbol = symbol
        self.is_loading = True
        await self.load_data()

    async def set_auto_update(self, enabled: bool) -> None:
        """Restart both timers when enabled, cancel them when disabled."""
        self.auto_update = enabled
        if self.uses_timers:
            await self._start_timers()
        else:
            await self.scheduler.stop()

    async def close(self) -> None:
        """Tear the view down; no timer survives this call."""
        self.closed = True
        await self.scheduler.stop()

    async def load_data(self) -> bool:
        """
        Fetch, downsample and render the series.

        A result that arrives after the symbol changed is discarded, so a
        slow load never lands under another ticker's title.

        Returns:
            True if the payload was replaced, False if the load failed or was stale
        """
        symbol = self.symbol
        if not self.is_dotcom and not symbol:
            return False

        try:
            if self.is_dotcom:
                series = await self.service.get_dotcom_series()
            else:
                series = await self.service.get_series(symbol)
        except (SystemFailureError, DataQualityError) as e:
            logger.error("Chart load failed, keeping previous state",
                         symbol=symbol or None, is_dotcom=self.is_dotcom,
                         error_type=type(e).__name__, error=str(e))
            return False
        except Exception as e:
            logger.error("Unexpected error loading chart, keeping previous state",
                         symbol=symbol or None, is_dotcom=self.is_dotcom,
                         error_type=type(e).__name__, error=str(e))
            return False

        if symbol != self.symbol:
            logger.debug("Discarding stale chart load", symbol=symbol, current_symbol=self.symbol)
            return False

        self.payload = build_chart_payload(
            downsample(series, self.config.downsample.max_points),
            title=chart_title(self.config.chart, symbol, self.is_dotcom),
            symbol=None if self.is_dotcom else symbol,
            viewport_width=self.viewport_width,
            series_name=self.config.chart.series_name,
        )
        if not self.is_dotcom:
            self.last_update_time = datetime.now(timezone.utc)
        self.is_loading = False
        return True

    async def _start_timers(self) -> None:
        await self.scheduler.start(self._on_update_tick, self._on_countdown_tick)

    async def _on_update_tick(self) -> None:
        if not self.auto_update:
            return
        self.is_loading = True
        await self.load_data()
        self.next_update_in = self.update_interval

    def _on_countdown_tick(self) -> None:
        if not self.auto_update:
            return
        if self.next_update_in > 0:
            self.next_update_in -= 1
        else:
            self.next_update_in = self.update_interval
