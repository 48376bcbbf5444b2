"""
Dashboard coordinator.

Owns the company selector state, the auto-update toggle and the two chart
views (selected AI stock and synthetic dotcom bubble):

    Roster → selection → AI ChartView (auto-refresh)
                         Dotcom ChartView (static)
"""

from typing import Optional

import structlog

from .config.defaults import DefaultConfig
from .data.models import CompanyInfo
from .service import StockService
from .state.chart_view import ChartView

logger = structlog.get_logger(__name__)


class Dashboard:
    """Top-level state for the two-chart bubble dashboard."""

    def __init__(self,
                 service: Optional[StockService] = None,
                 config: Optional[DefaultConfig] = None,
                 viewport_width: Optional[int] = None):
        self.service = service or StockService(config)
        self.config = config or self.service.config

        self.companies: list[CompanyInfo] = []
        self.selected_company = ""
        self.is_loading_companies = True
        self.auto_update = self.config.refresh.auto_update

        self.ai_view = ChartView(self.service, is_dotcom=False, auto_update=self.auto_update,
                                 config=self.config, viewport_width=viewport_width)
        self.dotcom_view = ChartView(self.service, is_dotcom=True, auto_update=False,
                                     config=self.config, viewport_width=viewport_width)

        logger.info("Dashboard initialized", auto_update=self.auto_update)

    async def start(self) -> None:
        """Load the roster, select the first company and start both views."""
        await self.load_companies()
        self.ai_view.symbol = self.selected_company
        await self.ai_view.start()
        await self.dotcom_view.start()

    async def load_companies(self) -> list[CompanyInfo]:
        self.is_loading_companies = True
        self.companies = await self.service.get_companies()
        if self.companies and not self.selected_company:
            self.selected_company = self.companies[0].symbol
        self.is_loading_companies = False
        logger.info("Companies loaded", count=len(self.companies), selected=self.selected_company)
        return self.companies

    async def select_company(self, symbol: str) -> None:
        """Point the AI chart at ``symbol``."""
        self.selected_company = symbol
        await self.ai_view.set_symbol(symbol)

    async def toggle_auto_update(self) -> bool:
        """Flip auto-update and propagate it to the AI chart; returns the new setting."""
        self.auto_update = not self.auto_update
        await self.ai_view.set_auto_update(self.auto_update)
        logger.info("Auto-update toggled", auto_update=self.auto_update)
        return self.auto_update

    async def close(self) -> None:
        """Stop every timer owned by the views."""
        await self.ai_view.close()
        await self.dotcom_view.close()
