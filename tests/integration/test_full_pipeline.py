"""Integration tests for the dashboard from proxy fetch to chart payload."""

import asyncio
import random

import httpx
import pytest

from bubble_app.client.market_data import MarketDataClient
from bubble_app.config.symbols import AI_COMPANIES
from bubble_app.dashboard import Dashboard
from bubble_app.service import StockService

from helpers import WINDOW_START, daily_body, json_response

CORSPROXY = "corsproxy.io"
CODETABS = "api.codetabs.com"
ALLORIGINS = "api.allorigins.win"


async def open_dashboard(http_client, clock):
    client = MarketDataClient(http_client=http_client, clock=clock)
    service = StockService(client=client, clock=clock, rng=random.Random(42))
    dashboard = Dashboard(service=service, viewport_width=1280)
    await dashboard.start()
    return dashboard


@pytest.mark.integration
class TestFullPipeline:
    """Integration tests for the complete dashboard pipeline."""

    def test_start_renders_both_charts(self, proxy_router, clock) -> None:
        """Test the initial load through a failing and a working proxy."""
        proxy_router.responses = {
            CORSPROXY: httpx.Response(500),
            CODETABS: json_response(daily_body(WINDOW_START, 1200)),
        }

        async def _run():
            async with proxy_router.client() as http_client:
                dashboard = await open_dashboard(http_client, clock)
                await dashboard.close()
                return dashboard

        dashboard = asyncio.run(_run())

        assert [c.symbol for c in dashboard.companies] == AI_COMPANIES
        assert dashboard.selected_company == "NVDA"
        assert not dashboard.is_loading_companies
        assert proxy_router.hosts == [CORSPROXY, CODETABS]

        ai_payload = dashboard.ai_view.payload
        assert ai_payload["title"] == "NVDA (2020-Present)"
        data = ai_payload["series"][0]["data"]
        assert len(data) == 401
        assert data[0]["x"] == WINDOW_START
        assert data[-1]["x"] == WINDOW_START + 1199 * 86_400_000

        dotcom_payload = dashboard.dotcom_view.payload
        assert dotcom_payload["title"] == "Dotcom Bubble (1995-2003)"
        assert len(dotcom_payload["series"][0]["data"]) == 200

    def test_selection_uses_series_cache(self, proxy_router, clock) -> None:
        """Test symbol switches fetch once per symbol within the TTL."""
        proxy_router.responses = {CORSPROXY: json_response(daily_body(WINDOW_START, 150))}

        async def _run():
            async with proxy_router.client() as http_client:
                dashboard = await open_dashboard(http_client, clock)
                await dashboard.select_company("AMD")
                await dashboard.select_company("NVDA")
                await dashboard.close()
                return dashboard

        dashboard = asyncio.run(_run())

        assert len(proxy_router.requests) == 2
        assert dashboard.ai_view.payload["title"] == "NVDA (2020-Present)"

    def test_refresh_after_ttl_refetches(self, proxy_router, clock) -> None:
        """Test an update tick after expiry goes back to the network."""
        proxy_router.responses = {CORSPROXY: json_response(daily_body(WINDOW_START, 150))}

        async def _run():
            async with proxy_router.client() as http_client:
                dashboard = await open_dashboard(http_client, clock)
                await dashboard.ai_view._on_update_tick()
                clock.advance(60_000)
                await dashboard.ai_view._on_update_tick()
                await dashboard.close()

        asyncio.run(_run())

        assert len(proxy_router.requests) == 2

    def test_all_proxies_down_keeps_loader(self, proxy_router, clock) -> None:
        """Test that a network failure leaves the AI chart loading and the dotcom chart intact."""
        proxy_router.responses = {
            CORSPROXY: httpx.Response(500),
            CODETABS: httpx.ConnectError("refused"),
            ALLORIGINS: httpx.Response(200, text="<html>rate limited</html>"),
        }

        async def _run():
            async with proxy_router.client() as http_client:
                dashboard = await open_dashboard(http_client, clock)
                await dashboard.close()
                return dashboard

        dashboard = asyncio.run(_run())

        assert proxy_router.hosts == [CORSPROXY, CODETABS, ALLORIGINS]
        assert dashboard.ai_view.is_loading
        assert dashboard.ai_view.payload is None
        assert dashboard.dotcom_view.payload is not None

    def test_toggle_auto_update(self, proxy_router, clock) -> None:
        proxy_router.responses = {CORSPROXY: json_response(daily_body(WINDOW_START, 150))}

        async def _run():
            async with proxy_router.client() as http_client:
                dashboard = await open_dashboard(http_client, clock)
                running_before = dashboard.ai_view.scheduler.running
                enabled = await dashboard.toggle_auto_update()
                running_after = dashboard.ai_view.scheduler.running
                await dashboard.close()
                return running_before, enabled, running_after

        assert asyncio.run(_run()) == (True, False, False)
