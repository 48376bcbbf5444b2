#!/usr/bin/env python3
"""
Dashboard Demo - Bubble App

Runs the dashboard against the live proxies for a short while and prints the
state of both charts. Shows how to:
- Load configuration and logging
- Start the dashboard (roster, AI chart, dotcom chart)
- Switch the selected company and toggle auto-update
- Close the dashboard so no timer is left running

Run: python examples/dashboard_demo.py [SYMBOL] [SECONDS]
"""

import asyncio
import sys

from bubble_app.config.loader import ConfigLoader
from bubble_app.dashboard import Dashboard
from bubble_app.logging.config import configure_logging


def describe(view) -> str:
    if view.payload is None:
        return "loading..." if view.is_loading else "no data"
    points = view.payload["series"][0]["data"]
    last = points[-1]
    return f"{view.payload['title']}: {len(points)} points, last close ${last['y'][3]:.2f}"


async def run(symbol: str, seconds: float) -> None:
    config = ConfigLoader.create().load()
    configure_logging(level=config.logging.level,
                      format_json=config.logging.format_json,
                      include_timestamp=config.logging.include_timestamp)

    dashboard = Dashboard(config=config, viewport_width=config.chart.default_viewport_width)
    try:
        await dashboard.start()
        print(f"Companies: {', '.join(c.symbol for c in dashboard.companies)}")
        print(f"AI chart     -> {describe(dashboard.ai_view)}")
        print(f"Dotcom chart -> {describe(dashboard.dotcom_view)}")

        if symbol and symbol != dashboard.selected_company:
            await dashboard.select_company(symbol)
            print(f"AI chart     -> {describe(dashboard.ai_view)}")

        await asyncio.sleep(seconds)
        print(f"Next update in {dashboard.ai_view.next_update_in}s")

        await dashboard.toggle_auto_update()
        print(f"Auto-update: {dashboard.auto_update}")
        print(f"Proxy stats: {dashboard.service.client.get_stats()}")
    finally:
        await dashboard.close()


def main():
    symbol = sys.argv[1].upper() if len(sys.argv) > 1 else ""
    seconds = float(sys.argv[2]) if len(sys.argv) > 2 else 5.0
    asyncio.run(run(symbol, seconds))


if __name__ == "__main__":
    main()
