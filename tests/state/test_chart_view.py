"""Tests for chart view state and its refresh lifecycle."""

import asyncio

import pytest

from bubble_app.config.defaults import DefaultConfig, RefreshParams
from bubble_app.errors import EmptyDataError, NetworkError
from bubble_app.state.chart_view import ChartView


class FakeService:
    """Service double recording calls; ``failure`` makes series loads raise."""

    def __init__(self, series, config=None):
        self.series = series
        self.config = config or DefaultConfig()
        self.failure = None
        self.series_calls = []
        self.dotcom_calls = 0

    async def get_series(self, symbol=None):
        self.series_calls.append(symbol)
        if self.failure is not None:
            raise self.failure
        return self.series

    async def get_dotcom_series(self):
        self.dotcom_calls += 1
        return self.series


@pytest.fixture
def service(make_daily_series):
    return FakeService(make_daily_series(10))


def run(coro):
    return asyncio.run(coro)


class TestLoading:
    """Test load_data outcomes."""

    def test_ai_view_loads_symbol(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)

        assert view.is_loading
        assert run(view.load_data()) is True

        assert service.series_calls == ["NVDA"]
        assert not view.is_loading
        assert view.payload["title"] == "NVDA (2020-Present)"
        assert view.payload["symbol"] == "NVDA"
        assert len(view.payload["series"][0]["data"]) == 10
        assert view.last_update_time is not None

    def test_dotcom_view(self, service):
        view = ChartView(service, is_dotcom=True)

        async def _run():
            await view.start()
            running = view.scheduler.running
            await view.close()
            return running

        assert run(_run()) is False
        assert service.dotcom_calls == 1
        assert view.payload["title"] == "Dotcom Bubble (1995-2003)"
        assert view.payload["symbol"] is None
        assert view.last_update_time is None

    def test_ai_view_without_symbol_does_nothing(self, service):
        view = ChartView(service)

        assert run(view.load_data()) is False
        assert service.series_calls == []
        assert view.is_loading

    @pytest.mark.parametrize("failure", [
        NetworkError("all proxies failed", symbol="NVDA"),
        EmptyDataError("No data in date range"),
    ])
    def test_failure_keeps_loader(self, service, failure):
        service.failure = failure
        view = ChartView(service, symbol="NVDA", auto_update=False)

        assert run(view.load_data()) is False

        assert view.is_loading
        assert view.payload is None

    def test_failure_keeps_previous_chart(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)
        run(view.load_data())
        payload = view.payload

        service.failure = NetworkError("down")
        view.is_loading = True
        run(view.load_data())

        assert view.payload is payload
        assert view.is_loading

    def test_payload_is_downsampled(self, make_daily_series):
        series = make_daily_series(1001)
        view = ChartView(FakeService(series), symbol="NVDA", auto_update=False)

        run(view.load_data())

        data = view.payload["series"][0]["data"]
        assert len(data) == 335
        assert data[-1]["x"] == series[-1].timestamp

    def test_viewport_width_sizes_chart(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False, viewport_width=320)
        run(view.load_data())
        assert view.payload["height"] == 300


class TestSymbolChanges:
    def test_new_symbol_reloads(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)
        run(view.load_data())

        run(view.set_symbol("AMD"))

        assert service.series_calls == ["NVDA", "AMD"]
        assert view.payload["title"] == "AMD (2020-Present)"

    def test_same_symbol_ignored(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)
        run(view.set_symbol("NVDA"))
        assert service.series_calls == []

    def test_dotcom_ignores_symbol(self, service):
        view = ChartView(service, is_dotcom=True)
        run(view.set_symbol("NVDA"))
        assert view.symbol == ""
        assert service.dotcom_calls == 0


class TestCountdown:
    """Test the countdown and update tick handlers."""

    def test_countdown_decrements_then_wraps(self, service):
        view = ChartView(service, symbol="NVDA")
        assert view.next_update_in == 30

        for _ in range(30):
            view._on_countdown_tick()
        assert view.next_update_in == 0

        view._on_countdown_tick()
        assert view.next_update_in == 30

    def test_countdown_paused_without_auto_update(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)
        view._on_countdown_tick()
        assert view.next_update_in == 30

    def test_update_tick_reloads_and_resets_countdown(self, service):
        view = ChartView(service, symbol="NVDA")
        view.next_update_in = 4

        run(view._on_update_tick())

        assert service.series_calls == ["NVDA"]
        assert view.next_update_in == 30
        assert not view.is_loading

    def test_update_tick_ignored_without_auto_update(self, service):
        view = ChartView(service, symbol="NVDA", auto_update=False)
        run(view._on_update_tick())
        assert service.series_calls == []


class TestTimers:
    """Test timer ownership across the view lifecycle."""

    @pytest.fixture
    def fast_service(self, make_daily_series):
        config = DefaultConfig(refresh=RefreshParams(update_interval_seconds=0.02,
                                                     countdown_interval_seconds=0.01))
        return FakeService(make_daily_series(5), config=config)

    def test_auto_refresh_runs_until_closed(self, fast_service):
        view = ChartView(fast_service, symbol="NVDA")

        async def _run():
            await view.start()
            assert view.scheduler.running
            await asyncio.sleep(0.1)
            await view.close()
            calls_at_close = len(fast_service.series_calls)
            await asyncio.sleep(0.05)
            return calls_at_close

        calls_at_close = run(_run())

        assert calls_at_close >= 2
        assert len(fast_service.series_calls) == calls_at_close
        assert not view.scheduler.running

    def test_no_timers_without_auto_update(self, fast_service):
        view = ChartView(fast_service, symbol="NVDA", auto_update=False)

        async def _run():
            await view.start()
            await asyncio.sleep(0.05)
            return view.scheduler.running

        assert run(_run()) is False
        assert fast_service.series_calls == ["NVDA"]

    def test_toggle_auto_update(self, fast_service):
        view = ChartView(fast_service, symbol="NVDA")

        async def _run():
            await view.start()
            await view.set_auto_update(False)
            stopped = not view.scheduler.running
            await view.set_auto_update(True)
            restarted = view.scheduler.running
            await view.close()
            return stopped, restarted

        assert run(_run()) == (True, True)

    def test_closed_view_does_not_restart_timers(self, fast_service):
        view = ChartView(fast_service, symbol="NVDA")

        async def _run():
            await view.close()
            await view.set_auto_update(True)
            return view.scheduler.running

        assert run(_run()) is False


class TestUnexpectedFailures:
    """Errors outside the pipeline taxonomy are contained by the view."""

    def test_unexpected_error_keeps_state(self, service):
        service.failure = AttributeError("'list' object has no attribute 'get'")
        view = ChartView(service, symbol="NVDA", auto_update=False)

        assert run(view.load_data()) is False
        assert view.is_loading
        assert view.payload is None

    def test_auto_refresh_continues_and_close_succeeds(self, make_daily_series):
        config = DefaultConfig(refresh=RefreshParams(update_interval_seconds=0.01,
                                                     countdown_interval_seconds=0.01))
        service = FakeService(make_daily_series(5), config=config)
        service.failure = AttributeError("'list' object has no attribute 'get'")
        view = ChartView(service, symbol="NVDA")

        async def _run():
            await view.start()
            await asyncio.sleep(0.1)
            running = view.scheduler.running
            await view.close()
            return running

        assert run(_run()) is True
        assert len(service.series_calls) >= 3
        assert not view.scheduler.running


class PerSymbolService(FakeService):
    """Serves a distinct series per symbol after a per-symbol delay."""

    def __init__(self, series_by_symbol, delays):
        super().__init__(series=None)
        self.series_by_symbol = series_by_symbol
        self.delays = delays

    async def get_series(self, symbol=None):
        self.series_calls.append(symbol)
        await asyncio.sleep(self.delays.get(symbol, 0))
        return self.series_by_symbol[symbol]


class TestStaleLoads:
    """Test that a slow load for a previous symbol never overwrites the current chart."""

    def test_slow_previous_symbol_result_is_discarded(self, make_candle):
        service = PerSymbolService(
            {"NVDA": [make_candle(0, 999.0)], "MSFT": [make_candle(0, 1.0)]},
            delays={"NVDA": 0.05},
        )
        view = ChartView(service, symbol="NVDA", auto_update=False)

        async def _run():
            slow_load = asyncio.create_task(view.load_data())
            await asyncio.sleep(0)
            await view.set_symbol("MSFT")
            return await slow_load

        assert run(_run()) is False

        assert service.series_calls == ["NVDA", "MSFT"]
        assert view.payload["title"] == "MSFT (2020-Present)"
        assert view.payload["symbol"] == "MSFT"
        assert view.payload["series"][0]["data"][0]["y"][0] == 1.0
        assert not view.is_loading
