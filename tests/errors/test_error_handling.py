"""
Error handling tests for the market data pipeline.

Tests cover the error classification and how malformed payloads and empty
series surface through parsing and normalization.
"""

import pytest

from bubble_app.data.normalizer import SeriesNormalizer
from bubble_app.data.parsers import parse_quote_payload
from bubble_app.errors import (
    DataQualityError,
    EmptyDataError,
    GracefulDegradationError,
    MissingDataError,
    NetworkError,
    ParseError,
    RosterUnavailableError,
    SystemFailureError,
)

from helpers import NOW, WINDOW_START


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors are recoverable and carry context."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        parse_error = ParseError("bad payload", raw_data="<html>", expected_format="json")
        assert isinstance(parse_error, DataQualityError)
        assert parse_error.raw_data == "<html>"
        assert parse_error.expected_format == "json"

        empty_error = EmptyDataError("nothing", required_count=1, available_count=0,
                                     context={"symbol": "NVDA"})
        assert empty_error.available_count == 0
        assert empty_error.context["symbol"] == "NVDA"

        missing_error = MissingDataError("no symbol", data_type="symbol")
        assert missing_error.data_type == "symbol"

    def test_system_failure_hierarchy(self):
        """Test that system failures are not recoverable within the call."""
        error = NetworkError("all proxies failed", symbol="NVDA", attempts=[(0, "HTTPStatusError: 500")])
        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.symbol == "NVDA"
        assert error.attempts == [(0, "HTTPStatusError: 500")]
        assert NetworkError("x").attempts == []

    def test_degradation_errors(self):
        """Test that roster failures advertise their fallback."""
        error = RosterUnavailableError("roster down")
        assert isinstance(error, GracefulDegradationError)
        assert error.allows_degradation is True
        assert error.degraded_functionality == "company_roster"
        assert error.fallback_strategy == "static_table"

    def test_categories_are_disjoint(self):
        assert not issubclass(NetworkError, DataQualityError)
        assert not issubclass(ParseError, SystemFailureError)


class TestMalformedPayloads:
    """Test malformed payloads surface as ParseError."""

    @pytest.mark.parametrize("body", [
        b"",
        b"<!DOCTYPE html><html></html>",
        b"[1, 2, 3]",
        b'{"chart": null}',
        b'{"chart": {"result": null}}',
        b'{"chart": {"result": [{"timestamp": []}]}}',
        b'{"contents": "not json either"}',
    ])
    def test_malformed_payload_raises_parse_error(self, body):
        with pytest.raises(ParseError):
            parse_quote_payload(body)

    def test_parse_error_is_data_quality(self):
        with pytest.raises(DataQualityError):
            parse_quote_payload(b"garbage")


class TestEmptySeries:
    """Test normalization failures."""

    def test_empty_input(self):
        with pytest.raises(EmptyDataError) as exc_info:
            SeriesNormalizer().normalize([], WINDOW_START, NOW, symbol="NVDA")
        assert exc_info.value.context == {"symbol": "NVDA"}

    def test_nothing_inside_window(self, make_candle):
        with pytest.raises(EmptyDataError, match="No data in date range"):
            SeriesNormalizer().normalize([make_candle(WINDOW_START - 1)], WINDOW_START, NOW)
