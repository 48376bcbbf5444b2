"""
Error classification system for the market data pipeline.

This module provides the exception hierarchy raised while fetching, parsing
and normalizing candle series.
"""

from .data_quality import (
    DataQualityError,
    EmptyDataError,
    MissingDataError,
    ParseError,
)
from .system_failures import (
    NetworkError,
    SystemFailureError,
)
from .recovery import (
    GracefulDegradationError,
    RosterUnavailableError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "EmptyDataError",
    "MissingDataError",
    "ParseError",
    # System Failures
    "SystemFailureError",
    "NetworkError",
    # Recovery Categories
    "GracefulDegradationError",
    "RosterUnavailableError",
]
