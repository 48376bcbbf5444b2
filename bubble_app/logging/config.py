"""
Centralized logging configuration for the bubble dashboard.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_fetch_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the market data subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying ``subsystem="market_data"``
    """
    return get_logger(name).bind(subsystem="market_data")


def get_view_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the chart view subsystem."""
    return get_logger(name).bind(subsystem="chart_view")


def log_proxy_attempt(
    logger: FilteringBoundLogger,
    symbol: str,
    proxy_index: int,
    succeeded: bool,
    reason: Optional[str] = None,
    last_price: Optional[float] = None,
    last_date: Optional[str] = None,
) -> None:
    """
    Log the outcome of one proxy attempt with a standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Ticker being fetched
        proxy_index: Position of the proxy in the priority list
        succeeded: Whether the proxy produced a valid chart payload
        reason: Failure description when the attempt failed
        last_price: Close of the newest candle on success
        last_date: ISO date of the newest candle on success
    """
    bound_logger = logger.bind(
        symbol=symbol,
        proxy_index=proxy_index,
        proxy_result="OK" if succeeded else "FAIL",
    )

    if succeeded:
        if last_price is not None:
            bound_logger = bound_logger.bind(last_price=round(last_price, 2), last_date=last_date)
        bound_logger.info("Proxy fetch succeeded")
    else:
        bound_logger.warning("Proxy fetch failed, trying next proxy", reason=reason)
