"""
System failure error classifications.

These exceptions represent failures the current call cannot recover from;
the caller decides whether to degrade or retry on a later cycle.
"""

from typing import Optional, Dict, Any, List, Tuple


class SystemFailureError(Exception):
    """Base class for failures that abort the current operation."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class NetworkError(SystemFailureError):
    """Every proxy failed for a fetch, or the transport itself failed."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 attempts: Optional[List[Tuple[int, str]]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.attempts = attempts or []
