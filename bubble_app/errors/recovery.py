"""
Recovery strategy classifications for error handling.

These mixins categorize errors by how the caller is expected to recover.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Mixin for errors that allow continued operation with reduced functionality."""

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class RosterUnavailableError(GracefulDegradationError):
    """Remote company roster could not be fetched; the static table applies."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("degraded_functionality", "company_roster")
        kwargs.setdefault("fallback_strategy", "static_table")
        super().__init__(message, **kwargs)
