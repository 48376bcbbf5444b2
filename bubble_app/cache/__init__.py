"""
In-memory caches with lazy time-to-live checks.
"""
from .ttl_cache import TTLCache

__all__ = ["TTLCache"]
