"""In-memory caches with lazy expiry."""

from lms_core.cache.session import SessionCache
from lms_core.cache.ttl import CacheEntry, TTLCache

__all__ = ["CacheEntry", "SessionCache", "TTLCache"]
