"""Interface for per-entry caches.

Defines the contract shared by caches that address each entry individually
(lazy pass-through and transient in-process caches).
"""

import abc
from typing import Any

from ..models.common import CacheId, LifeTime


class Cache(abc.ABC):
    """Abstract Base Class for per-entry cache operations."""

    @abc.abstractmethod
    def fetch(self, cache_id: CacheId) -> Any:
        """Fetches an entry from the cache.

        Args:
            cache_id: The cache id.

        Returns:
            The cached data, or an absent marker if no entry exists.
        """
        pass

    @abc.abstractmethod
    def contains(self, cache_id: CacheId) -> bool:
        """Tests if an entry exists in the cache."""
        pass

    @abc.abstractmethod
    def save(self, cache_id: CacheId, data: Any, life_time: LifeTime = LifeTime(0)) -> bool:
        """Puts data into the cache.

        Args:
            cache_id: The cache id.
            data: The cache entry.
            life_time: Lifetime in seconds, 0 meaning no expiration.

        Returns:
            True if the entry was stored, False otherwise.
        """
        pass

    @abc.abstractmethod
    def delete(self, cache_id: CacheId) -> bool:
        """Deletes a cache entry."""
        pass

    @abc.abstractmethod
    def flush_all(self) -> bool:
        """Flushes all cache entries."""
        pass
