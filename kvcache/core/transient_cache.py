"""In-process cache for values that cannot go through a backend.

Entries live as long as the instance and never leave the process, so any
object can be stored, including ones the persistent caches reject.
"""

from typing import Any, Dict

from ..domain.interfaces.cache import Cache
from ..domain.models.common import CacheId, LifeTime


class TransientCache(Cache):
    """Dict-backed cache for one request or scope."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}

    def fetch(self, cache_id: CacheId) -> Any:
        """Returns the cached entry, or None if there is none."""
        return self._data.get(cache_id)

    def contains(self, cache_id: CacheId) -> bool:
        return cache_id in self._data

    def save(self, cache_id: CacheId, data: Any, life_time: LifeTime = LifeTime(0)) -> bool:
        # life_time is ignored: entries expire with the instance
        self._data[cache_id] = data
        return True

    def delete(self, cache_id: CacheId) -> bool:
        if cache_id in self._data:
            del self._data[cache_id]
            return True
        return False

    def flush_all(self) -> bool:
        self._data = {}
        return True
