"""Lazy cache forwarding every operation straight to the backend.

Each id is validated and moved into the cache namespace before it reaches
the backend, so raw ids never collide with unrelated backend entries.
"""

import logging
import re
from typing import Any

from ..domain.exceptions import InvalidArgumentError
from ..domain.interfaces.backend import CacheBackend
from ..domain.interfaces.cache import Cache
from ..domain.models.common import BackendKey, CacheId, CacheValue, LifeTime
from .values import ensure_cacheable

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "cache_"

# Starts with a letter or digit, then letters, digits, '_', '-' or '.'.
# Rejects ids like '.htaccess' and anything containing spaces.
VALID_ID_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9_.-]*")


def is_valid_id(cache_id: Any) -> bool:
    """Returns True if ``cache_id`` is a well-formed cache id."""
    return isinstance(cache_id, str) and VALID_ID_PATTERN.fullmatch(cache_id) is not None


class LazyCache(Cache):
    """Stateless pass-through cache over a shared backend."""

    def __init__(self, backend: CacheBackend, namespace: str = DEFAULT_NAMESPACE):
        """Initializes the cache.

        Args:
            backend: Any backend that should store the cache entries.
            namespace: Token prepended to every id before it reaches the backend.
        """
        self._backend = backend
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def fetch(self, cache_id: CacheId) -> Any:
        """Returns the cached data, or the backend's absent marker."""
        key = self._completed_key_if_valid(cache_id)

        return self._backend.fetch(key)

    def contains(self, cache_id: CacheId) -> bool:
        key = self._completed_key_if_valid(cache_id)

        return self._backend.contains(key)

    def save(self, cache_id: CacheId, data: CacheValue, life_time: LifeTime = LifeTime(0)) -> bool:
        """Puts data into the cache.

        Raises:
            InvalidArgumentError: If the id is empty or malformed, or if
                ``data`` is an object. Objects belong in a TransientCache.
        """
        key = self._completed_key_if_valid(cache_id)
        ensure_cacheable(data)

        return self._backend.save(key, data, life_time)

    def delete(self, cache_id: CacheId) -> bool:
        key = self._completed_key_if_valid(cache_id)

        return self._backend.delete(key)

    def flush_all(self) -> bool:
        """Flushes the whole backend, not only this namespace."""
        logger.debug("Flushing all entries of the lazy cache backend")
        return self._backend.flush()

    def _completed_key_if_valid(self, cache_id: CacheId) -> BackendKey:
        self._check_id(cache_id)
        return BackendKey(f"{self._namespace}{cache_id}")

    @staticmethod
    def _check_id(cache_id: CacheId) -> None:
        if not cache_id:
            raise InvalidArgumentError("Empty cache id given", argument="cache_id", value=cache_id)

        if not is_valid_id(cache_id):
            raise InvalidArgumentError(f"Invalid cache id request {cache_id}", argument="cache_id", value=cache_id)
