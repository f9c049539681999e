"""Eager cache keeping many small entries in one aggregate backend record.

Handy for things needed in nearly every request: instead of reading a hundred
entries from the backend one by one, a single record holding all of them is
loaded once and written back once. Use it only for small entries that are
accessed together, otherwise loading and parsing the record gets slow.

    cache = EagerCache(backend, StorageId("eagercache"))
    if not cache.contains("myid"):
        cache.save("myid", "test")
    ...
    # at the end of the request
    cache.persist_cache_if_needed(LifeTime(43200))
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..domain.interfaces.backend import CacheBackend
from ..domain.models.common import AggregateRecord, BackendKey, CacheId, CacheValue, LifeTime, StorageId
from .values import ensure_cacheable

logger = logging.getLogger(__name__)


class EagerCache:
    """In-memory view over one aggregate backend record, persisted in one write."""

    def __init__(self, storage: CacheBackend, storage_id: StorageId):
        """Loads the cache entries stored in ``storage`` under ``storage_id``.

        Any record that is not a mapping (missing or corrupted) starts the cache empty.
        """
        self._storage = storage
        self._storage_id = storage_id
        self._content: AggregateRecord = {}
        self._is_dirty = False

        content = storage.fetch(BackendKey(storage_id))
        if isinstance(content, Mapping):
            self._content = dict(content)
            logger.debug(f"Loaded eager cache '{storage_id}' with {len(self._content)} entries")
        else:
            logger.debug(f"No usable aggregate record for eager cache '{storage_id}', starting empty")

    @property
    def storage_id(self) -> StorageId:
        return self._storage_id

    @property
    def is_dirty(self) -> bool:
        """True if the content changed since it was loaded or last persisted."""
        return self._is_dirty

    def fetch(self, cache_id: CacheId) -> Any:
        """Fetches an entry from the cache.

        Call ``contains()`` first: a missing id raises ``KeyError``.
        """
        return self._content[cache_id]

    def contains(self, cache_id: CacheId) -> bool:
        return cache_id in self._content

    def save(self, cache_id: CacheId, content: CacheValue) -> bool:
        """Puts data into the cache. Always returns True.

        Raises:
            InvalidArgumentError: If ``content`` is an object rather than a
                primitive, bytes, list or dict.
        """
        ensure_cacheable(content)

        self._content[cache_id] = content
        self._is_dirty = True
        return True

    def delete(self, cache_id: CacheId) -> bool:
        """Deletes one cache entry.

        Returns:
            True if the entry existed and was removed, False otherwise.
        """
        if cache_id in self._content:
            del self._content[cache_id]
            self._is_dirty = True
            return True

        return False

    def flush_all(self) -> bool:
        """Drops the aggregate record and every in-memory entry. Always True."""
        self._storage.delete(BackendKey(self._storage_id))

        self._content = {}
        self._is_dirty = False
        logger.debug(f"Flushed eager cache '{self._storage_id}'")
        return True

    def persist_cache_if_needed(self, life_time: LifeTime) -> None:
        """Writes all changes made so far in a single backend call, if any.

        Args:
            life_time: Lifetime in seconds of the aggregate record, 0 meaning
                no expiration.
        """
        if not self._is_dirty:
            return

        logger.debug(
            f"Persisting eager cache '{self._storage_id}' ({len(self._content)} entries, life_time={life_time}s)"
        )
        self._storage.save(BackendKey(self._storage_id), dict(self._content), life_time)
        self._is_dirty = False
