"""Registry of the cache instances used within one scope.

Hands out one eager cache per storage id, plus a shared lazy and transient
cache, all bound to the backend the registry was built with. Callers keep a
reference to the registry instead of looking caches up globally.
"""

import logging
from typing import Dict, List, Optional

from ..domain.interfaces.backend import CacheBackend
from ..domain.models.common import LifeTime, StorageId
from .eager_cache import EagerCache
from .lazy_cache import DEFAULT_NAMESPACE, LazyCache
from .transient_cache import TransientCache

logger = logging.getLogger(__name__)

DEFAULT_EAGER_STORAGE_ID = StorageId("eagercache")
DEFAULT_EAGER_LIFE_TIME = LifeTime(43200)  # 12 hours


class CacheRegistry:
    """Creates and tracks the caches bound to one backend."""

    def __init__(
        self,
        backend: CacheBackend,
        eager_storage_id: StorageId = DEFAULT_EAGER_STORAGE_ID,
        eager_life_time: LifeTime = DEFAULT_EAGER_LIFE_TIME,
        lazy_namespace: str = DEFAULT_NAMESPACE,
    ):
        """Initializes the registry.

        Args:
            backend: Backend shared by every persistent cache of the registry.
            eager_storage_id: Storage id used by ``eager()`` when none is given.
            eager_life_time: Lifetime used by ``persist_all()`` when none is given.
            lazy_namespace: Namespace token of the lazy cache.
        """
        self.backend = backend
        self.eager_storage_id = eager_storage_id
        self.eager_life_time = eager_life_time
        self.lazy_namespace = lazy_namespace

        self._eager_caches: Dict[StorageId, EagerCache] = {}
        self._lazy_cache: Optional[LazyCache] = None
        self._transient_cache: Optional[TransientCache] = None

    @property
    def storage_ids(self) -> List[StorageId]:
        """Storage ids of the eager caches created so far, oldest first."""
        return [cache.storage_id for cache in self._eager_caches.values()]

    def eager(self, storage_id: Optional[StorageId] = None) -> EagerCache:
        """Returns the eager cache for ``storage_id``, loading it on first use."""
        storage_id = storage_id or self.eager_storage_id
        cache = self._eager_caches.get(storage_id)
        if cache is None:
            cache = EagerCache(self.backend, storage_id)
            self._eager_caches[storage_id] = cache
            logger.debug(f"Registered eager cache '{storage_id}'")
        return cache

    def lazy(self) -> LazyCache:
        if self._lazy_cache is None:
            self._lazy_cache = LazyCache(self.backend, namespace=self.lazy_namespace)
        return self._lazy_cache

    def transient(self) -> TransientCache:
        if self._transient_cache is None:
            self._transient_cache = TransientCache()
        return self._transient_cache

    def persist_all(self, life_time: Optional[LifeTime] = None) -> None:
        """Persists every eager cache that has pending changes.

        Args:
            life_time: Lifetime in seconds; defaults to the registry's
                ``eager_life_time``. 0 means no expiration.
        """
        effective_life_time = self.eager_life_time if life_time is None else life_time
        dirty = [cache for cache in self._eager_caches.values() if cache.is_dirty]
        if dirty:
            logger.info(f"Persisting {len(dirty)} eager cache(s) with life_time={effective_life_time}s")
        for cache in dirty:
            cache.persist_cache_if_needed(effective_life_time)

    def flush_all(self) -> bool:
        """Flushes every cache of the registry and the backend itself.

        Returns:
            The result of the backend flush.
        """
        for cache in self._eager_caches.values():
            cache.flush_all()
        self.transient().flush_all()
        flushed = bool(self.lazy().flush_all())
        logger.info(f"Flushed all caches (backend flush {'succeeded' if flushed else 'failed'})")
        return flushed
