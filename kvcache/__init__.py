"""kvcache: eager and lazy cache facades over a pluggable key-value backend."""

from kvcache.bootstrap import create_cache_registry
from kvcache.core.eager_cache import EagerCache
from kvcache.core.lazy_cache import LazyCache
from kvcache.core.registry import CacheRegistry
from kvcache.core.transient_cache import TransientCache
from kvcache.domain.exceptions import InvalidArgumentError, KvCacheError
from kvcache.domain.interfaces.backend import CacheBackend
from kvcache.domain.interfaces.cache import Cache

__all__ = [
    "Cache",
    "CacheBackend",
    "CacheRegistry",
    "EagerCache",
    "InvalidArgumentError",
    "KvCacheError",
    "LazyCache",
    "TransientCache",
    "create_cache_registry",
]
