"""Core Application Layer: the cache facades.

Orchestrates cache operations on top of a storage backend supplied through
the domain interfaces. Contains no storage logic of its own.
"""

from .eager_cache import EagerCache
from .lazy_cache import LazyCache
from .registry import CacheRegistry
from .transient_cache import TransientCache

__all__ = ["EagerCache", "LazyCache", "TransientCache", "CacheRegistry"]
