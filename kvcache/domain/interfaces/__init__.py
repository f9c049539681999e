"""Domain Interfaces (Ports):

Defines the contracts (Abstract Base Classes) that storage backends and
cache facades must implement. Core logic depends on these interfaces, not
on concrete storage implementations.
"""

from .backend import CacheBackend
from .cache import Cache

__all__ = ["CacheBackend", "Cache"]
