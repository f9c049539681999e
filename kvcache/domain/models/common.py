"""Defines common Value Objects used across the cache layers.

These objects represent simple values like cache ids, backend keys and
lifetimes, keeping signatures self-describing.
"""

from typing import Any, Dict, List, NewType, Tuple, Union

# === Identifiers ===
CacheId = NewType("CacheId", str)          # Logical id given by the caller
BackendKey = NewType("BackendKey", str)    # Key actually handed to the backend
StorageId = NewType("StorageId", str)      # Backend key of an eager aggregate record

# === Expiration ===
LifeTime = NewType("LifeTime", int)        # Seconds, 0 => never expires

# === Values ===
# Only primitives and plain containers of them survive a round-trip through a
# backend. Nested contents are typed loosely since they are never inspected.
CacheValue = Union[None, bool, int, float, str, bytes, List[Any], Tuple[Any, ...], Dict[str, Any]]

CACHEABLE_TYPES: Tuple[type, ...] = (type(None), bool, int, float, str, bytes, list, tuple, dict)

AggregateRecord = Dict[str, Any]           # Content of an eager cache as stored in the backend
