"""Exceptions raised by the cache facades."""

from typing import Any, Optional


class KvCacheError(Exception):
    """Base class for all kvcache errors."""


class InvalidArgumentError(KvCacheError, ValueError):
    """Raised when a cache id or a value to cache is not acceptable."""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        self.argument = argument
        self.value = value
        super().__init__(message)
