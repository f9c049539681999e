"""Interface for storage backends.

A backend is a pluggable key-value store addressed by string keys with an
optional lifetime per entry. Memory, file or distributed stores can all sit
behind this contract; the cache facades never know which one they talk to.
"""

import abc
from typing import Any

from ..models.common import BackendKey, CacheValue, LifeTime


class CacheBackend(abc.ABC):
    """Abstract Base Class for key-value storage backends."""

    @abc.abstractmethod
    def fetch(self, key: BackendKey) -> Any:
        """Fetches the value stored under ``key``.

        Args:
            key: The backend key.

        Returns:
            The stored value, or the backend's absent marker (conventionally
            ``None``) when nothing is stored under the key.
        """
        pass

    @abc.abstractmethod
    def save(self, key: BackendKey, value: CacheValue, life_time: LifeTime = LifeTime(0)) -> bool:
        """Stores ``value`` under ``key``.

        Args:
            key: The backend key.
            value: A primitive or a plain nested container of primitives.
            life_time: Lifetime in seconds, 0 meaning no expiration.

        Returns:
            True if the value was stored, False otherwise.
        """
        pass

    @abc.abstractmethod
    def delete(self, key: BackendKey) -> bool:
        """Deletes the entry stored under ``key``.

        Returns:
            True if an entry was removed, False otherwise.
        """
        pass

    @abc.abstractmethod
    def flush(self) -> bool:
        """Removes every entry the backend holds."""
        pass

    @abc.abstractmethod
    def contains(self, key: BackendKey) -> bool:
        """Tests whether an entry is stored under ``key``."""
        pass
