import os

import pytest
from typing import Any, Dict, List, Tuple

from kvcache.domain.interfaces.backend import CacheBackend
from kvcache.infrastructure.config.settings import clear_test_config, reset_configuration


class RecordingBackend(CacheBackend):
    """In-memory backend that records every write it receives."""

    def __init__(self, initial: Dict[str, Any] = None):
        self.data: Dict[str, Any] = dict(initial or {})
        self.saves: List[Tuple[str, Any, int]] = []
        self.deletes: List[str] = []
        self.flushes = 0

    def fetch(self, key):
        return self.data.get(key)

    def save(self, key, value, life_time=0):
        self.saves.append((key, value, life_time))
        self.data[key] = value
        return True

    def delete(self, key):
        self.deletes.append(key)
        return self.data.pop(key, None) is not None

    def flush(self):
        self.flushes += 1
        self.data.clear()
        return True

    def contains(self, key):
        return key in self.data


@pytest.fixture
def backend():
    """Provides an empty recording backend."""
    return RecordingBackend()


@pytest.fixture
def mock_backend(mocker):
    """Provides a MagicMock constrained to the CacheBackend interface."""
    mock = mocker.MagicMock(spec=CacheBackend)
    mock.fetch.return_value = None
    mock.save.return_value = True
    mock.delete.return_value = True
    mock.flush.return_value = True
    mock.contains.return_value = False
    return mock


class Opaque:
    """Stand-in for an arbitrary application object."""


@pytest.fixture
def opaque_object():
    return Opaque()


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch):
    """Keeps configuration state and KVCACHE_ variables from leaking between tests."""
    for name in list(os.environ):
        if name.startswith("KVCACHE_"):
            monkeypatch.delenv(name)
    reset_configuration()
    clear_test_config()
    yield
    reset_configuration()
    clear_test_config()
