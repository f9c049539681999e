import pytest

from kvcache.core.lazy_cache import LazyCache, is_valid_id
from kvcache.domain.exceptions import InvalidArgumentError
from kvcache.domain.models.common import CacheId, LifeTime


@pytest.fixture
def lazy_cache(backend):
    """Fixture to create a LazyCache over an empty recording backend."""
    return LazyCache(backend)


@pytest.mark.parametrize("cache_id", ["a", "0", "valid_id-1.txt", "A.b-c_d", "9lives"])
def test_valid_ids(cache_id):
    assert is_valid_id(cache_id)


@pytest.mark.parametrize(
    "cache_id",
    ["", ".htaccess", "-dash", "_under", "bad id!", "with space", "slash/path", "tab\t", "new\n", "ümlaut", None, 12],
)
def test_invalid_ids(cache_id):
    assert not is_valid_id(cache_id)


def test_save_then_fetch_round_trips_through_backend(lazy_cache, backend):
    """Test that values are stored under the namespaced key."""
    assert lazy_cache.save(CacheId("valid_id-1.txt"), "x") is True

    assert backend.data == {"cache_valid_id-1.txt": "x"}
    assert lazy_cache.fetch(CacheId("valid_id-1.txt")) == "x"


def test_save_forwards_life_time(lazy_cache, backend):
    lazy_cache.save(CacheId("a"), [1, 2], LifeTime(3600))
    lazy_cache.save(CacheId("b"), 1)

    assert backend.saves == [("cache_a", [1, 2], 3600), ("cache_b", 1, 0)]


def test_fetch_missing_returns_backend_absent_marker(lazy_cache):
    assert lazy_cache.fetch(CacheId("missing")) is None


def test_contains_and_delete(lazy_cache):
    """Test contains before/after save and delete results."""
    assert lazy_cache.contains(CacheId("i")) is False

    lazy_cache.save(CacheId("i"), {"a": 1, "b": 2})

    assert lazy_cache.contains(CacheId("i")) is True
    assert lazy_cache.delete(CacheId("i")) is True
    assert lazy_cache.contains(CacheId("i")) is False
    assert lazy_cache.delete(CacheId("i")) is False


def test_empty_id_is_rejected(lazy_cache):
    with pytest.raises(InvalidArgumentError, match="Empty cache id given"):
        lazy_cache.save(CacheId(""), "x")


def test_malformed_id_is_rejected_and_named(lazy_cache):
    with pytest.raises(InvalidArgumentError, match="Invalid cache id request bad id!") as exc_info:
        lazy_cache.save(CacheId("bad id!"), "x")

    assert exc_info.value.value == "bad id!"


@pytest.mark.parametrize("operation", ["fetch", "contains", "delete"])
def test_every_operation_validates_ids(mock_backend, operation):
    cache = LazyCache(mock_backend)

    with pytest.raises(InvalidArgumentError):
        getattr(cache, operation)(CacheId(".hidden"))

    getattr(mock_backend, operation).assert_not_called()


def test_invalid_argument_is_a_value_error(lazy_cache):
    with pytest.raises(ValueError):
        lazy_cache.contains(CacheId(""))


def test_save_rejects_objects_without_touching_backend(mock_backend, opaque_object):
    cache = LazyCache(mock_backend)

    with pytest.raises(InvalidArgumentError, match="TransientCache"):
        cache.save(CacheId("obj"), opaque_object)

    mock_backend.save.assert_not_called()


def test_save_returns_backend_result(mock_backend):
    mock_backend.save.return_value = False
    cache = LazyCache(mock_backend)

    assert cache.save(CacheId("x"), 1) is False


def test_instances_sharing_a_backend_see_each_other(backend):
    """Namespacing is deterministic across instances."""
    first = LazyCache(backend)
    second = LazyCache(backend)

    first.save(CacheId("shared"), 42)

    assert second.contains(CacheId("shared"))
    assert second.fetch(CacheId("shared")) == 42


def test_custom_namespace(backend):
    cache = LazyCache(backend, namespace="app_")
    cache.save(CacheId("x"), 1)

    assert backend.data == {"app_x": 1}
    assert cache.namespace == "app_"


def test_flush_all_flushes_whole_backend(lazy_cache, backend):
    backend.data["unrelated"] = "value"
    lazy_cache.save(CacheId("x"), 1)

    assert lazy_cache.flush_all() is True

    assert backend.data == {}
    assert backend.flushes == 1


def test_save_accepts_bytes(lazy_cache, backend):
    assert lazy_cache.save(CacheId("raw"), b"payload") is True
    assert backend.data["cache_raw"] == b"payload"
