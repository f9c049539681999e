"""Checks applied to values before they are handed to a persistent cache."""

from typing import Any

from ..domain.exceptions import InvalidArgumentError
from ..domain.models.common import CACHEABLE_TYPES

OBJECT_NOT_CACHEABLE_MESSAGE = (
    "You cannot use this cache to cache an object, only lists, dicts, strings, bytes and numbers. "
    "Have a look at TransientCache."
)


def is_cacheable(value: Any) -> bool:
    """Returns True if ``value`` is a primitive or a plain container.

    Byte strings count as primitives. Only the top-level value is inspected;
    containers holding objects pass.
    """
    return isinstance(value, CACHEABLE_TYPES)


def ensure_cacheable(value: Any) -> None:
    """Raises InvalidArgumentError if ``value`` is an opaque object."""
    if not is_cacheable(value):
        # Nested containers are deliberately not walked, it would cost a full
        # traversal on every save.
        raise InvalidArgumentError(OBJECT_NOT_CACHEABLE_MESSAGE, argument="data", value=value)
