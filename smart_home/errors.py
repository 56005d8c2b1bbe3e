"""Typed failures raised by index-based lookups in the home hierarchy."""

import logging

logger = logging.getLogger(__name__)


class AccessError(IndexError):
    """Base class for failed lookups into a room or house."""


class IndexOutOfBounds(AccessError):
    """Requested position is outside ``[0, length)`` of the target collection."""

    def __init__(self, resource_type: str, index: int, length: int) -> None:
        self.resource_type = resource_type
        self.index = index
        self.length = length
        super().__init__(
            f"{resource_type} index {index} is out of bounds. Total {resource_type.lower()}: {length}"
        )


def check_index(resource_type: str, index: int, length: int) -> int:
    """Return ``index`` unchanged if it addresses an element, raise otherwise.

    Negative indexes are rejected rather than counted from the end, and
    ``bool`` is not accepted as a position.
    """
    if isinstance(index, bool):
        raise TypeError(f"{resource_type} index must be an int, not bool")
    if 0 <= index < length:
        return index
    logger.debug("Rejected %s lookup at %d (length %d)", resource_type.lower(), index, length)
    raise IndexOutOfBounds(resource_type, index, length)
