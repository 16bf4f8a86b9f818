"""Exceptions raised by the linked list containers.

Every error derives from :class:`LinkedListError` and from the builtin a
caller would already expect for the situation, so ``except IndexError`` and
``except ValueError`` keep working:

- InvalidArgumentError  -> ValueError  (``None`` passed as data)
- OutOfRangeError       -> IndexError  (index outside the valid bound)
- EmptyCollectionError  -> IndexError  (front/back removal on an empty list)
- NotFoundError         -> ValueError  (no element equals the given data)
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base class for all linked list errors."""


class InvalidArgumentError(LinkedListError, ValueError):
    """Raised when ``None`` is given where a data value is required."""

    def __init__(self, message: str = "data is None") -> None:
        super().__init__(message)


class OutOfRangeError(LinkedListError, IndexError):
    """Raised when an index falls outside the bound allowed by an operation."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for size {size}")
        self.index = index
        self.size = size


class EmptyCollectionError(LinkedListError, IndexError):
    """Raised when removing from the front or back of an empty list."""

    def __init__(self, message: str = "remove from empty list") -> None:
        super().__init__(message)


class NotFoundError(LinkedListError, ValueError):
    """Raised when no stored element equals the requested data."""

    def __init__(self, data: object) -> None:
        super().__init__(f"{data!r} not in list")
        self.data = data
