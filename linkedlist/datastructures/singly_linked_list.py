from __future__ import annotations

import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from .errors import (
    EmptyCollectionError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SinglyLinkedListNode(Generic[T]):
    """A single element of a :class:`SinglyLinkedList`: data plus a forward link."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional["SinglyLinkedListNode[T]"] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SinglyLinkedListNode({self.data!r})"


class SinglyLinkedList(Generic[T]):
    """Non-circular singly-linked list with head and tail references.

    Implementation notes
    --------------------
    • `_tail` is a cache of the last node in the chain; every mutation that can
      change the last node updates it.
    • Indices are 0-based and never normalized: negative indices are out of range.
    • Index 0 and the last index are special-cased to O(1) (except
      `remove_from_back`, which must walk to the second-to-last node).
    • `None` is never stored.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[SinglyLinkedListNode[T]] = None
        self._tail: Optional[SinglyLinkedListNode[T]] = None
        self._size = 0

        if it is not None:
            for v in it:
                self.add_to_back(v)
            logger.debug("Seeded SinglyLinkedList with %d elements", self._size)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _check_data(data: Optional[T]) -> None:
        if data is None:
            raise InvalidArgumentError()

    def _node_at(self, index: int) -> SinglyLinkedListNode[T]:
        """Walk `index` steps from head. Caller guarantees 0 <= index < size."""
        n = self._head
        for _ in range(index):
            n = n.next  # type: ignore[union-attr]
        return n  # type: ignore[return-value]

    # --------------------------------- API -----------------------------------

    @property
    def head(self) -> Optional[SinglyLinkedListNode[T]]:
        """The first node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Optional[SinglyLinkedListNode[T]]:
        """The last node, or None when empty."""
        return self._tail

    def size(self) -> int:
        return self._size

    def add_at_index(self, index: int, data: T) -> None:
        """Insert `data` so that it ends up at position `index`.

        Elements previously at `index` and beyond shift one position back.
        O(index), O(1) for the front and back.

        Raises:
            InvalidArgumentError: if `data` is None.
            OutOfRangeError: if index < 0 or index > size.
        """
        self._check_data(data)
        if index < 0 or index > self._size:
            raise OutOfRangeError(index, self._size)

        if index == 0:
            self.add_to_front(data)
        elif index == self._size:
            self.add_to_back(data)
        else:
            prev = self._node_at(index - 1)
            prev.next = SinglyLinkedListNode(data, prev.next)
            self._size += 1

    def add_to_front(self, data: T) -> None:
        """Insert `data` as the new head. O(1).

        Raises:
            InvalidArgumentError: if `data` is None.
        """
        self._check_data(data)
        node = SinglyLinkedListNode(data, self._head)
        if self._size == 0:
            self._tail = node
        self._head = node
        self._size += 1

    def add_to_back(self, data: T) -> None:
        """Append `data` as the new tail. O(1).

        Raises:
            InvalidArgumentError: if `data` is None.
        """
        self._check_data(data)
        if self._size == 0:
            self.add_to_front(data)
            return

        node = SinglyLinkedListNode(data)
        self._tail.next = node  # type: ignore[union-attr]
        self._tail = node
        self._size += 1

    def remove_at_index(self, index: int) -> T:
        """Remove and return the element at `index`. O(index).

        Raises:
            OutOfRangeError: if index < 0 or index >= size.
        """
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)

        if index == 0:
            return self.remove_from_front()
        if index == self._size - 1:
            return self.remove_from_back()

        # Interior node: neither head nor tail changes.
        prev = self._node_at(index - 1)
        victim = prev.next
        prev.next = victim.next  # type: ignore[union-attr]
        victim.next = None  # type: ignore[union-attr]
        self._size -= 1
        return victim.data  # type: ignore[union-attr]

    def remove_from_front(self) -> T:
        """Remove and return the head element. O(1).

        Raises:
            EmptyCollectionError: if the list is empty.
        """
        if self._size == 0:
            raise EmptyCollectionError()

        victim = self._head
        self._head = victim.next  # type: ignore[union-attr]
        if self._head is None:
            self._tail = None
        victim.next = None  # type: ignore[union-attr]
        self._size -= 1
        return victim.data  # type: ignore[union-attr]

    def remove_from_back(self) -> T:
        """Remove and return the tail element.

        O(size): there are no back-links, so the new tail is found by walking
        from head to the second-to-last node.

        Raises:
            EmptyCollectionError: if the list is empty.
        """
        if self._size == 0:
            raise EmptyCollectionError()
        if self._size == 1:
            return self.remove_from_front()

        victim = self._tail
        new_tail = self._node_at(self._size - 2)
        new_tail.next = None
        self._tail = new_tail
        self._size -= 1
        return victim.data  # type: ignore[union-attr]

    def get(self, index: int) -> T:
        """Return the element at `index` without removing it.

        Raises:
            OutOfRangeError: if index < 0 or index >= size.
        """
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)
        if index == self._size - 1:
            return self._tail.data  # type: ignore[union-attr]
        return self._node_at(index).data

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Drop every element. Detached nodes are left to the garbage collector."""
        logger.debug("Clearing SinglyLinkedList of %d elements", self._size)
        self._head = None
        self._tail = None
        self._size = 0

    def remove_last_occurrence(self, data: T) -> T:
        """Remove and return the last element (by position) equal to `data`.

        Makes one pass from head, remembering the most recent match and the
        node before it. Matching uses ``==``, not identity; the returned value
        is the one that was stored in the list.

        Raises:
            InvalidArgumentError: if `data` is None.
            NotFoundError: if no element equals `data`.
        """
        self._check_data(data)

        prev: Optional[SinglyLinkedListNode[T]] = None
        cur = self._head
        match: Optional[SinglyLinkedListNode[T]] = None
        before_match: Optional[SinglyLinkedListNode[T]] = None
        while cur is not None:
            if cur.data == data:
                match, before_match = cur, prev
            prev, cur = cur, cur.next

        if match is None:
            raise NotFoundError(data)

        if before_match is None:
            # Match is the head.
            self._head = match.next
            if self._head is None:
                self._tail = None
        else:
            before_match.next = match.next
            if match is self._tail:
                self._tail = before_match
        match.next = None
        self._size -= 1
        return match.data

    def to_array(self) -> List[T]:
        """Return a new Python list of the elements, head to tail."""
        out: List[T] = []
        n = self._head
        while n is not None:
            out.append(n.data)
            n = n.next
        return out

    def __len__(self) -> int:
        """Number of stored elements. O(1)."""
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        """Truthiness: non-empty lists are True."""
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SinglyLinkedList({self.to_array()!r})"
