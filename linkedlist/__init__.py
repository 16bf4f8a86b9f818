"""A generic singly linked list with head and tail references."""

from .datastructures import (
    EmptyCollectionError,
    InvalidArgumentError,
    LinkedListError,
    NotFoundError,
    OutOfRangeError,
    SinglyLinkedList,
    SinglyLinkedListNode,
)

__all__ = [
    "SinglyLinkedList",
    "SinglyLinkedListNode",
    "LinkedListError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "EmptyCollectionError",
    "NotFoundError",
]
