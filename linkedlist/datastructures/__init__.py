from .errors import (
    EmptyCollectionError,
    InvalidArgumentError,
    LinkedListError,
    NotFoundError,
    OutOfRangeError,
)
from .singly_linked_list import SinglyLinkedList, SinglyLinkedListNode

__all__ = [
    "SinglyLinkedList",
    "SinglyLinkedListNode",
    "LinkedListError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "EmptyCollectionError",
    "NotFoundError",
]
