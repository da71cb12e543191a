"""seqlist - Singly linked list with explicit empty/not-found signaling."""

from seqlist.errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    SeqListError,
)
from seqlist.linkedlist import Node, SequentialLinkedList
from seqlist.types import ABSENT, Absent, Maybe

__version__ = "0.0.1"

__all__ = [
    "SequentialLinkedList",
    "Node",
    "ABSENT",
    "Absent",
    "Maybe",
    "SeqListError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
]
