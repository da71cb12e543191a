"""Singly linked list with O(1) pushes at both ends."""

import logging
from typing import Generic, cast

from seqlist.errors import EmptyCollectionError, IndexOutOfRangeError
from seqlist.types import ABSENT, Absent, Maybe, V

logger = logging.getLogger(__name__)


class Node(Generic[V]):
    """A node in the singly linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: V, next: "Node[V] | None" = None) -> None:
        self.value = value
        self.next = next


class SequentialLinkedList(Generic[V]):
    """
    Singly linked list tracking its first node, last node and length.

    push_back, push_front and pop_front are O(1). pop_back and the indexed
    operations walk the chain from the front.

    Failures are reported through the return value by default: removals from
    an empty list and lookups at an invalid index return ABSENT, and set() at
    an invalid index does nothing. Pass strict=True to get exceptions instead.
    """

    def __init__(self, *, strict: bool = False) -> None:
        """
        Initialize an empty list.

        Args:
            strict: If True, raise EmptyCollectionError / IndexOutOfRangeError
                where the default mode would return ABSENT or ignore the call.
        """
        self._first: Node[V] | None = None
        self._last: Node[V] | None = None  # lookup only, the chain hangs off _first
        self._count = 0
        self._strict = strict

    @property
    def strict(self) -> bool:
        """Whether failures raise instead of returning ABSENT."""
        return self._strict

    @property
    def head(self) -> Node[V] | None:
        """The first node, or None if the list is empty."""
        return self._first

    @property
    def tail(self) -> Node[V] | None:
        """The last node, or None if the list is empty."""
        return self._last

    def is_valid_index(self, index: object) -> bool:
        """Return True if index is an int in [0, len(self))."""
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < self._count

    def _node_at(self, index: int) -> Node[V]:
        """Walk from the first node to the node at index. O(index)."""
        if not self.is_valid_index(index):
            raise IndexOutOfRangeError(
                f"Index {index!r} out of range for list of length {self._count}"
            )
        current = cast(Node[V], self._first)
        for _ in range(index):
            current = cast(Node[V], current.next)
        return current

    def _reset(self) -> None:
        # Empty state: first, last and count always move together
        self._first = None
        self._last = None
        self._count = 0

    def _empty(self, operation: str) -> Absent:
        if self._strict:
            raise EmptyCollectionError(f"Cannot {operation} from an empty list")
        return ABSENT

    def _out_of_range(self, index: object) -> Absent:
        if self._strict:
            raise IndexOutOfRangeError(
                f"Index {index!r} out of range for list of length {self._count}"
            )
        return ABSENT

    def push_back(self, value: V) -> "SequentialLinkedList[V]":
        """Append value after the last node. O(1). Returns self for chaining."""
        node = Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1
        return self

    def push_front(self, value: V) -> "SequentialLinkedList[V]":
        """Prepend value before the first node. O(1). Returns self for chaining."""
        node = Node(value, self._first)
        if self._first is None:
            self._last = node
        self._first = node
        self._count += 1
        return self

    def pop_back(self) -> Maybe[V]:
        """
        Remove and return the last value.

        O(len) since the new last node has to be found from the front.

        Returns:
            The removed value, or ABSENT if the list is empty

        Raises:
            EmptyCollectionError: If the list is empty and strict
        """
        if self._last is None:
            return self._empty("pop_back")

        value = self._last.value
        if self._count == 1:
            self._reset()
            return value

        new_last = self._node_at(self._count - 2)
        new_last.next = None
        self._last = new_last
        self._count -= 1
        return value

    def pop_front(self) -> Maybe[V]:
        """
        Remove and return the first value. O(1).

        Returns:
            The removed value, or ABSENT if the list is empty

        Raises:
            EmptyCollectionError: If the list is empty and strict
        """
        first = self._first
        if first is None:
            return self._empty("pop_front")

        if self._count == 1:
            self._reset()
            return first.value

        self._first = first.next
        self._count -= 1
        return first.value

    def get(self, index: int) -> Maybe[V]:
        """
        Return the value at index.

        Returns:
            The value, or ABSENT if index is out of range

        Raises:
            IndexOutOfRangeError: If index is out of range and strict
        """
        if not self.is_valid_index(index):
            return self._out_of_range(index)
        return self._node_at(index).value

    def set(self, index: int, value: V) -> None:
        """
        Overwrite the value at index in place.

        An out-of-range index is ignored unless the list is strict.

        Raises:
            IndexOutOfRangeError: If index is out of range and strict
        """
        if not self.is_valid_index(index):
            self._out_of_range(index)
            logger.debug("Ignoring set() at index %r, list length is %d", index, self._count)
            return
        self._node_at(index).value = value

    def remove_at(self, index: int) -> Maybe[V]:
        """
        Remove the node at index and return its value.

        Walks the chain once, stopping at the node before the target.

        Returns:
            The removed value, or ABSENT if index is out of range

        Raises:
            IndexOutOfRangeError: If index is out of range and strict
        """
        if not self.is_valid_index(index):
            return self._out_of_range(index)
        if index == 0:
            return self.pop_front()

        previous = self._node_at(index - 1)
        target = cast(Node[V], previous.next)
        previous.next = target.next
        if target is self._last:
            self._last = previous
        self._count -= 1
        return target.value

    def reverse(self) -> None:
        """Reverse the list in place. O(len) time, O(1) extra space."""
        prev: Node[V] | None = None
        curr = self._first
        while curr is not None:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following

        # The old first node is now the terminal one
        self._last = self._first
        self._first = prev
        logger.debug("Reversed list of length %d", self._count)

    def clear(self) -> None:
        """Drop every node."""
        logger.debug("Clearing list of length %d", self._count)
        self._reset()

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._count > 0

    def __repr__(self) -> str:
        values = []
        current = self._first
        while current is not None:
            values.append(current.value)
            current = current.next
        return f"{type(self).__name__}({values!r})"
