"""
Pytest configuration and fixtures for seqlist.
"""

from typing import Any, Callable

import pytest

from seqlist import SequentialLinkedList


@pytest.fixture
def values() -> Callable[[SequentialLinkedList[Any]], list[Any]]:
    """Read a list's contents front to back through indexed access."""

    def _values(lst: SequentialLinkedList[Any]) -> list[Any]:
        return [lst.get(i) for i in range(len(lst))]

    return _values


@pytest.fixture
def check_invariants() -> Callable[[SequentialLinkedList[Any]], None]:
    """Assert that head, tail and length agree with the chain."""

    def _check(lst: SequentialLinkedList[Any]) -> None:
        if len(lst) == 0:
            assert lst.head is None
            assert lst.tail is None
            assert not lst
            return

        assert lst.head is not None
        assert lst.tail is not None
        node = lst.head
        for _ in range(len(lst) - 1):
            assert node.next is not None, "Chain shorter than reported length"
            node = node.next
        assert node is lst.tail
        assert node.next is None

    return _check
