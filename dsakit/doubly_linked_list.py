"""Doubly linked list nodes, chain helpers and a list container built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class DNode:
    """One link of a doubly linked list."""

    value: Any
    next: Optional["DNode"] = None
    prev: Optional["DNode"] = None

    def __repr__(self) -> str:
        return f"DNode({self.value!r})"


DHead = Optional[DNode]


def from_iterable(values: Iterable[Any]) -> DHead:
    """Build a doubly linked chain holding ``values``; an empty input gives ``None``."""
    head: DHead = None
    tail: DHead = None
    for value in values:
        node = DNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _iter_nodes(head: DHead) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def iter_values(head: DHead) -> Iterator[Any]:
    """Yield the values of the chain from head to tail."""
    for node in _iter_nodes(head):
        yield node.value


def delete_head(head: DHead) -> DHead:
    """Detach the first node and return the new head.

    An empty chain or a chain of one node gives ``None``.
    """
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.prev = None
    head.next = None
    return new_head


class DoublyLinkedList:
    """A doubly linked list with insertion and deletion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: DHead = None
        self._tail: DHead = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        node = DNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: DNode) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def delete_head(self) -> None:
        """Remove the first element; an empty list is left as it is."""
        if self._head is not None:
            self._unlink(self._head)

    def delete_tail(self) -> None:
        """Remove the last element; an empty list is left as it is."""
        if self._tail is not None:
            self._unlink(self._tail)

    def delete_at_position(self, position: int) -> None:
        """Remove the element at 1-based ``position``; out-of-range positions change nothing."""
        if not 1 <= position <= self._size:
            return
        for count, node in enumerate(_iter_nodes(self._head), start=1):
            if count == position:
                self._unlink(node)
                return

    def delete_value(self, value: Any) -> None:
        """Remove the first element equal to ``value``, if any."""
        for node in _iter_nodes(self._head):
            if node.value == value:
                self._unlink(node)
                return

    def __iter__(self) -> Iterator[Any]:
        return iter_values(self._head)

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"