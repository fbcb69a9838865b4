"""Circular singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.doubly_linked_list import DNode
from dsakit.linked_list import Node


class CircularSinglyLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        # The tail is kept so both ends are reachable: the head is tail.next.
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _link_after_tail(self, value: Any) -> Node:
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_beginning(self, value: Any) -> None:
        """Make ``value`` the new first element."""
        self._link_after_tail(value)

    def insert_at_end(self, value: Any) -> None:
        """Make ``value`` the new last element."""
        self._tail = self._link_after_tail(value)

    def delete(self, key: Any) -> None:
        """Remove the first element equal to ``key``, if any."""
        if self._tail is None:
            return
        previous = self._tail
        current = self._tail.next
        for _ in range(self._size):
            if current.value == key:
                if self._size == 1:
                    self._tail = None
                else:
                    previous.next = current.next
                    if current is self._tail:
                        self._tail = previous
                current.next = None
                self._size -= 1
                return
            previous, current = current, current.next

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularSinglyLinkedList({list(self)!r})"


class CircularDoublyLinkedList:
    """A doubly linked list whose ends are joined in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[DNode] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _link_before_head(self, value: Any) -> DNode:
        node = DNode(value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            tail = self._head.prev
            node.prev = tail
            node.next = self._head
            tail.next = node
            self._head.prev = node
        self._size += 1
        return node

    def insert_at_beginning(self, value: Any) -> None:
        """Make ``value`` the new first element."""
        self._head = self._link_before_head(value)

    def insert_at_end(self, value: Any) -> None:
        """Make ``value`` the new last element."""
        self._link_before_head(value)

    def _iter_nodes(self) -> Iterator[DNode]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def delete(self, key: Any) -> None:
        """Remove the first element equal to ``key``, if any."""
        for node in self._iter_nodes():
            if node.value == key:
                if self._size == 1:
                    self._head = None
                else:
                    node.prev.next = node.next
                    node.next.prev = node.prev
                    if node is self._head:
                        self._head = node.next
                node.next = node.prev = None
                self._size -= 1
                return

    def __iter__(self) -> Iterator[Any]:
        for node in self._iter_nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"