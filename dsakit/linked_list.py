"""Singly linked list nodes and the operations that walk and reshape them.

Every operation takes the head of a chain (a ``Node``, or ``None`` for an
empty chain) and returns the head of the resulting chain.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


Head = Optional[Node]


def from_iterable(values: Iterable[Any]) -> Head:
    """Build a chain holding ``values`` in order; an empty input gives ``None``."""
    head: Head = None
    tail: Head = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _iter_nodes(head: Head) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def iter_values(head: Head) -> Iterator[Any]:
    """Yield the values of the chain from head to tail."""
    for node in _iter_nodes(head):
        yield node.value


def to_list(head: Head) -> list[Any]:
    """Return the values of the chain as a list."""
    return list(iter_values(head))


def length(head: Head) -> int:
    """Return the number of nodes in the chain."""
    return sum(1 for _ in _iter_nodes(head))


def contains(head: Head, value: Any) -> bool:
    """Return whether some node of the chain holds ``value``."""
    return any(item == value for item in iter_values(head))


def format_list(head: Head) -> str:
    """Render the values separated by single spaces."""
    return " ".join(str(value) for value in iter_values(head))


def remove_head(head: Head) -> Head:
    """Drop the first node."""
    if head is None:
        return None
    return head.next


def remove_tail(head: Head) -> Head:
    """Drop the last node of a chain of two or more nodes.

    A chain of a single node, or an empty one, is returned unchanged.
    """
    if head is None or head.next is None:
        return head
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def remove_at(head: Head, position: int) -> Head:
    """Drop the node at 1-based ``position``; out-of-range positions change nothing."""
    if head is None:
        return None
    if position == 1:
        return head.next
    previous: Head = None
    for count, node in enumerate(_iter_nodes(head), start=1):
        if count == position:
            previous.next = node.next
            break
        previous = node
    return head


def remove_value(head: Head, value: Any) -> Head:
    """Drop the first node holding ``value``; nothing changes if there is none."""
    if head is None:
        return None
    if head.value == value:
        return head.next
    previous = head
    for node in _iter_nodes(head.next):
        if node.value == value:
            previous.next = node.next
            break
        previous = node
    return head


def insert_head(head: Head, value: Any) -> Node:
    """Put a new node holding ``value`` in front of the chain."""
    return Node(value, head)


def insert_tail(head: Head, value: Any) -> Node:
    """Append a new node holding ``value`` after the last node."""
    node = Node(value)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def insert_at(head: Head, value: Any, position: int) -> Head:
    """Insert ``value`` so that it ends up at 1-based ``position``.

    Position ``length + 1`` appends; any other position outside
    ``1 .. length + 1`` leaves the chain unchanged.
    """
    if head is None:
        return Node(value) if position == 1 else None
    if position == 1:
        return Node(value, head)
    for count, node in enumerate(_iter_nodes(head), start=1):
        if count == position - 1:
            node.next = Node(value, node.next)
            break
    return head


def insert_before(head: Head, value: Any, target: Any) -> Head:
    """Insert ``value`` just before the first node holding ``target``.

    If no node holds ``target`` the chain is unchanged.
    """
    if head is None:
        return None
    if head.value == target:
        return Node(value, head)
    node = head
    while node.next is not None:
        if node.next.value == target:
            node.next = Node(value, node.next)
            break
        node = node.next
    return head