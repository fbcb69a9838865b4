"""First-in first-out queues built three ways."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from dsakit.linked_list import Node

DEFAULT_CAPACITY = 100


class ArrayQueue:
    """A queue with a fixed capacity.

    Enqueueing onto a full queue raises ``OverflowError``; dequeueing from
    or peeking into an empty one raises ``IndexError``.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        """The largest number of values the queue can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Return whether the queue holds ``capacity`` values."""
        return len(self._items) >= self._capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class LinkedQueue:
    """An unbounded queue kept as a chain of linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[Node] = None
        self._rear: Optional[Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise ``IndexError`` if empty."""
        if self._front is None:
            raise IndexError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        node.next = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it; raise ``IndexError`` if empty."""
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """A queue kept in two stacks: values go into one and leave from the other."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._inbox and not self._outbox

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise ``IndexError`` if empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)