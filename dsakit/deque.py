"""A double-ended queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class BoundedDeque:
    """A deque that holds at most ``capacity`` values.

    Pushing onto a full deque raises ``OverflowError``. Popping from or
    peeking into an empty one raises ``IndexError``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        """The largest number of values the deque can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return whether the deque holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Return whether the deque holds ``capacity`` values."""
        return len(self._items) >= self._capacity

    def _check_room(self) -> None:
        if self.is_full():
            raise OverflowError("deque is full")

    def _check_not_empty(self) -> None:
        if not self._items:
            raise IndexError("deque is empty")

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        self._check_room()
        self._items.appendleft(value)

    def push_rear(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        self._check_room()
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        self._check_not_empty()
        return self._items.popleft()

    def pop_rear(self) -> Any:
        """Remove and return the last element."""
        self._check_not_empty()
        return self._items.pop()

    def front(self) -> Any:
        """Return the first element without removing it."""
        self._check_not_empty()
        return self._items[0]

    def rear(self) -> Any:
        """Return the last element without removing it."""
        self._check_not_empty()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedDeque({list(self._items)!r}, capacity={self._capacity})"