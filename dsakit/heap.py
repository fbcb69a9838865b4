"""A binary min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


class MinHeap:
    """A binary heap that always yields its smallest value first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._heap: list[Any] = list(values)
        heapq.heapify(self._heap)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._heap, value)

    def extract_min(self) -> Any:
        """Remove and return the smallest value; raise ``IndexError`` if empty."""
        if not self._heap:
            raise IndexError("heap is empty")
        return heapq.heappop(self._heap)

    def get_min(self) -> Any:
        """Return the smallest value without removing it; raise ``IndexError`` if empty."""
        if not self._heap:
            raise IndexError("heap is empty")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"MinHeap({sorted(self._heap)!r})"