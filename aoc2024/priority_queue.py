"""A min-priority queue keyed by integer priorities."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-heap of values ordered by priority; values need not be comparable."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, T]] = []
        self._counter = itertools.count()

    def insert(self, value: T, priority: int) -> None:
        """Add ``value`` with the given priority."""
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def delete_min(self) -> tuple[T, int]:
        """Remove and return ``(value, priority)`` with the lowest priority.

        Raises IndexError when the queue is empty.
        """
        if not self._heap:
            raise IndexError("delete_min from an empty priority queue")
        priority, _, value = heapq.heappop(self._heap)
        return value, priority

    def is_empty(self) -> bool:
        """Return True when no values are queued."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)