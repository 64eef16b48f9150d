"""A priority queue kept in a binary heap, first-in first-out among equals."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable

from .adt import do_nothing
from .iterator import SnapshotIterator

DEFAULT_HEAP_SIZE = 25


class _Entry:
    __slots__ = ("priority", "value", "sequence", "_cmp")

    def __init__(self, priority: Any, value: Any, sequence: int, cmp):
        self.priority = priority
        self.value = value
        self.sequence = sequence
        self._cmp = cmp

    def __lt__(self, other: _Entry) -> bool:
        order = self._cmp(self.priority, other.priority)
        if order == 0:
            return self.sequence < other.sequence
        return order < 0


class HeapPrioQueue:
    """Priority queue ordered by ``cmp``; the smallest priority comes out first.

    ``cmp(p1, p2)`` returns a negative, zero or positive number. Entries of
    equal priority leave in the order they were inserted. On clear,
    ``free_priority`` and ``free_value`` are called on every entry held.
    """

    def __init__(
        self,
        cmp: Callable[[Any, Any], int],
        free_priority: Callable[[Any], object] = do_nothing,
        free_value: Callable[[Any], object] = do_nothing,
    ):
        self.cmp = cmp
        self.free_priority = free_priority
        self.free_value = free_value
        self._heap: list[_Entry] = []
        self._sequence = itertools.count()

    def create(self) -> HeapPrioQueue:
        """Return a new empty queue with the same comparator and release functions."""
        return HeapPrioQueue(self.cmp, self.free_priority, self.free_value)

    def clear(self) -> None:
        """Release every priority and value held and empty the queue."""
        for entry in self._heap:
            self.free_priority(entry.priority)
            self.free_value(entry.value)
        self._heap.clear()

    def insert(self, priority: Any, value: Any) -> None:
        """Add ``value`` with ``priority``."""
        heapq.heappush(
            self._heap, _Entry(priority, value, next(self._sequence), self.cmp)
        )

    def min(self) -> tuple[Any, Any]:
        """Return ``(priority, value)`` of the first entry without removing it."""
        if not self._heap:
            raise IndexError("min of an empty priority queue")
        entry = self._heap[0]
        return entry.priority, entry.value

    def remove_min(self) -> tuple[Any, Any]:
        """Remove and return ``(priority, value)`` of the first entry."""
        if not self._heap:
            raise IndexError("remove_min from an empty priority queue")
        entry = heapq.heappop(self._heap)
        return entry.priority, entry.value

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Tell whether the queue holds no entries."""
        return not self._heap

    def to_list(self) -> list[Any]:
        """Return the values in the order they would be removed."""
        return [entry.value for entry in sorted(self._heap)]

    def __iter__(self) -> SnapshotIterator:
        return SnapshotIterator(self.to_list())