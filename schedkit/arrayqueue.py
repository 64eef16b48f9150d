"""A growable FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from .adt import do_nothing
from .iterator import SnapshotIterator

DEFAULT_QUEUE_CAPACITY = 50


class ArrayQueue:
    """First-in first-out queue whose capacity doubles when it fills.

    ``free_value`` is called on every element still held when the queue is
    cleared.
    """

    def __init__(
        self,
        capacity: int = 0,
        free_value: Callable[[Any], object] = do_nothing,
    ):
        self.capacity = capacity if capacity > 0 else DEFAULT_QUEUE_CAPACITY
        self.free_value = free_value
        self._items: deque[Any] = deque()

    def create(self) -> ArrayQueue:
        """Return a new empty queue of default capacity with the same release function."""
        return ArrayQueue(DEFAULT_QUEUE_CAPACITY, self.free_value)

    def clear(self) -> None:
        """Release every element, front first, and empty the queue."""
        for element in self._items:
            self.free_value(element)
        self._items.clear()

    def enqueue(self, element: Any) -> None:
        """Append ``element`` at the back, growing the capacity if needed."""
        if len(self._items) >= self.capacity:
            self.capacity *= 2
        self._items.append(element)

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements from front to back."""
        return list(self._items)

    def __iter__(self) -> SnapshotIterator:
        return SnapshotIterator(self._items)