"""A growable double-ended queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from .adt import do_nothing
from .iterator import SnapshotIterator

DEFAULT_DEQUE_CAPACITY = 50


class ArrayDeque:
    """Double-ended queue whose capacity doubles when it fills.

    ``free_value`` is called on every element still held when the deque is
    cleared.
    """

    def __init__(
        self,
        capacity: int = 0,
        free_value: Callable[[Any], object] = do_nothing,
    ):
        self.capacity = capacity if capacity > 0 else DEFAULT_DEQUE_CAPACITY
        self.free_value = free_value
        self._items: deque[Any] = deque()

    def create(self) -> ArrayDeque:
        """Return a new empty deque of default capacity with the same release function."""
        return ArrayDeque(DEFAULT_DEQUE_CAPACITY, self.free_value)

    def clear(self) -> None:
        """Release every element, first to last, and empty the deque."""
        for element in self._items:
            self.free_value(element)
        self._items.clear()

    def _grow_if_full(self) -> None:
        if len(self._items) >= self.capacity:
            self.capacity *= 2

    def insert_first(self, element: Any) -> None:
        """Place ``element`` at the front, growing the capacity if needed."""
        self._grow_if_full()
        self._items.appendleft(element)

    def insert_last(self, element: Any) -> None:
        """Place ``element`` at the back, growing the capacity if needed."""
        self._grow_if_full()
        self._items.append(element)

    def first(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._items:
            raise IndexError("first of an empty deque")
        return self._items[0]

    def last(self) -> Any:
        """Return the element at the back without removing it."""
        if not self._items:
            raise IndexError("last of an empty deque")
        return self._items[-1]

    def remove_first(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise IndexError("remove_first from an empty deque")
        return self._items.popleft()

    def remove_last(self) -> Any:
        """Remove and return the element at the back."""
        if not self._items:
            raise IndexError("remove_last from an empty deque")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the deque holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements from front to back."""
        return list(self._items)

    def __iter__(self) -> SnapshotIterator:
        return SnapshotIterator(self._items)