"""A growable LIFO stack."""

from __future__ import annotations

from typing import Any, Callable

from .adt import do_nothing
from .iterator import SnapshotIterator

DEFAULT_STACK_CAPACITY = 50


class ArrayStack:
    """Last-in first-out stack whose capacity doubles when it fills.

    ``free_value`` is called on every element still held when the stack is
    cleared.
    """

    def __init__(
        self,
        capacity: int = 0,
        free_value: Callable[[Any], object] = do_nothing,
    ):
        self.capacity = capacity if capacity > 0 else DEFAULT_STACK_CAPACITY
        self.free_value = free_value
        self._items: list[Any] = []

    def create(self) -> ArrayStack:
        """Return a new empty stack of default capacity with the same release function."""
        return ArrayStack(DEFAULT_STACK_CAPACITY, self.free_value)

    def clear(self) -> None:
        """Release every element, bottom first, and empty the stack."""
        for element in self._items:
            self.free_value(element)
        self._items.clear()

    def push(self, element: Any) -> None:
        """Place ``element`` on top, growing the capacity if needed."""
        if len(self._items) >= self.capacity:
            self.capacity *= 2
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements from top to bottom."""
        return self._items[::-1]

    def __iter__(self) -> SnapshotIterator:
        return SnapshotIterator(reversed(self._items))