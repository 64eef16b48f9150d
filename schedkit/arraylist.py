"""A growable list with explicit capacity management."""

from __future__ import annotations

from typing import Any, Callable

from .adt import do_nothing
from .iterator import SnapshotIterator

DEFAULT_ARRAYLIST_CAPACITY = 50


class ArrayList:
    """Indexed list whose capacity doubles when it fills.

    ``free_value`` is called on elements the list lets go of: every element
    on clear, the removed element on remove and the replaced one on set.
    """

    def __init__(
        self,
        capacity: int = 0,
        free_value: Callable[[Any], object] = do_nothing,
    ):
        self.capacity = capacity if capacity > 0 else DEFAULT_ARRAYLIST_CAPACITY
        self.free_value = free_value
        self._items: list[Any] = []

    def _grow_if_full(self) -> None:
        if len(self._items) >= self.capacity:
            self.capacity = max(1, 2 * self.capacity)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def add(self, element: Any) -> None:
        """Append ``element``, growing the capacity if needed."""
        self._grow_if_full()
        self._items.append(element)

    def clear(self) -> None:
        """Release every element, first to last, and empty the list."""
        for element in self._items:
            self.free_value(element)
        self._items.clear()

    def ensure_capacity(self, min_capacity: int) -> None:
        """Make room for at least ``min_capacity`` elements."""
        if self.capacity < min_capacity:
            self.capacity = min_capacity

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def insert(self, index: int, element: Any) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        Valid indices run from 0 to the current length inclusive.
        """
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._grow_if_full()
        self._items.insert(index, element)

    def is_empty(self) -> bool:
        """Tell whether the list holds no elements."""
        return not self._items

    def remove(self, index: int) -> None:
        """Remove the element at ``index`` and release it."""
        self._check_index(index)
        element = self._items.pop(index)
        self.free_value(element)

    def set(self, index: int, element: Any) -> None:
        """Replace the element at ``index`` and release the previous one."""
        self._check_index(index)
        previous = self._items[index]
        self._items[index] = element
        self.free_value(previous)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[Any]:
        """Return the elements from first to last."""
        return list(self._items)

    def trim_to_size(self) -> None:
        """Shrink the capacity to the current number of elements."""
        self.capacity = len(self._items)

    def __iter__(self) -> SnapshotIterator:
        return SnapshotIterator(self._items)