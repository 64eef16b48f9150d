"""An iterator over a snapshot of a container's elements."""

from __future__ import annotations

from typing import Any, Iterable


class SnapshotIterator:
    """Iterate over a copy of ``elements`` taken when the iterator is made."""

    def __init__(self, elements: Iterable[Any]):
        self._elements = list(elements)
        self._next = 0

    def has_next(self) -> bool:
        """Tell whether another element remains."""
        return self._next < len(self._elements)

    def __iter__(self) -> SnapshotIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        element = self._elements[self._next]
        self._next += 1
        return element