"""Packet descriptors and the store that hands out free ones."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Any, Iterable

MAX_PID = 10


class PacketDescriptor:
    """Routing information of one packet: its destination and target PID."""

    __slots__ = ("destination", "_pid")

    def __init__(self, destination: Any = None, pid: int = 0):
        self.destination = destination
        self._pid = 0
        self.pid = pid

    @property
    def pid(self) -> int:
        """The application process the packet belongs to, 0..MAX_PID."""
        return self._pid

    @pid.setter
    def pid(self, value: int) -> None:
        if not 0 <= value <= MAX_PID:
            raise ValueError(f"pid must lie between 0 and {MAX_PID}")
        self._pid = value

    def reset(self) -> None:
        """Empty the descriptor before it is registered for a new packet."""
        self.destination = None
        self._pid = 0

    def __repr__(self) -> str:
        return f"PacketDescriptor(destination={self.destination!r}, pid={self._pid})"


class FreePacketDescriptorStore:
    """Thread-safe pool of the descriptors not currently in use.

    The pool holds at most as many descriptors as belong to it.
    """

    def __init__(self, descriptors: Iterable[PacketDescriptor] = ()):
        self._free: deque[PacketDescriptor] = deque(descriptors)
        self.capacity = len(self._free)
        lock = threading.Lock()
        self._not_full = threading.Condition(lock)
        self._not_empty = threading.Condition(lock)

    def _adopt(self, descriptor: PacketDescriptor) -> None:
        with self._not_empty:
            self.capacity += 1
            self._free.append(descriptor)
            self._not_empty.notify()

    def get(self) -> PacketDescriptor:
        """Take a free descriptor, waiting until one is available."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._free))
            descriptor = self._free.popleft()
            self._not_full.notify()
            return descriptor

    def try_get(self) -> PacketDescriptor:
        """Take a free descriptor; raise queue.Empty if none is available."""
        with self._not_empty:
            if not self._free:
                raise queue.Empty
            descriptor = self._free.popleft()
            self._not_full.notify()
            return descriptor

    def put(self, descriptor: PacketDescriptor) -> None:
        """Return a descriptor to the pool, waiting while the pool is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._free) < self.capacity)
            self._free.append(descriptor)
            self._not_empty.notify()

    def try_put(self, descriptor: PacketDescriptor) -> bool:
        """Return a descriptor if there is room; tell whether it was taken."""
        with self._not_full:
            if len(self._free) >= self.capacity:
                return False
            self._free.append(descriptor)
            self._not_empty.notify()
            return True

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._free)


def create_free_packet_descriptors(store: FreePacketDescriptorStore, count: int) -> int:
    """Populate ``store`` with ``count`` new descriptors; return how many."""
    if count < 0:
        raise ValueError("count must not be negative")
    for _ in range(count):
        store._adopt(PacketDescriptor())
    return count