"""Shared helpers for the container types."""

from __future__ import annotations

from typing import Any


def do_nothing(value: Any) -> None:
    """Release function that leaves ``value`` alone.

    Pass it as ``free_value`` when a container should not dispose of its
    elements.
    """
    return None