"""Workload launchers, a round-robin scheduler, packet descriptors and containers."""

__version__ = "0.1.0"