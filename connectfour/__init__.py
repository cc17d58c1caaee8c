"""Connect Four rules engine with terminal and dashboard front ends."""

__version__ = "0.1.0"
