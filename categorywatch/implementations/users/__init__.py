"""User and user option implementations."""

from .memory import MemoryUserFactory, MemoryUserOptionsLookup

__all__ = [
    "MemoryUserFactory",
    "MemoryUserOptionsLookup",
]
