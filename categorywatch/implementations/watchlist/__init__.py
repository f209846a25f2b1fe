"""
Watch-list store implementations.
"""

from .memory import MemoryWatchedItemStore

__all__ = ["MemoryWatchedItemStore"]
