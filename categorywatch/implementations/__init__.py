"""
Backend implementations for core interfaces.
"""

from categorywatch.implementations.watchlist.memory import MemoryWatchedItemStore
from categorywatch.implementations.users.memory import (
    MemoryUserFactory,
    MemoryUserOptionsLookup,
)
from categorywatch.implementations.revisions.memory import MemoryRevisionLookup
from categorywatch.implementations.notifications.memory import (
    MemoryNotificationService,
)

__all__ = [
    "MemoryWatchedItemStore",
    "MemoryUserFactory",
    "MemoryUserOptionsLookup",
    "MemoryRevisionLookup",
    "MemoryNotificationService",
]
