"""
Database models.
"""

from .base import Base
from .wiki import WikiUser, WatchlistItem, UserProperty

__all__ = [
    "Base",
    "WikiUser",
    "WatchlistItem",
    "UserProperty",
]
