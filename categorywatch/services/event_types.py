"""Notification event types emitted by the plugin."""

from enum import Enum


CATEGORYWATCH_ADD = "categorywatch-add"
CATEGORYWATCH_REMOVE = "categorywatch-remove"


class ChangeKind(str, Enum):
    """Direction of a category membership change."""
    ADDED = "added"
    REMOVED = "removed"

    @property
    def event_type(self) -> str:
        if self is ChangeKind.ADDED:
            return CATEGORYWATCH_ADD
        return CATEGORYWATCH_REMOVE


EVENT_TYPES = (CATEGORYWATCH_ADD, CATEGORYWATCH_REMOVE)
