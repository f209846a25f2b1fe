"""Notification subsystem implementations."""

from .memory import MemoryNotificationService, Delivery

__all__ = [
    "MemoryNotificationService",
    "Delivery",
]
