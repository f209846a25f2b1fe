"""
Notification subsystem protocol.
Implementations: MemoryNotificationService

The subsystem owns persistence, recipient resolution and delivery. The plugin
only creates events and registers the callbacks the subsystem invokes later.
"""
from __future__ import annotations

from typing import Protocol, Any, Optional, Callable, Awaitable
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid

from .wiki import PageIdentity, User


@dataclass
class NotificationEvent:
    """
    Notification payload handed to the subsystem.

    `id` and `timestamp` are bookkeeping and ignored by equality, so two
    events built from the same signal compare equal.
    """
    type: str  # e.g., "categorywatch-add"
    title: PageIdentity  # Target page
    agent: Optional[User]  # Acting user
    extra: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        compare=False,
    )


UserLocator = Callable[[NotificationEvent], Awaitable[list[User]]]
UserFilter = Callable[[NotificationEvent], Awaitable[list[User]]]


@dataclass
class BundleOptions:
    """Which delivery channels may coalesce events of a type."""
    web: bool = True
    email: bool = True
    expandable: bool = True


@dataclass
class NotificationTypeDefinition:
    """
    Registration record for one notification type.

    Locators and filters are function references resolved at delivery time.
    """
    type: str
    title_message: str
    category: str
    group: str = "neutral"
    bundle: BundleOptions = field(default_factory=BundleOptions)
    user_locators: list[UserLocator] = field(default_factory=list)
    user_filters: list[UserFilter] = field(default_factory=list)
    presentation_model: Optional[type] = None


@dataclass
class NotificationCategoryDefinition:
    """User-facing grouping of notification types."""
    name: str
    priority: int = 5
    tooltip: Optional[str] = None


class NotificationService(Protocol):
    """
    Protocol for the notification subsystem.

    create() is fire-and-forget: the event is handed over and delivered
    later, after the caller's work is done.
    """

    async def create(self, event: NotificationEvent) -> None:
        """Accept an event for delivery."""
        ...
