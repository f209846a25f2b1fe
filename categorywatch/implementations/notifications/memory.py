"""
In-memory notification subsystem for development and testing.

Stands in for the host's notification service: it stores created events and,
on delivery, runs the registered user locators and filters and asks the
bundle-rule hook for a bundle key.
"""

from __future__ import annotations

from typing import Optional
from dataclasses import dataclass, field

from categorywatch.core.hooks.manager import HookManager
from categorywatch.core.interfaces.notifications import (
    NotificationEvent,
    NotificationTypeDefinition,
    NotificationCategoryDefinition,
)
from categorywatch.core.interfaces.wiki import User


@dataclass
class Delivery:
    """Outcome of delivering one event."""
    event: NotificationEvent
    recipients: list[User] = field(default_factory=list)
    bundle_key: Optional[str] = None


class MemoryNotificationService:
    """
    In-memory notification service.

    Usage:
        service = MemoryNotificationService(hooks)
        await service.load_definitions()

        await service.create(event)      # called by the plugin
        deliveries = await service.flush()
    """

    def __init__(self, hooks: Optional[HookManager] = None):
        self.hooks = hooks
        self.pending: list[NotificationEvent] = []
        self.created: list[NotificationEvent] = []
        self.definitions: dict[str, NotificationTypeDefinition] = {}
        self.categories: dict[str, NotificationCategoryDefinition] = {}
        self.icons: dict[str, dict[str, str]] = {}

    async def load_definitions(self) -> None:
        """Collect notification types from the define_types hook."""
        if self.hooks is None:
            return
        await self.hooks.trigger(
            "notifications.define_types",
            self.definitions,
            self.categories,
            self.icons,
            raise_errors=True,
        )

    async def create(self, event: NotificationEvent) -> None:
        self.pending.append(event)
        self.created.append(event)

    async def locate_recipients(self, event: NotificationEvent) -> list[User]:
        """
        Run locators, then drop users returned by any filter.

        Recipients are unique by user id, in first-located order.
        """
        definition = self.definitions.get(event.type)
        if definition is None:
            return []

        located: list[User] = []
        for locator in definition.user_locators:
            located.extend(await locator(event))

        excluded: set[int] = set()
        for user_filter in definition.user_filters:
            excluded.update(u.id for u in await user_filter(event))

        recipients: dict[int, User] = {}
        for user in located:
            if user.id not in excluded and user.id not in recipients:
                recipients[user.id] = user
        return list(recipients.values())

    async def bundle_key(self, event: NotificationEvent) -> Optional[str]:
        """Bundle key from the bundle_rules filter hook, None if unbundled."""
        if self.hooks is None:
            return None
        return await self.hooks.filter("notifications.bundle_rules", None, event)

    async def deliver(self, event: NotificationEvent) -> Delivery:
        return Delivery(
            event=event,
            recipients=await self.locate_recipients(event),
            bundle_key=await self.bundle_key(event),
        )

    async def flush(self) -> list[Delivery]:
        """Deliver every pending event, oldest first."""
        pending, self.pending = self.pending, []
        return [await self.deliver(event) for event in pending]
