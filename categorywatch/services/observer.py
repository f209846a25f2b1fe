"""
Category membership observer.

Turns "page added to / removed from category" signals into notification
events for the category page, when someone is watching it.
"""

from __future__ import annotations

from typing import Optional

import structlog

from categorywatch.core.interfaces.notifications import (
    NotificationEvent,
    NotificationService,
)
from categorywatch.core.interfaces.wiki import (
    Category,
    RevisionLookup,
    WatchedItemStore,
    WikiPage,
)
from .event_types import ChangeKind

logger = structlog.get_logger()


class CategoryMembershipObserver:
    """
    Emits one notification event per membership change on a watched category.

    `notifications` is None when the host has no notification subsystem;
    every signal is then a no-op. Lookup and submission errors propagate.

    Usage:
        observer = CategoryMembershipObserver(
            watched_items=store,
            revisions=revision_lookup,
            notifications=notification_service,
        )
        await observer.on_page_added(Category("Foo"), page)
    """

    def __init__(
        self,
        watched_items: WatchedItemStore,
        revisions: RevisionLookup,
        notifications: Optional[NotificationService] = None,
        *,
        enabled: bool = True,
    ):
        self.watched_items = watched_items
        self.revisions = revisions
        self.notifications = notifications
        self.enabled = enabled

    @property
    def can_notify(self) -> bool:
        return self.enabled and self.notifications is not None

    async def on_page_added(
        self,
        category: Category,
        page: WikiPage,
    ) -> Optional[NotificationEvent]:
        """Page was added to category."""
        return await self.notify(category, page, ChangeKind.ADDED)

    async def on_page_removed(
        self,
        category: Category,
        page: WikiPage,
        page_id: int = 0,
    ) -> Optional[NotificationEvent]:
        """
        Page was taken out of category.

        page_id is what older hosts pass alongside the page; page.id wins.
        """
        return await self.notify(category, page, ChangeKind.REMOVED)

    async def notify(
        self,
        category: Category,
        page: WikiPage,
        kind: ChangeKind,
    ) -> Optional[NotificationEvent]:
        """
        Build and submit the event for one membership change.

        Returns the submitted event, or None when nothing was sent.
        """
        target = category.page
        log = logger.bind(
            category=category.name,
            page_id=page.id,
            change=kind.value,
        )

        if not await self.watched_items.count_watchers(target):
            # Nobody watches the category
            log.debug("categorywatch.skip", reason="no_watchers")
            return None

        if not self.can_notify:
            log.debug("categorywatch.skip", reason="notifications_unavailable")
            return None

        revision = await self.revisions.get_revision_by_title(page)
        if revision is None:
            log.info("categorywatch.skip", reason="no_revision")
            return None

        event = NotificationEvent(
            type=kind.event_type,
            title=target,
            agent=revision.user,
            extra={
                "pageid": page.id,
                "revid": revision.id,
            },
        )
        await self.notifications.create(event)

        log.info(
            "categorywatch.notification_created",
            event_type=event.type,
            event_id=event.id,
            agent=revision.user.name if revision.user else None,
            rev_id=revision.id,
        )
        return event
