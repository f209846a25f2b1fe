"""
Watcher resolution: who gets a category-watch notification.
"""

from __future__ import annotations

from typing import Any

import structlog

from categorywatch.core.interfaces.notifications import NotificationEvent
from categorywatch.core.interfaces.wiki import (
    PageIdentity,
    User,
    UserFactory,
    UserOptionsLookup,
    WatchedItemStore,
)

logger = structlog.get_logger()

DEFAULT_PREFERENCE_KEY = "categorywatch-page-watch"


def is_enabled(value: Any) -> bool:
    """
    Interpret a stored toggle value.

    Stores may hand back strings, where "0", "" and "false" mean off.
    """
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


class WatcherResolver:
    """
    Finds the users to notify about a page and the users to leave out.

    user_locator and user_filter are registered with the notification
    subsystem and called by it at delivery time.
    """

    def __init__(
        self,
        watched_items: WatchedItemStore,
        users: UserFactory,
        options: UserOptionsLookup,
        preference_key: str = DEFAULT_PREFERENCE_KEY,
    ):
        self.watched_items = watched_items
        self.users = users
        self.options = options
        self.preference_key = preference_key

    async def get_watchers(self, target: PageIdentity) -> list[User]:
        """
        Users watching target who opted in to category-watch notifications.

        Order follows the watch list. A user listed twice is returned twice.
        """
        user_ids = await self.watched_items.list_watcher_ids(target)

        watchers = []
        for user_id in user_ids:
            user = await self.users.new_from_id(user_id)
            if user is None:
                logger.debug("categorywatch.watcher_missing", user_id=user_id)
                continue
            if is_enabled(await self.options.get_option(user, self.preference_key)):
                watchers.append(user)

        logger.debug(
            "categorywatch.watchers_resolved",
            target=str(target),
            watching=len(user_ids),
            opted_in=len(watchers),
        )
        return watchers

    async def user_locator(self, event: NotificationEvent) -> list[User]:
        """Users that should be notified for this event."""
        return await self.get_watchers(event.title)

    async def user_filter(self, event: NotificationEvent) -> list[User]:
        """Filter out the person performing the action."""
        if event.agent is None:
            return []
        return [event.agent]
