"""Notification type definitions registered with the notification subsystem."""

from __future__ import annotations

from categorywatch.core.interfaces.notifications import (
    BundleOptions,
    NotificationCategoryDefinition,
    NotificationTypeDefinition,
)
from .event_types import EVENT_TYPES
from .presentation import CategoryWatchPresentationModel
from .watchers import WatcherResolver


def define_notifications(
    notifications: dict[str, NotificationTypeDefinition],
    categories: dict[str, NotificationCategoryDefinition],
    icons: dict[str, dict[str, str]],
    *,
    resolver: WatcherResolver,
    category: str = "categorywatch",
    priority: int = 2,
    icon_path: str = "CategoryWatch/assets/catwatch.svg",
) -> None:
    """
    Register both category-watch notification types.

    Recipients are resolved through resolver.user_locator and the acting
    user is removed through resolver.user_filter, both at delivery time.
    """
    icons.setdefault(category, {})["path"] = icon_path

    for event_type in EVENT_TYPES:
        notifications[event_type] = NotificationTypeDefinition(
            type=event_type,
            title_message=f"{event_type}-title",
            category=category,
            group="neutral",
            bundle=BundleOptions(web=True, email=True, expandable=True),
            user_locators=[resolver.user_locator],
            user_filters=[resolver.user_filter],
            presentation_model=CategoryWatchPresentationModel,
        )

    categories[category] = NotificationCategoryDefinition(
        name=category,
        priority=priority,
        tooltip=f"echo-pref-tooltip-{category}",
    )
