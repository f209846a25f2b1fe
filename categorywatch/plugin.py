"""
CategoryWatch plugin: wires the category-watch services to host hooks.
"""

from __future__ import annotations

from typing import Any, Optional
from dataclasses import dataclass

import structlog

from categorywatch import __version__
from categorywatch.core.config import Settings, get_settings
from categorywatch.core.hooks.manager import HookManager
from categorywatch.core.interfaces.notifications import (
    NotificationCategoryDefinition,
    NotificationEvent,
    NotificationService,
    NotificationTypeDefinition,
)
from categorywatch.core.interfaces.wiki import (
    Category,
    RevisionLookup,
    User,
    UserFactory,
    UserOptionsLookup,
    WatchedItemStore,
    WikiPage,
)
from categorywatch.core.plugins.registry import Plugin, PluginInfo
from categorywatch.services.bundling import BundleRule
from categorywatch.services.notification_types import define_notifications
from categorywatch.services.observer import CategoryMembershipObserver
from categorywatch.services.preferences import register_preferences
from categorywatch.services.watchers import WatcherResolver

logger = structlog.get_logger()

# Host hook names
PAGE_ADDED = "category.page_added"
PAGE_REMOVED = "category.page_removed"
PREFERENCES_BUILD = "preferences.build"
BUNDLE_RULES = "notifications.bundle_rules"
DEFINE_NOTIFICATION_TYPES = "notifications.define_types"


@dataclass
class CategoryWatchServices:
    """
    Host services the plugin depends on.

    notifications is None when the host runs without a notification
    subsystem.
    """
    watched_items: WatchedItemStore
    revisions: RevisionLookup
    users: UserFactory
    options: UserOptionsLookup
    notifications: Optional[NotificationService] = None


class CategoryWatchPlugin(Plugin):
    """
    Notifies watchers of a category page about pages entering or leaving it.

    Usage:
        plugin = CategoryWatchPlugin(services, settings)
        plugin.register(hooks)

        await hooks.trigger("category.page_added", Category("Foo"), page)
    """

    NAME = "CategoryWatch"

    def __init__(
        self,
        services: CategoryWatchServices,
        settings: Optional[Settings] = None,
    ):
        self.services = services
        self.settings = settings or get_settings()

        self.resolver = WatcherResolver(
            watched_items=services.watched_items,
            users=services.users,
            options=services.options,
            preference_key=self.settings.preference_key,
        )
        self.observer = CategoryMembershipObserver(
            watched_items=services.watched_items,
            revisions=services.revisions,
            notifications=(
                services.notifications
                if self.settings.notifications_available
                else None
            ),
            enabled=self.settings.enabled,
        )
        self.bundle_rule = BundleRule(self.settings.bundle_key)

    @property
    def info(self) -> PluginInfo:
        return PluginInfo(
            name=self.NAME,
            version=__version__,
            description="Notify users watching a category about membership changes",
        )

    async def on_load(self) -> None:
        logger.info(
            "categorywatch.loaded",
            notifications=self.observer.can_notify,
        )

    def register(self, hooks: HookManager) -> None:
        """Attach every handler to its host hook."""
        source = self.NAME
        hooks.register(PAGE_ADDED, self.on_category_after_page_added, source=source)
        hooks.register(PAGE_REMOVED, self.on_category_after_page_removed, source=source)
        hooks.register(PREFERENCES_BUILD, self.on_get_preferences, source=source)
        hooks.register(BUNDLE_RULES, self.bundle_rule.on_bundle_rules, source=source)
        hooks.register(
            DEFINE_NOTIFICATION_TYPES,
            self.on_before_create_notification_types,
            source=source,
        )

    def unregister(self, hooks: HookManager) -> int:
        """Detach all handlers. Returns how many were removed."""
        return hooks.unregister_source(self.NAME)

    # --- Hook handlers ---

    async def on_category_after_page_added(
        self,
        category: Category,
        page: WikiPage,
    ) -> Optional[NotificationEvent]:
        return await self.observer.on_page_added(category, page)

    async def on_category_after_page_removed(
        self,
        category: Category,
        page: WikiPage,
        page_id: int = 0,
    ) -> Optional[NotificationEvent]:
        return await self.observer.on_page_removed(category, page, page_id)

    async def on_get_preferences(
        self,
        user: User,
        preferences: dict[str, dict[str, Any]],
    ) -> None:
        register_preferences(
            preferences,
            key=self.settings.preference_key,
            section=self.settings.preference_section,
        )

    async def on_before_create_notification_types(
        self,
        notifications: dict[str, NotificationTypeDefinition],
        categories: dict[str, NotificationCategoryDefinition],
        icons: dict[str, dict[str, str]],
    ) -> None:
        define_notifications(
            notifications,
            categories,
            icons,
            resolver=self.resolver,
            category=self.settings.notification_category,
            priority=self.settings.notification_priority,
            icon_path=self.settings.icon_path,
        )
