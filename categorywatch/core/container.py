"""
Dependency injection container.
Centralizes host backend instantiation and configuration.
"""

from typing import Any, Optional
from dataclasses import dataclass, field

from .interfaces import (
    NotificationService,
    UserFactory,
    UserOptionsLookup,
    WatchedItemStore,
)
from .plugins.registry import (
    PluginRegistry,
    notification_backends,
    option_backends,
    user_backends,
    watchlist_backends,
)


@dataclass
class Container:
    """
    Dependency injection container.

    Backends with a registry (notifications, watch list) are built from
    config. Revisions, users and options are handed in with set(); users
    and options can instead come from the database watch-list backend.

    Example:
    ```python
    from categorywatch.core.container import container

    container.configure(settings.get_backends_config())
    container.set("revisions", host_revision_lookup)

    store = container.watched_items
    ```
    """

    _config: dict[str, Any] = field(default_factory=dict)
    _instances: dict[str, Any] = field(default_factory=dict)

    # Backend type selections (from config)
    notifications_type: str = "memory"
    watchlist_type: str = "memory"

    def configure(self, config: dict[str, Any]) -> None:
        """Configure the container from settings."""
        self._config = config

        backends = config.get("backends", {})
        self.notifications_type = backends.get("notifications", "memory")
        self.watchlist_type = backends.get("watchlist", "memory")

    @property
    def notifications(self) -> Optional[NotificationService]:
        """
        Configured notification subsystem.

        None when it is switched off or no backend of that name exists.
        """
        if "notifications" not in self._instances:
            if (
                self.notifications_type == "none"
                or not notification_backends.has(self.notifications_type)
            ):
                return None
            config = self._config.get("notifications", {})
            self._instances["notifications"] = notification_backends.get(
                self.notifications_type,
                config=config,
            )
        return self._instances["notifications"]

    @property
    def watched_items(self) -> WatchedItemStore:
        """Get configured watch-list store."""
        if "watched_items" not in self._instances:
            config = self._config.get("watchlist", {})
            self._instances["watched_items"] = watchlist_backends.get(
                self.watchlist_type,
                config=config,
            )
        return self._instances["watched_items"]

    @property
    def users(self) -> UserFactory:
        """User loader set by the host, else the one paired with the watch list."""
        return self._paired_service("users", user_backends)

    @property
    def options(self) -> UserOptionsLookup:
        """User option lookup set by the host, else the one paired with the watch list."""
        return self._paired_service("options", option_backends)

    def _paired_service(self, name: str, registry: PluginRegistry) -> Any:
        # The database watch list reads the host's tables; users and options
        # come from the same database.
        if name not in self._instances:
            if not registry.has(self.watchlist_type):
                raise LookupError(f"Host service not configured: {name}")
            self._instances[name] = registry.get(
                self.watchlist_type,
                config=self._config.get("watchlist", {}),
            )
        return self._instances[name]

    def require(self, name: str) -> Any:
        """Get a registered instance, failing if the host never set it."""
        if name not in self._instances:
            raise LookupError(f"Host service not configured: {name}")
        return self._instances[name]

    def set(self, name: str, instance: Any) -> None:
        """Set a custom instance."""
        self._instances[name] = instance


# Global container instance
container = Container()
