"""
Register all backend implementations with their registries.

Call register_backends() at startup, before the container is used.
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from categorywatch.core.config import DatabaseSettings, get_settings
from categorywatch.core.hooks.manager import HookManager
from categorywatch.core.plugins.registry import (
    notification_backends,
    option_backends,
    user_backends,
    watchlist_backends,
)


@lru_cache
def wiki_sessions(url: str, echo: bool = False) -> async_sessionmaker[AsyncSession]:
    """One engine per wiki database URL, shared by every database backend."""
    from categorywatch.models.database import create_engine, create_session_factory

    return create_session_factory(create_engine(DatabaseSettings(url=url, echo=echo)))


def _database_sessions(config: dict) -> async_sessionmaker[AsyncSession]:
    database = get_settings().database
    return wiki_sessions(config.get("url", database.url), database.echo)


def register_backends(hooks: HookManager) -> None:
    """Register all backend implementations."""

    # ============ Notification Backends ============

    def create_memory_notifications(**config):
        from categorywatch.implementations.notifications.memory import (
            MemoryNotificationService,
        )
        return MemoryNotificationService(hooks=hooks)

    notification_backends.register("memory", create_memory_notifications)

    # ============ Watch-list Backends ============

    def create_memory_watchlist(**config):
        from categorywatch.implementations.watchlist.memory import (
            MemoryWatchedItemStore,
        )
        return MemoryWatchedItemStore()

    def create_database_watchlist(**config):
        from categorywatch.implementations.watchlist.database import (
            DatabaseWatchedItemStore,
        )
        return DatabaseWatchedItemStore(_database_sessions(config))

    watchlist_backends.register("memory", create_memory_watchlist)
    watchlist_backends.register("database", create_database_watchlist)

    # ============ User Backends ============
    # Only the database has these; with the memory watch list the host
    # hands its own user services to the container.

    def create_database_users(**config):
        from categorywatch.implementations.users.database import DatabaseUserFactory
        return DatabaseUserFactory(_database_sessions(config))

    def create_database_options(**config):
        from categorywatch.implementations.users.database import (
            DatabaseUserOptionsLookup,
        )
        return DatabaseUserOptionsLookup(_database_sessions(config))

    user_backends.register("database", create_database_users)
    option_backends.register("database", create_database_options)
