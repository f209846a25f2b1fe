"""
Database watch-list store - reads the wiki's watchlist table.
"""

from __future__ import annotations

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from categorywatch.core.interfaces.wiki import PageIdentity
from categorywatch.models.wiki import WatchlistItem


class DatabaseWatchedItemStore:
    """
    Watch-list store backed by the wiki database.

    Usage:
        store = DatabaseWatchedItemStore(session_factory)

        if await store.count_watchers(category.page):
            user_ids = await store.list_watcher_ids(category.page)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @staticmethod
    def _matches(target: PageIdentity):
        return (
            WatchlistItem.wl_namespace == target.namespace,
            WatchlistItem.wl_title == target.dbkey,
        )

    async def count_watchers(self, target: PageIdentity) -> int:
        """Count rows watching target."""
        stmt = (
            select(func.count())
            .select_from(WatchlistItem)
            .where(*self._matches(target))
        )
        async with self.session_factory() as session:
            return await session.scalar(stmt) or 0

    async def list_watcher_ids(self, target: PageIdentity) -> list[int]:
        """User ids watching target, in row order."""
        stmt = (
            select(WatchlistItem.wl_user)
            .where(*self._matches(target))
            .order_by(WatchlistItem.wl_id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())
