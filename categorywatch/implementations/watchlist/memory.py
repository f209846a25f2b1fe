"""
In-memory watch-list store for development and testing.
"""

from __future__ import annotations

from categorywatch.core.interfaces.wiki import PageIdentity


class MemoryWatchedItemStore:
    """
    Watch list kept in a plain list of (user_id, namespace, dbkey) rows.

    Rows are not de-duplicated, mirroring a store without a unique key.
    """

    def __init__(self):
        self._rows: list[tuple[int, int, str]] = []

    def watch(self, user_id: int, target: PageIdentity) -> None:
        self._rows.append((user_id, target.namespace, target.dbkey))

    async def count_watchers(self, target: PageIdentity) -> int:
        return len(await self.list_watcher_ids(target))

    async def list_watcher_ids(self, target: PageIdentity) -> list[int]:
        return [
            user_id
            for user_id, namespace, dbkey in self._rows
            if namespace == target.namespace and dbkey == target.dbkey
        ]
