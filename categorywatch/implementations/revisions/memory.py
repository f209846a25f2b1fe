"""
In-memory revision lookup for development and testing.
"""

from __future__ import annotations

from typing import Optional
from collections import defaultdict

from categorywatch.core.interfaces.wiki import PageIdentity, Revision, WikiPage


class MemoryRevisionLookup:
    """
    Revisions recorded per page id; the last one saved is the latest.

    Usage:
        revisions = MemoryRevisionLookup()
        revisions.save(Revision(id=10, page_id=page.id, user=alice))

        latest = await revisions.get_revision_by_title(page)
    """

    def __init__(self):
        self._revisions: dict[int, list[Revision]] = defaultdict(list)

    def save(self, revision: Revision) -> Revision:
        self._revisions[revision.page_id].append(revision)
        return revision

    def delete_page(self, page_id: int) -> None:
        self._revisions.pop(page_id, None)

    async def get_revision_by_title(
        self,
        page: WikiPage | PageIdentity,
    ) -> Optional[Revision]:
        history = self._revisions.get(page.id)
        if not history:
            return None
        return history[-1]
