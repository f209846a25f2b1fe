"""
Wiki host protocols.
Implementations: DatabaseWatchedItemStore, MemoryWatchedItemStore, ...

The plugin never reaches for host singletons; every host service it needs
is one of the protocols below, passed in at construction time.
"""
from __future__ import annotations

from typing import Protocol, Any, Optional
from dataclasses import dataclass


NS_MAIN = 0
NS_USER = 2
NS_CATEGORY = 14

NAMESPACE_PREFIXES = {
    NS_USER: "User",
    NS_CATEGORY: "Category",
}


def to_dbkey(text: str) -> str:
    """Normalise a title to its database key form."""
    return text.strip().replace(" ", "_")


@dataclass(frozen=True)
class PageIdentity:
    """
    Namespace + title key of a page.

    `id` is 0 for pages that do not exist (yet).
    """
    namespace: int
    dbkey: str
    id: int = 0

    @property
    def text(self) -> str:
        """Title with spaces, as shown to users."""
        return self.dbkey.replace("_", " ")

    def __str__(self) -> str:
        prefix = NAMESPACE_PREFIXES.get(self.namespace)
        if prefix:
            return f"{prefix}:{self.text}"
        return self.text


@dataclass(frozen=True)
class User:
    """Wiki account."""
    id: int
    name: str


@dataclass(frozen=True)
class WikiPage:
    """A page whose category membership changed."""
    id: int
    namespace: int
    dbkey: str

    @property
    def identity(self) -> PageIdentity:
        return PageIdentity(self.namespace, self.dbkey, self.id)


@dataclass(frozen=True)
class Category:
    """A category; its description page lives in NS_CATEGORY."""
    name: str
    page_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", to_dbkey(self.name))

    @property
    def page(self) -> PageIdentity:
        return PageIdentity(NS_CATEGORY, self.name, self.page_id)


@dataclass(frozen=True)
class Revision:
    """
    Immutable snapshot of a page.

    `user` is None when the author is hidden or unknown.
    """
    id: int
    page_id: int
    user: Optional[User] = None


class WatchedItemStore(Protocol):
    """
    Protocol for the host's watch list.

    Read-only from the plugin's point of view.
    """

    async def count_watchers(self, target: PageIdentity) -> int:
        """Number of users watching target."""
        ...

    async def list_watcher_ids(self, target: PageIdentity) -> list[int]:
        """
        User ids watching exactly target (namespace + dbkey).

        Rows are returned as stored; duplicates are not collapsed.
        """
        ...


class RevisionLookup(Protocol):
    """Protocol for revision lookups."""

    async def get_revision_by_title(
        self,
        page: WikiPage | PageIdentity,
    ) -> Optional[Revision]:
        """Latest revision of page, or None if it has none."""
        ...


class UserFactory(Protocol):
    """Protocol for loading users."""

    async def new_from_id(self, user_id: int) -> Optional[User]:
        """Load a user, None if the id is unknown."""
        ...


class UserOptionsLookup(Protocol):
    """Protocol for reading user preferences."""

    async def get_option(
        self,
        user: User,
        key: str,
        default: Any = None,
    ) -> Any:
        """Value of a user option, or default when unset."""
        ...
