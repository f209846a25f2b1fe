"""
Database user backends - read the wiki's user and user_properties tables.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from categorywatch.core.interfaces.wiki import User
from categorywatch.models.wiki import WikiUser, UserProperty


class DatabaseUserFactory:
    """Loads users by id from the wiki database."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def new_from_id(self, user_id: int) -> Optional[User]:
        async with self.session_factory() as session:
            row = await session.get(WikiUser, user_id)
        if row is None:
            return None
        return User(id=row.user_id, name=row.user_name)


class DatabaseUserOptionsLookup:
    """
    Reads stored user options.

    Returns the raw stored string; callers decide how to interpret it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_option(
        self,
        user: User,
        key: str,
        default: Any = None,
    ) -> Any:
        stmt = select(UserProperty.up_value).where(
            UserProperty.up_user == user.id,
            UserProperty.up_property == key,
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            row = result.first()
        if row is None:
            return default
        return row[0]
