"""
In-memory user backends for development and testing.
"""

from __future__ import annotations

from typing import Any, Optional
from collections import defaultdict

from categorywatch.core.interfaces.wiki import User


class MemoryUserFactory:
    """Users held in a dict keyed by id."""

    def __init__(self, users: Optional[list[User]] = None):
        self.users: dict[int, User] = {u.id: u for u in users or []}

    def add(self, user: User) -> User:
        self.users[user.id] = user
        return user

    async def new_from_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)


class MemoryUserOptionsLookup:
    """User options held per user id."""

    def __init__(self):
        self.options: dict[int, dict[str, Any]] = defaultdict(dict)

    def set_option(self, user: User, key: str, value: Any) -> None:
        self.options[user.id][key] = value

    async def get_option(
        self,
        user: User,
        key: str,
        default: Any = None,
    ) -> Any:
        return self.options.get(user.id, {}).get(key, default)
