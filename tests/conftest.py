"""
Pytest fixtures for testing.

Provides:
- In-memory host backends (watch list, users, options, revisions)
- A memory notification subsystem wired to a fresh hook manager
- The plugin registered on that hook manager
- Async SQLite engine with the wiki tables for the database backends
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from categorywatch.core.config import Settings
from categorywatch.core.hooks.manager import HookManager
from categorywatch.core.interfaces.wiki import Category, Revision, User, WikiPage
from categorywatch.implementations.notifications.memory import MemoryNotificationService
from categorywatch.implementations.revisions.memory import MemoryRevisionLookup
from categorywatch.implementations.users.memory import (
    MemoryUserFactory,
    MemoryUserOptionsLookup,
)
from categorywatch.implementations.watchlist.memory import MemoryWatchedItemStore
from categorywatch.models.database import close_db, create_session_factory, init_db
from categorywatch.plugin import CategoryWatchPlugin, CategoryWatchServices


# Test database URL (SQLite in-memory for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PREFERENCE = "categorywatch-page-watch"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, log_format="text")


# ============ Wiki Fixtures ============


@pytest.fixture
def alice() -> User:
    return User(id=1, name="Alice")


@pytest.fixture
def bob() -> User:
    return User(id=2, name="Bob")


@pytest.fixture
def carol() -> User:
    return User(id=3, name="Carol")


@pytest.fixture
def category() -> Category:
    return Category("Foo bar", page_id=7)


@pytest.fixture
def page() -> WikiPage:
    return WikiPage(id=42, namespace=0, dbkey="Some_article")


@pytest.fixture
def watchlist() -> MemoryWatchedItemStore:
    return MemoryWatchedItemStore()


@pytest.fixture
def users(alice: User, bob: User, carol: User) -> MemoryUserFactory:
    return MemoryUserFactory([alice, bob, carol])


@pytest.fixture
def options() -> MemoryUserOptionsLookup:
    return MemoryUserOptionsLookup()


@pytest.fixture
def revisions(page: WikiPage, bob: User) -> MemoryRevisionLookup:
    """Revision lookup where bob made the latest edit of page."""
    lookup = MemoryRevisionLookup()
    lookup.save(Revision(id=100, page_id=page.id, user=bob))
    return lookup


@pytest.fixture
def hooks() -> HookManager:
    return HookManager()


@pytest.fixture
def notifications(hooks: HookManager) -> MemoryNotificationService:
    return MemoryNotificationService(hooks=hooks)


@pytest.fixture
def services(
    watchlist: MemoryWatchedItemStore,
    revisions: MemoryRevisionLookup,
    users: MemoryUserFactory,
    options: MemoryUserOptionsLookup,
    notifications: MemoryNotificationService,
) -> CategoryWatchServices:
    return CategoryWatchServices(
        watched_items=watchlist,
        revisions=revisions,
        users=users,
        options=options,
        notifications=notifications,
    )


@pytest_asyncio.fixture
async def plugin(
    services: CategoryWatchServices,
    settings: Settings,
    hooks: HookManager,
    notifications: MemoryNotificationService,
) -> CategoryWatchPlugin:
    """Plugin registered on hooks, with notification types loaded."""
    plugin = CategoryWatchPlugin(services, settings)
    plugin.register(hooks)
    await notifications.load_definitions()
    return plugin


# ============ Database Fixtures ============


@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await init_db(engine)

    yield engine

    await close_db(engine)


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(db_engine)


# ============ Mock Implementations ============


class FailingNotificationService:
    """Notification subsystem whose submissions always fail."""

    def __init__(self):
        self.attempts = 0

    async def create(self, event) -> None:
        self.attempts += 1
        raise RuntimeError("notification store unavailable")


@pytest.fixture
def failing_notifications() -> FailingNotificationService:
    return FailingNotificationService()
