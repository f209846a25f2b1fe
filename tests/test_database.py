"""
Tests for the database-backed host services.
"""

import pytest
import pytest_asyncio

from categorywatch.core.config import DatabaseSettings, Settings
from categorywatch.core.container import Container
from categorywatch.core.hooks.manager import HookManager
from categorywatch.core.interfaces.wiki import Category, PageIdentity, User
from categorywatch.implementations.users.database import (
    DatabaseUserFactory,
    DatabaseUserOptionsLookup,
)
from categorywatch.implementations.watchlist.database import DatabaseWatchedItemStore
from categorywatch.main import install, uninstall
from categorywatch.models.database import (
    close_db,
    create_engine,
    create_session_factory,
    init_db,
)
from categorywatch.models.wiki import UserProperty, WatchlistItem, WikiUser
from categorywatch.services.watchers import WatcherResolver

from .conftest import PREFERENCE


async def seed(session_factory):
    """
    Alice and Bob watch Category:Foo; Carol watches the article Foo.

    Alice opted in, Bob opted out, Carol never set the option.
    """
    async with session_factory() as session:
        session.add_all([
            WikiUser(user_id=1, user_name="Alice"),
            WikiUser(user_id=2, user_name="Bob"),
            WikiUser(user_id=3, user_name="Carol"),
            WatchlistItem(wl_user=1, wl_namespace=14, wl_title="Foo"),
            WatchlistItem(wl_user=2, wl_namespace=14, wl_title="Foo"),
            WatchlistItem(wl_user=3, wl_namespace=0, wl_title="Foo"),
            UserProperty(up_user=1, up_property=PREFERENCE, up_value="1"),
            UserProperty(up_user=2, up_property=PREFERENCE, up_value="0"),
        ])
        await session.commit()


@pytest_asyncio.fixture
async def seeded(session_factory):
    await seed(session_factory)
    return session_factory


@pytest.mark.asyncio
async def test_count_watchers_matches_namespace_and_title(seeded):
    store = DatabaseWatchedItemStore(seeded)

    assert await store.count_watchers(Category("Foo").page) == 2
    assert await store.count_watchers(PageIdentity(0, "Foo")) == 1
    assert await store.count_watchers(Category("Bar").page) == 0


@pytest.mark.asyncio
async def test_list_watcher_ids(seeded):
    store = DatabaseWatchedItemStore(seeded)

    assert await store.list_watcher_ids(Category("Foo").page) == [1, 2]
    assert await store.list_watcher_ids(Category("Bar").page) == []


@pytest.mark.asyncio
async def test_user_factory(seeded):
    factory = DatabaseUserFactory(seeded)

    assert await factory.new_from_id(1) == User(id=1, name="Alice")
    assert await factory.new_from_id(99) is None


@pytest.mark.asyncio
async def test_options_lookup(seeded):
    lookup = DatabaseUserOptionsLookup(seeded)
    alice, carol = User(1, "Alice"), User(3, "Carol")

    assert await lookup.get_option(alice, PREFERENCE) == "1"
    assert await lookup.get_option(carol, PREFERENCE) is None
    assert await lookup.get_option(carol, PREFERENCE, default="0") == "0"


@pytest.mark.asyncio
async def test_resolver_against_database(seeded):
    resolver = WatcherResolver(
        DatabaseWatchedItemStore(seeded),
        DatabaseUserFactory(seeded),
        DatabaseUserOptionsLookup(seeded),
    )

    assert await resolver.get_watchers(Category("Foo").page) == [User(1, "Alice")]
    assert await resolver.get_watchers(PageIdentity(0, "Foo")) == []


@pytest_asyncio.fixture
async def wiki_url(tmp_path):
    """URL of a seeded file-backed wiki database."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'wiki.db'}"
    engine = create_engine(DatabaseSettings(url=url))
    await init_db(engine)
    await seed(create_session_factory(engine))
    yield url
    await close_db(engine)


@pytest.mark.asyncio
async def test_install_with_database_watchlist(wiki_url, revisions, page):
    """Users and options come from the wiki database when the host sets none."""
    hooks = HookManager()
    container = Container()
    container.set("revisions", revisions)
    settings = Settings(
        _env_file=None,
        log_format="text",
        watchlist_backend="database",
        database=DatabaseSettings(url=wiki_url),
    )

    plugin = await install(hooks=hooks, container=container, settings=settings)
    await hooks.trigger("category.page_added", Category("Foo"), page, raise_errors=True)

    [delivery] = await container.notifications.flush()
    assert isinstance(container.users, DatabaseUserFactory)
    assert delivery.recipients == [User(1, "Alice")]

    await uninstall(plugin, hooks=hooks)
