"""
Tests for the notification presentation model.
"""

from categorywatch.core.interfaces.notifications import NotificationEvent
from categorywatch.services.presentation import CategoryWatchPresentationModel


def make_event(category, agent, event_type="categorywatch-add"):
    return NotificationEvent(
        type=event_type,
        title=category.page,
        agent=agent,
        extra={"pageid": 42, "revid": 100},
    )


def test_single_header(category, bob):
    model = CategoryWatchPresentationModel(make_event(category, bob))

    message = model.get_header_message()

    assert model.can_render()
    assert model.get_icon_type() == "categorywatch"
    assert message.key == "notification-header-categorywatch-add"
    assert message.params == ["Bob", "Foo bar", 42]


def test_bundled_header(category, bob):
    event = make_event(category, bob, "categorywatch-remove")
    model = CategoryWatchPresentationModel(event, bundled_count=3)

    message = model.get_header_message()

    assert message.key == "notification-bundle-header-categorywatch-remove"
    assert message.params == ["Bob", "Foo bar", 3]


def test_links(category, bob):
    model = CategoryWatchPresentationModel(make_event(category, bob))

    primary = model.get_primary_link()
    secondary = model.get_secondary_links()

    assert primary.url == "/wiki/Category:Foo_bar"
    assert primary.label == "Category:Foo bar"
    assert [link.url for link in secondary] == [
        "/index.php?curid=42&oldid=100",
        "/wiki/User:Bob",
    ]


def test_custom_paths(category, bob):
    model = CategoryWatchPresentationModel(
        make_event(category, bob),
        article_path="/w/$1",
        script_path="/w/index.php",
    )

    assert model.get_primary_link().url == "/w/Category:Foo_bar"
    assert model.get_secondary_links()[0].url.startswith("/w/index.php?curid=42")


def test_cannot_render_without_agent(category):
    model = CategoryWatchPresentationModel(make_event(category, None))

    assert not model.can_render()
    assert model.get_secondary_links()[-1].label == "page"
