"""
Tests for notification type definitions.
"""

from categorywatch.services.notification_types import define_notifications
from categorywatch.services.presentation import CategoryWatchPresentationModel
from categorywatch.services.watchers import WatcherResolver


def test_both_types_are_defined(watchlist, users, options):
    resolver = WatcherResolver(watchlist, users, options)
    notifications, categories, icons = {}, {}, {}

    define_notifications(notifications, categories, icons, resolver=resolver)

    assert set(notifications) == {"categorywatch-add", "categorywatch-remove"}
    for event_type, definition in notifications.items():
        assert definition.type == event_type
        assert definition.title_message == f"{event_type}-title"
        assert definition.category == "categorywatch"
        assert definition.group == "neutral"
        assert definition.bundle.web and definition.bundle.email
        assert definition.bundle.expandable
        assert definition.user_locators == [resolver.user_locator]
        assert definition.user_filters == [resolver.user_filter]
        assert definition.presentation_model is CategoryWatchPresentationModel

    assert categories["categorywatch"].priority == 2
    assert categories["categorywatch"].tooltip == "echo-pref-tooltip-categorywatch"
    assert icons == {"categorywatch": {"path": "CategoryWatch/assets/catwatch.svg"}}


def test_existing_definitions_survive(watchlist, users, options):
    resolver = WatcherResolver(watchlist, users, options)
    notifications = {"mention": object()}
    icons = {"categorywatch": {"url": "https://example.org/cw.svg"}}

    define_notifications(
        notifications, {}, icons,
        resolver=resolver,
        icon_path="custom.svg",
    )

    assert "mention" in notifications
    assert icons["categorywatch"] == {
        "url": "https://example.org/cw.svg",
        "path": "custom.svg",
    }
