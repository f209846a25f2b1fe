"""
Category-watch services.
"""

from .event_types import CATEGORYWATCH_ADD, CATEGORYWATCH_REMOVE, ChangeKind
from .observer import CategoryMembershipObserver
from .watchers import WatcherResolver
from .bundling import BundleRule, get_bundle_key
from .preferences import register_preferences
from .notification_types import define_notifications
from .presentation import CategoryWatchPresentationModel

__all__ = [
    "CATEGORYWATCH_ADD",
    "CATEGORYWATCH_REMOVE",
    "ChangeKind",
    "CategoryMembershipObserver",
    "WatcherResolver",
    "BundleRule",
    "get_bundle_key",
    "register_preferences",
    "define_notifications",
    "CategoryWatchPresentationModel",
]
