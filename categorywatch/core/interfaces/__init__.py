"""
Core interfaces (protocols) for the wiki host and notification subsystem.
All host services must implement these protocols to be swappable.
"""

from .wiki import (
    NS_MAIN,
    NS_USER,
    NS_CATEGORY,
    PageIdentity,
    User,
    WikiPage,
    Category,
    Revision,
    WatchedItemStore,
    RevisionLookup,
    UserFactory,
    UserOptionsLookup,
)
from .notifications import (
    NotificationEvent,
    NotificationService,
    NotificationTypeDefinition,
    NotificationCategoryDefinition,
    BundleOptions,
    UserLocator,
    UserFilter,
)

__all__ = [
    "NS_MAIN",
    "NS_USER",
    "NS_CATEGORY",
    "PageIdentity",
    "User",
    "WikiPage",
    "Category",
    "Revision",
    "WatchedItemStore",
    "RevisionLookup",
    "UserFactory",
    "UserOptionsLookup",
    # Notifications
    "NotificationEvent",
    "NotificationService",
    "NotificationTypeDefinition",
    "NotificationCategoryDefinition",
    "BundleOptions",
    "UserLocator",
    "UserFilter",
]
