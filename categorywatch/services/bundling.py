"""Bundling rule for category-watch notifications."""

from __future__ import annotations

from typing import Optional

from categorywatch.core.interfaces.notifications import NotificationEvent
from .event_types import EVENT_TYPES

DEFAULT_BUNDLE_KEY = "categorywatch"


def get_bundle_key(
    event_type: str,
    bundle_key: str = DEFAULT_BUNDLE_KEY,
) -> Optional[str]:
    """Bundle key for an event type; None means the type is not bundled."""
    if event_type in EVENT_TYPES:
        return bundle_key
    return None


class BundleRule:
    """
    Filter-hook adapter around get_bundle_key.

    Leaves the incoming value untouched for event types it does not own,
    so other plugins' rules keep working.
    """

    def __init__(self, bundle_key: str = DEFAULT_BUNDLE_KEY):
        self.bundle_key = bundle_key

    async def on_bundle_rules(
        self,
        bundle_string: Optional[str],
        event: NotificationEvent,
    ) -> Optional[str]:
        key = get_bundle_key(event.type, self.bundle_key)
        if key is None:
            return bundle_string
        return key
