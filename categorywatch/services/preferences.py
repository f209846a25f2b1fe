"""User preference exposed to the host's preference form."""

from __future__ import annotations

from typing import Any

from .watchers import DEFAULT_PREFERENCE_KEY

DEFAULT_SECTION = "watchlist/advancedwatchlist"


def register_preferences(
    preferences: dict[str, dict[str, Any]],
    *,
    key: str = DEFAULT_PREFERENCE_KEY,
    section: str = DEFAULT_SECTION,
) -> None:
    """Add the category-watch toggle to a preference form description."""
    preferences[key] = {
        "type": "toggle",
        "label-message": f"{key}-pref",
        "section": section,
    }
