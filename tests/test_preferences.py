"""
Tests for preference registration.
"""

import pytest

from categorywatch.services.preferences import register_preferences


def test_toggle_is_added():
    preferences = {"existing": {"type": "toggle"}}

    register_preferences(preferences)

    assert preferences["categorywatch-page-watch"] == {
        "type": "toggle",
        "label-message": "categorywatch-page-watch-pref",
        "section": "watchlist/advancedwatchlist",
    }
    assert "existing" in preferences  # Others untouched


def test_custom_key_and_section():
    preferences = {}

    register_preferences(preferences, key="cw", section="misc")

    assert preferences == {
        "cw": {"type": "toggle", "label-message": "cw-pref", "section": "misc"},
    }


@pytest.mark.asyncio
async def test_preferences_build_hook(plugin, hooks, alice):
    preferences = {}

    result = await hooks.trigger("preferences.build", alice, preferences)

    assert result.errors == []
    assert preferences["categorywatch-page-watch"]["type"] == "toggle"
