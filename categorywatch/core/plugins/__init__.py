"""
Plugin system for extensibility.
Allows registering host backends and plugins at runtime.
"""

from .registry import (
    PluginRegistry,
    Plugin,
    PluginInfo,
    PluginStatus,
    notification_backends,
    watchlist_backends,
    user_backends,
    option_backends,
    extensions,
)

__all__ = [
    "PluginRegistry",
    "Plugin",
    "PluginInfo",
    "PluginStatus",
    "notification_backends",
    "watchlist_backends",
    "user_backends",
    "option_backends",
    "extensions",
]
