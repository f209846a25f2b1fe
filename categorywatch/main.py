"""
Plugin entry point: install CategoryWatch into a running host.
"""

from typing import Optional

import structlog

from categorywatch.core.config import Settings, get_settings
from categorywatch.core.container import Container, container as default_container
from categorywatch.core.hooks.manager import HookManager, hooks as default_hooks
from categorywatch.core.logging import configure_logging
from categorywatch.core.plugins.registry import extensions
from categorywatch.plugin import CategoryWatchPlugin, CategoryWatchServices

logger = structlog.get_logger()


async def install(
    hooks: Optional[HookManager] = None,
    container: Optional[Container] = None,
    settings: Optional[Settings] = None,
) -> CategoryWatchPlugin:
    """
    Build the plugin from the container and attach it to the host hooks.

    The host must have set "revisions" on the container beforehand, and
    "users" and "options" too unless the watch list is the database one.
    Installing again replaces the handlers attached by an earlier install.
    """
    hooks = hooks or default_hooks
    container = container or default_container
    settings = settings or get_settings()

    configure_logging(settings)

    from categorywatch.implementations.register import register_backends
    register_backends(hooks)

    container.configure(settings.get_backends_config())

    services = CategoryWatchServices(
        watched_items=container.watched_items,
        revisions=container.require("revisions"),
        users=container.users,
        options=container.options,
        notifications=container.notifications,
    )

    plugin = CategoryWatchPlugin(services, settings)
    extensions.register_plugin(plugin)
    await extensions.load_plugin(plugin.info.name)

    replaced = plugin.unregister(hooks)
    plugin.register(hooks)

    # The memory subsystem learns its notification types from the hook
    notifications = services.notifications
    if notifications is not None and hasattr(notifications, "load_definitions"):
        await notifications.load_definitions()

    logger.info(
        "categorywatch.installed",
        hooks=hooks.hook_names(source=plugin.NAME),
        replaced_handlers=replaced,
    )
    return plugin


async def uninstall(
    plugin: CategoryWatchPlugin,
    hooks: Optional[HookManager] = None,
) -> None:
    """Detach the plugin from the host hooks."""
    hooks = hooks or default_hooks
    plugin.unregister(hooks)
    await extensions.unload_plugin(plugin.info.name)
