"""
Named host backends and extension lifecycle.

Host services with more than one implementation (notification subsystem,
watch list, user tables) are looked up here by the name set in Settings.
Extensions such as CategoryWatch are tracked here with their load status.
"""
from __future__ import annotations

from typing import TypeVar, Generic, Callable, Any
from dataclasses import dataclass
from abc import ABC, abstractmethod
from enum import Enum
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginStatus(str, Enum):
    REGISTERED = "registered"
    ACTIVE = "active"
    DISABLED = "disabled"
    ERROR = "error"


@dataclass
class PluginInfo:
    name: str
    version: str
    description: str = ""


class Plugin(ABC):
    """An extension the host can load and unload."""

    @property
    @abstractmethod
    def info(self) -> PluginInfo:
        ...

    async def on_load(self) -> None:
        pass

    async def on_unload(self) -> None:
        pass


class PluginRegistry(Generic[T]):
    """
    Backend factories by name, plus registered extensions.

    A backend is built once per (name, config) and reused after that.
    Registering a name again discards whatever the old factory built.

    Example usage:
    ```python
    watchlist_backends.register("database", create_database_watchlist)
    store = watchlist_backends.get("database", config={"url": url})
    ```
    """

    def __init__(self, name: str):
        self.name = name
        self._factories: dict[str, Callable[..., T]] = {}
        self._instances: dict[tuple[str, str], T] = {}
        self._plugins: dict[str, Plugin] = {}
        self._status: dict[str, PluginStatus] = {}

    def register(self, name: str, factory: Callable[..., T]) -> None:
        if name in self._factories:
            logger.warning(f"Replacing {self.name} backend: {name}")
            self._instances = {
                key: instance for key, instance in self._instances.items()
                if key[0] != name
            }
        self._factories[name] = factory
        logger.info(f"Registered {self.name} backend: {name}")

    def has(self, name: str) -> bool:
        return name in self._factories

    def get(self, name: str, *, config: dict[str, Any] | None = None) -> T:
        """Backend built by the factory registered under name."""
        if name not in self._factories:
            available = ", ".join(self._factories) or "none"
            raise ValueError(
                f"Unknown {self.name} backend: {name}. Available: {available}"
            )

        config = config or {}
        key = (name, repr(sorted(config.items())))
        if key not in self._instances:
            self._instances[key] = self._factories[name](**config)
        return self._instances[key]

    def register_plugin(self, plugin: Plugin) -> None:
        info = plugin.info
        self._plugins[info.name] = plugin
        self._status[info.name] = PluginStatus.REGISTERED
        logger.info(f"Registered plugin: {info.name} v{info.version}")

    async def load_plugin(self, name: str) -> None:
        """Run the plugin's on_load; a failure leaves it in ERROR and re-raises."""
        plugin = self._plugins.get(name)
        if plugin is None:
            raise ValueError(f"Plugin not registered: {name}")

        try:
            await plugin.on_load()
        except Exception as e:
            self._status[name] = PluginStatus.ERROR
            logger.error(f"Failed to load plugin {name}: {e}")
            raise

        self._status[name] = PluginStatus.ACTIVE
        logger.info(f"Loaded plugin: {name}")

    async def unload_plugin(self, name: str) -> None:
        plugin = self._plugins.get(name)
        if plugin is None:
            return

        await plugin.on_unload()
        self._status[name] = PluginStatus.DISABLED
        logger.info(f"Unloaded plugin: {name}")

    def plugin_status(self, name: str) -> PluginStatus | None:
        return self._status.get(name)


# Global registries for host backends
notification_backends = PluginRegistry[Any]("notifications")
watchlist_backends = PluginRegistry[Any]("watchlist")
user_backends = PluginRegistry[Any]("users")
option_backends = PluginRegistry[Any]("options")
extensions = PluginRegistry[Any]("extensions")
