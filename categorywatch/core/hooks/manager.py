"""
Hook dispatch between the wiki host and its extensions.

Hooks fired by the wiki host:
- category.page_added: (category, page)
- category.page_removed: (category, page, page_id)
- preferences.build: (user, preferences) - mutate preferences
- notifications.define_types: (notifications, categories, icons)
- notifications.bundle_rules: filter, (bundle_key, event) -> bundle_key
"""
from __future__ import annotations

from typing import Callable, Any, Awaitable
from dataclasses import dataclass, field
from enum import IntEnum
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Any]]


class HookPriority(IntEnum):
    """Lower runs first."""
    FIRST = 0
    NORMAL = 50
    LAST = 100


@dataclass
class Hook:
    name: str
    handler: Handler
    priority: int = HookPriority.NORMAL
    source: str = ""  # extension that attached the handler


@dataclass
class HookResult:
    """Return values and failures collected by one trigger() call."""
    hook_name: str
    results: list[Any] = field(default_factory=list)
    errors: list[tuple[str, Exception]] = field(default_factory=list)


class HookManager:
    """
    Runs the handlers attached to named host hooks.

    Handlers are awaited one at a time in priority order, inside the
    caller's task; equal priorities keep registration order.

    Example usage:
    ```python
    hooks = HookManager()
    hooks.register("category.page_added", plugin.on_category_after_page_added,
                   source="CategoryWatch")

    await hooks.trigger("category.page_added", category, page)
    ```
    """

    def __init__(self):
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def register(
        self,
        name: str,
        handler: Handler,
        *,
        priority: int = HookPriority.NORMAL,
        source: str = "",
    ) -> Hook:
        hook = Hook(name=name, handler=handler, priority=priority, source=source)

        handlers = self._hooks[name]
        handlers.append(hook)
        handlers.sort(key=lambda h: h.priority)

        logger.debug(f"Hook {name}: attached handler from {source or 'host'}")
        return hook

    def unregister_source(self, source: str) -> int:
        """Detach every handler attached by source. Returns how many went."""
        removed = 0
        for name, handlers in self._hooks.items():
            kept = [h for h in handlers if h.source != source]
            removed += len(handlers) - len(kept)
            self._hooks[name] = kept
        return removed

    def hook_names(self, source: str | None = None) -> list[str]:
        """Sorted names of hooks with handlers, limited to source if given."""
        return sorted(
            name for name, handlers in self._hooks.items()
            if any(source is None or h.source == source for h in handlers)
        )

    async def trigger(
        self,
        name: str,
        *args,
        raise_errors: bool = False,
        **kwargs,
    ) -> HookResult:
        """
        Await every handler of name with the given arguments.

        A failing handler is logged and recorded in the result and the rest
        still run, unless raise_errors is set.
        """
        result = HookResult(hook_name=name)

        for hook in list(self._hooks.get(name, [])):
            try:
                result.results.append(await hook.handler(*args, **kwargs))
            except Exception as e:
                if raise_errors:
                    raise
                origin = hook.source or repr(hook.handler)
                logger.error(f"Hook {name} handler from {origin} failed: {e}")
                result.errors.append((origin, e))

        return result

    async def filter(
        self,
        name: str,
        value: Any,
        *args,
        raise_errors: bool = False,
        **kwargs,
    ) -> Any:
        """
        Thread value through every handler of name.

        Each handler gets the previous handler's return value first. A
        failing handler leaves the value unchanged unless raise_errors is set.
        """
        for hook in list(self._hooks.get(name, [])):
            try:
                value = await hook.handler(value, *args, **kwargs)
            except Exception as e:
                if raise_errors:
                    raise
                logger.error(f"Filter hook {name} failed: {e}")

        return value


# Global hook manager instance
hooks = HookManager()
