"""
Hook system for host events.
Lets the plugin tap into page, preference and notification events.
"""

from .manager import HookManager, Hook, HookPriority, HookResult, hooks

__all__ = [
    "HookManager",
    "Hook",
    "HookPriority",
    "HookResult",
    "hooks",
]
