"""Revision lookup implementations."""

from .memory import MemoryRevisionLookup

__all__ = ["MemoryRevisionLookup"]
