"""
Base model class for the wiki tables the plugin reads.

The tables belong to the wiki host; column names follow the host schema.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models."""
