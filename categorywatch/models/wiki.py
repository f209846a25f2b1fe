"""
Wiki host tables: accounts, watch list and user properties.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class WikiUser(Base):
    """Wiki account row."""

    __tablename__ = "user"

    user_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )


class WatchlistItem(Base):
    """
    One user watching one page.

    Pages are matched by namespace + title key, so a watch survives the
    page being deleted and re-created.
    """

    __tablename__ = "watchlist"

    wl_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    wl_user: Mapped[int] = mapped_column(Integer, nullable=False)
    wl_namespace: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
    wl_title: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("wl_user", "wl_user", "wl_namespace", "wl_title", unique=True),
        # Watchers of a page (the lookup this plugin does)
        Index("wl_namespace_title", "wl_namespace", "wl_title"),
    )


class UserProperty(Base):
    """
    Stored user option.

    Values are strings; "0" and "" mean off for toggles.
    """

    __tablename__ = "user_properties"

    up_user: Mapped[int] = mapped_column(Integer, primary_key=True)
    up_property: Mapped[str] = mapped_column(String(255), primary_key=True)
    up_value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
