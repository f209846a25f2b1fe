"""
Presentation of category-watch notifications.

Turns an event into the pieces a notification UI renders: icon, header
message (key + params) and links. Message text itself lives with the host.
"""

from __future__ import annotations

from typing import Any, Optional
from dataclasses import dataclass, field
from urllib.parse import quote

from categorywatch.core.interfaces.notifications import NotificationEvent
from categorywatch.core.interfaces.wiki import NS_USER, PageIdentity


@dataclass
class Message:
    """Localisable message reference."""
    key: str
    params: list[Any] = field(default_factory=list)


@dataclass
class Link:
    url: str
    label: str


class CategoryWatchPresentationModel:
    """
    Rendering model for categorywatch-add / categorywatch-remove events.

    bundled_count > 1 switches the header to the bundle variant.
    """

    icon_type = "categorywatch"

    def __init__(
        self,
        event: NotificationEvent,
        bundled_count: int = 1,
        *,
        article_path: str = "/wiki/$1",
        script_path: str = "/index.php",
    ):
        self.event = event
        self.bundled_count = bundled_count
        self.article_path = article_path
        self.script_path = script_path

    @property
    def is_bundled(self) -> bool:
        return self.bundled_count > 1

    def can_render(self) -> bool:
        return self.event.agent is not None and self.event.title is not None

    def get_icon_type(self) -> str:
        return self.icon_type

    def get_header_message_key(self) -> str:
        if self.is_bundled:
            return f"notification-bundle-header-{self.event.type}"
        return f"notification-header-{self.event.type}"

    def get_header_message(self) -> Message:
        agent = self.event.agent.name if self.event.agent else ""
        params: list[Any] = [agent, self.event.title.text]
        if self.is_bundled:
            params.append(self.bundled_count)
        else:
            params.append(self.event.extra.get("pageid"))
        return Message(key=self.get_header_message_key(), params=params)

    def page_url(self, page: PageIdentity) -> str:
        title = quote(str(page).replace(" ", "_"), safe="/:")
        return self.article_path.replace("$1", title)

    def get_primary_link(self) -> Link:
        """The watched category."""
        return Link(url=self.page_url(self.event.title), label=str(self.event.title))

    def get_secondary_links(self) -> list[Link]:
        links = []
        page_id: Optional[int] = self.event.extra.get("pageid")
        if page_id:
            url = f"{self.script_path}?curid={page_id}"
            rev_id = self.event.extra.get("revid")
            if rev_id:
                url += f"&oldid={rev_id}"
            links.append(Link(url=url, label="page"))
        if self.event.agent is not None:
            links.append(Link(
                url=self.page_url(PageIdentity(NS_USER, self.event.agent.name)),
                label=self.event.agent.name,
            ))
        return links
