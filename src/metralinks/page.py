"""Renders schedule links into the page's placeholder containers."""

import logging
from html import escape
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import ContainerFullError, ContainerNotFoundError
from .link_builder import LONG_ROUTE_PAIR, QUICK_PAIR, ScheduleLinkBuilder
from .models import CalendarCategory, Link

logger = logging.getLogger(__name__)

# List containers for the two directions of the quick hop
OUTBOUND_LIST_ID = "wilmette-to-rogerspark"
INBOUND_LIST_ID = "rogerspark-to-wilmette"

# Single-slot containers for the long route, one per category
LONG_ROUTE_SLOT_IDS = {
    CalendarCategory.WEEKDAY: "otc-weekday",
    CalendarCategory.SATURDAY: "otc-saturday",
    CalendarCategory.SUNDAY: "otc-sunday",
}

PAGE_TITLE = "Metra"


def anchor_html(link: Link) -> str:
    """Anchor element that opens the link in a new tab."""
    return (
        f'<a href="{escape(link.url)}" target="_blank" rel="noopener">'
        f"{escape(link.text)}</a>"
    )


class Container:
    """A placeholder element on the page that links are appended into."""

    def __init__(self, container_id: str, single_slot: bool = False):
        self.container_id = container_id
        self.single_slot = single_slot
        self.links: List[Link] = []

    def append(self, link: Link) -> None:
        if self.single_slot and self.links:
            raise ContainerFullError(
                f"Container '{self.container_id}' already holds a link"
            )
        self.links.append(link)

    def to_html(self) -> str:
        if self.single_slot:
            inner = "".join(anchor_html(link) for link in self.links)
            return f'<span id="{escape(self.container_id)}">{inner}</span>'

        items = "".join(f"<li>{anchor_html(link)}</li>" for link in self.links)
        return f'<ul id="{escape(self.container_id)}">{items}</ul>'


class LinkPage:
    """The schedule page: five empty containers, looked up by id."""

    def __init__(self):
        self.containers: Dict[str, Container] = {
            OUTBOUND_LIST_ID: Container(OUTBOUND_LIST_ID),
            INBOUND_LIST_ID: Container(INBOUND_LIST_ID),
        }
        for slot_id in LONG_ROUTE_SLOT_IDS.values():
            self.containers[slot_id] = Container(slot_id, single_slot=True)

    def container(self, container_id: str) -> Container:
        """
        Get a container by id.

        Raises:
            ContainerNotFoundError: If the page has no such container.
        """
        try:
            return self.containers[container_id]
        except KeyError:
            raise ContainerNotFoundError(container_id) from None

    def anchor_count(self) -> int:
        return sum(len(c.links) for c in self.containers.values())

    def to_html(self) -> str:
        """Render the page as a complete HTML document."""
        slots = " | ".join(
            self.container(slot_id).to_html()
            for slot_id in LONG_ROUTE_SLOT_IDS.values()
        )
        body = "\n".join([
            f"<h1>{escape(PAGE_TITLE)}</h1>",
            "<h2>Wilmette to Rogers Park</h2>",
            self.container(OUTBOUND_LIST_ID).to_html(),
            "<h2>Rogers Park to Wilmette</h2>",
            self.container(INBOUND_LIST_ID).to_html(),
            "<h2>Ogilvie to Wilmette, all stops</h2>",
            f"<p>{slots}</p>",
        ])
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(PAGE_TITLE)}</title>\n"
            "</head>\n"
            f"<body>\n{body}\n</body>\n"
            "</html>\n"
        )


def render_links(
    page: Optional[LinkPage] = None,
    builder: Optional[ScheduleLinkBuilder] = None,
) -> LinkPage:
    """
    Fill the page's containers with schedule links.

    Both directions of the quick hop go into the two list containers; the
    long route's links go one each into the single-slot containers.

    Args:
        page: Page to render into. A fresh LinkPage if omitted.
        builder: Link builder. One reading of the current time if omitted.

    Returns:
        The page, with links appended.

    Raises:
        ContainerNotFoundError: If the page is missing a container.
        ContainerFullError: If a single-slot container was already filled.
    """
    if page is None:
        page = LinkPage()
    if builder is None:
        builder = ScheduleLinkBuilder()

    quick = builder.quick_links(QUICK_PAIR)
    list_ids = {
        QUICK_PAIR: OUTBOUND_LIST_ID,
        QUICK_PAIR.reversed(): INBOUND_LIST_ID,
    }
    for pair, links in quick.items():
        container = page.container(list_ids[pair])
        for link in links:
            container.append(link)

    for link in builder.long_route_links(LONG_ROUTE_PAIR):
        page.container(LONG_ROUTE_SLOT_IDS[link.category]).append(link)

    logger.info(f"Rendered {page.anchor_count()} schedule links")
    return page


def write_page(path: Union[str, Path], page: LinkPage) -> Path:
    """Write the rendered page to path as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(page.to_html(), encoding="utf-8")
    logger.info(f"Wrote schedule page to {path}")
    return path
