"""Tests for schedule link building and page rendering."""

import tempfile
import unittest
from datetime import datetime
from urllib.parse import urlsplit, parse_qs
import sys
from pathlib import Path

# Add src to path so we can import metralinks
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from metralinks.errors import ContainerFullError, ContainerNotFoundError
from metralinks.link_builder import (
    LONG_ROUTE_PAIR,
    QUICK_PAIR,
    ScheduleLinkBuilder,
    build_link,
)
from metralinks.models import CalendarCategory, Link, StationPair
from metralinks.page import (
    INBOUND_LIST_ID,
    LONG_ROUTE_SLOT_IDS,
    OUTBOUND_LIST_ID,
    Container,
    LinkPage,
    render_links,
    write_page,
)

WEDNESDAY_NOON = datetime(2026, 10, 21, 12, 0)


def query(url: str) -> dict:
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


class TestBuildLink(unittest.TestCase):
    """Test schedule URL construction."""

    def test_url_shape(self):
        url = build_link("WILMETTE", "ROGERPK", 1792760400, False)
        self.assertEqual(
            url,
            "https://metra.com/schedules?line=UP-N&orig=WILMETTE&dest=ROGERPK"
            "&time=1792760400&allstops=0",
        )

    def test_all_stops_flag(self):
        self.assertEqual(query(build_link("OTC", "WILMETTE", 1, True))["allstops"], "1")
        self.assertEqual(query(build_link("OTC", "WILMETTE", 1, False))["allstops"], "0")

    def test_time_is_integer_seconds(self):
        params = query(build_link("OTC", "WILMETTE", 1792760400.75, True))
        self.assertEqual(params["time"], "1792760400")

    def test_station_codes_are_escaped(self):
        url = build_link("A&B", "C D/E", 1, False)

        self.assertIn("orig=A%26B", url)
        params = query(url)
        self.assertEqual(params["orig"], "A&B")
        self.assertEqual(params["dest"], "C D/E")
        self.assertEqual(set(params), {"line", "orig", "dest", "time", "allstops"})

    def test_custom_url_and_line(self):
        url = build_link("X", "Y", 5, False, schedule_url="https://example.test/schedules", line="MD-N")
        parts = urlsplit(url)
        self.assertEqual((parts.scheme, parts.netloc, parts.path), ("https", "example.test", "/schedules"))
        self.assertEqual(query(url)["line"], "MD-N")


class TestScheduleLinkBuilder(unittest.TestCase):
    """Test link sets for the page's station pairs."""

    def setUp(self):
        """Set up test fixtures."""
        self.builder = ScheduleLinkBuilder(now=WEDNESDAY_NOON)

    def test_links_for_pair_in_category_order(self):
        links = self.builder.links_for(QUICK_PAIR, all_stops=False)

        self.assertEqual([l.category for l in links], list(CalendarCategory))
        self.assertEqual([l.text for l in links], ["Weekday", "Saturday", "Sunday"])
        for link in links:
            params = query(link.url)
            self.assertEqual(params["orig"], "WILMETTE")
            self.assertEqual(params["dest"], "ROGERPK")
            self.assertEqual(params["time"], str(self.builder.instants.for_category(link.category)))

    def test_quick_links_cover_both_directions(self):
        quick = self.builder.quick_links()

        self.assertEqual(set(quick), {QUICK_PAIR, StationPair("ROGERPK", "WILMETTE")})
        for pair, links in quick.items():
            self.assertEqual(len(links), 3)
            for link in links:
                params = query(link.url)
                self.assertEqual((params["orig"], params["dest"]), (pair.origin, pair.destination))
                self.assertEqual(params["allstops"], "0")

    def test_long_route_lists_all_stops(self):
        links = self.builder.long_route_links()

        self.assertEqual(len(links), 3)
        for link in links:
            params = query(link.url)
            self.assertEqual((params["orig"], params["dest"]), ("OTC", "WILMETTE"))
            self.assertEqual(params["allstops"], "1")

    def test_category_shares_one_instant(self):
        """Every link for a category points at the same time."""
        quick = self.builder.quick_links()
        all_links = [l for links in quick.values() for l in links] + self.builder.long_route_links()

        for category in CalendarCategory:
            times = {query(l.url)["time"] for l in all_links if l.category is category}
            self.assertEqual(len(times), 1, category)

    def test_link_text_defaults_to_category(self):
        self.assertEqual(Link(CalendarCategory.SUNDAY, "https://x").text, "Sunday")
        self.assertEqual(Link(CalendarCategory.SUNDAY, "https://x", "Sun").text, "Sun")

    def test_pair_reversed(self):
        self.assertEqual(LONG_ROUTE_PAIR.reversed(), StationPair("WILMETTE", "OTC"))


class TestRenderLinks(unittest.TestCase):
    """Test rendering links into the page's containers."""

    def setUp(self):
        """Set up test fixtures."""
        self.builder = ScheduleLinkBuilder(now=WEDNESDAY_NOON)

    def test_anchor_counts(self):
        page = render_links(LinkPage(), self.builder)

        self.assertEqual(len(page.container(OUTBOUND_LIST_ID).links), 3)
        self.assertEqual(len(page.container(INBOUND_LIST_ID).links), 3)
        for category, slot_id in LONG_ROUTE_SLOT_IDS.items():
            slot_links = page.container(slot_id).links
            self.assertEqual(len(slot_links), 1)
            self.assertIs(slot_links[0].category, category)
        self.assertEqual(page.anchor_count(), 9)

    def test_directions_go_to_their_lists(self):
        page = render_links(LinkPage(), self.builder)

        for link in page.container(OUTBOUND_LIST_ID).links:
            self.assertEqual(query(link.url)["orig"], "WILMETTE")
        for link in page.container(INBOUND_LIST_ID).links:
            self.assertEqual(query(link.url)["orig"], "ROGERPK")

    def test_defaults_build_a_fresh_page(self):
        page = render_links()
        self.assertEqual(page.anchor_count(), 9)

    def test_missing_container_raises(self):
        page = LinkPage()
        del page.containers[INBOUND_LIST_ID]

        with self.assertRaises(ContainerNotFoundError) as ctx:
            render_links(page, self.builder)
        self.assertEqual(ctx.exception.container_id, INBOUND_LIST_ID)

    def test_single_slot_refuses_second_link(self):
        page = render_links(LinkPage(), self.builder)
        with self.assertRaises(ContainerFullError):
            render_links(page, self.builder)

    def test_html_output(self):
        html = render_links(LinkPage(), self.builder).to_html()

        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertEqual(html.count('target="_blank"'), 9)
        self.assertIn(f'<ul id="{OUTBOUND_LIST_ID}"><li><a ', html)
        self.assertIn('<span id="otc-sunday"><a ', html)
        self.assertIn("&amp;allstops=1", html)
        self.assertNotIn("&allstops", html)

    def test_empty_containers_render(self):
        self.assertEqual(Container("x").to_html(), '<ul id="x"></ul>')
        self.assertEqual(Container("y", single_slot=True).to_html(), '<span id="y"></span>')

    def test_write_page(self):
        page = render_links(LinkPage(), self.builder)
        with tempfile.TemporaryDirectory() as tmp:
            path = write_page(Path(tmp) / "metra.html", page)
            self.assertEqual(path.read_text(encoding="utf-8"), page.to_html())


if __name__ == "__main__":
    unittest.main()
