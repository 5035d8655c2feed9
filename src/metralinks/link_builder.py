"""Builds links to the Metra schedule site."""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from requests.models import PreparedRequest

from .models import CalendarCategory, Link, ReferenceInstants, StationPair
from .schedule_dates import reference_instants

logger = logging.getLogger(__name__)

SCHEDULE_URL = "https://metra.com/schedules"

# Union Pacific North
LINE_CODE = "UP-N"

# Station codes used on the page
WILMETTE = "WILMETTE"
ROGERS_PARK = "ROGERPK"
OGILVIE = "OTC"  # Ogilvie Transportation Center

QUICK_PAIR = StationPair(origin=WILMETTE, destination=ROGERS_PARK)
LONG_ROUTE_PAIR = StationPair(origin=OGILVIE, destination=WILMETTE)


def build_link(
    origin: str,
    destination: str,
    reference_timestamp: int,
    all_stops: bool,
    schedule_url: str = SCHEDULE_URL,
    line: str = LINE_CODE,
) -> str:
    """
    Build a schedule lookup URL.

    Args:
        origin: Origin station code (e.g., "WILMETTE"). Not validated.
        destination: Destination station code. Not validated.
        reference_timestamp: Unix seconds for the time to query.
        all_stops: Whether the site should list every intermediate stop.

    Returns:
        URL of the form
        https://metra.com/schedules?line=UP-N&orig=...&dest=...&time=...&allstops=0
    """
    params = [
        ("line", line),
        ("orig", origin),
        ("dest", destination),
        ("time", int(reference_timestamp)),
        ("allstops", 1 if all_stops else 0),
    ]
    request = PreparedRequest()
    request.prepare_url(schedule_url, params)
    return request.url


class ScheduleLinkBuilder:
    """
    Produces the page's schedule links from one set of reference instants.

    The instants are computed once, at construction, so every link for a
    given category points at the same date and time.
    """

    def __init__(
        self,
        now: Optional[datetime] = None,
        schedule_url: str = SCHEDULE_URL,
        line: str = LINE_CODE,
    ):
        """
        Initialize the builder.

        Args:
            now: Clock reading to compute from. Defaults to datetime.now().
            schedule_url: Base URL of the schedule page.
            line: Rail line identifier passed as the line parameter.
        """
        self.schedule_url = schedule_url
        self.line = line
        self.instants: ReferenceInstants = reference_instants(now)

    def links_for(self, pair: StationPair, all_stops: bool) -> List[Link]:
        """One link per calendar category for a station pair, Weekday first."""
        links = []
        for category in CalendarCategory:
            url = build_link(
                pair.origin,
                pair.destination,
                self.instants.for_category(category),
                all_stops,
                schedule_url=self.schedule_url,
                line=self.line,
            )
            links.append(Link(category=category, url=url))
        return links

    def quick_links(self, pair: StationPair = QUICK_PAIR) -> Dict[StationPair, List[Link]]:
        """Links for both directions of a short hop, without all stops."""
        return {
            pair: self.links_for(pair, all_stops=False),
            pair.reversed(): self.links_for(pair.reversed(), all_stops=False),
        }

    def long_route_links(self, pair: StationPair = LONG_ROUTE_PAIR) -> List[Link]:
        """Links for the one-way long route, listing all stops."""
        return self.links_for(pair, all_stops=True)
