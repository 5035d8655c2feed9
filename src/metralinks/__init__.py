"""metralinks - Links to upcoming Metra schedules for the next weekday, Saturday and Sunday."""

__version__ = "0.1.0"

from .errors import (
    MetraLinksError,
    ConfigurationError,
    ContainerNotFoundError,
    ContainerFullError,
)
from .models import CalendarCategory, StationPair, Link, ReferenceInstants
from .schedule_dates import (
    days_until_next_weekday,
    days_until_next_saturday,
    days_until_next_sunday,
    reference_instant,
    reference_instants,
)
from .link_builder import build_link, ScheduleLinkBuilder
from .page import LinkPage, render_links, write_page

__all__ = [
    "ScheduleLinkBuilder",
    "LinkPage",
    "render_links",
    "write_page",
    "build_link",
    "days_until_next_weekday",
    "days_until_next_saturday",
    "days_until_next_sunday",
    "reference_instant",
    "reference_instants",
    "CalendarCategory",
    "StationPair",
    "Link",
    "ReferenceInstants",
    "MetraLinksError",
    "ConfigurationError",
    "ContainerNotFoundError",
    "ContainerFullError",
]
