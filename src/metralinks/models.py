"""Data models for the Metra schedule link builder."""

from dataclasses import dataclass
from enum import Enum


class CalendarCategory(Enum):
    """The kind of day a schedule link targets. Values double as link text."""
    WEEKDAY = "Weekday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


@dataclass(frozen=True)
class StationPair:
    """An origin/destination pair of Metra station codes."""
    origin: str  # e.g. "WILMETTE"
    destination: str  # e.g. "ROGERPK"

    def reversed(self) -> "StationPair":
        """Return the same pair travelling the other way."""
        return StationPair(origin=self.destination, destination=self.origin)


@dataclass(frozen=True)
class Link:
    """One anchor to render on the page."""
    category: CalendarCategory
    url: str
    text: str = ""

    def __post_init__(self):
        if not self.text:
            object.__setattr__(self, "text", self.category.value)


@dataclass(frozen=True)
class ReferenceInstants:
    """08:00 local Unix timestamps for the next Weekday, Saturday and Sunday."""
    weekday: int
    saturday: int
    sunday: int

    def for_category(self, category: CalendarCategory) -> int:
        if category is CalendarCategory.WEEKDAY:
            return self.weekday
        if category is CalendarCategory.SATURDAY:
            return self.saturday
        return self.sunday
