"""Date rules for picking the next Weekday, Saturday and Sunday to link to."""

import logging
import math
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional, Union

from .errors import ConfigurationError
from .models import ReferenceInstants

logger = logging.getLogger(__name__)

# The schedule site returns nothing for a midnight query on some days;
# 08:00 always gets the full day.
REFERENCE_TIME = time(hour=8)

MONDAY = 1
SATURDAY = 6
SUNDAY = 7

# ISO day (Monday=1 ... Sunday=7) -> days until the next weekday
_WEEKDAY_OFFSETS: Dict[int, int] = {
    1: 0,
    2: 0,
    3: 0,
    4: 0,
    5: 0,
    SATURDAY: 2,
    SUNDAY: 1,
}

DayInput = Union[date, int]


def iso_day(today: DayInput) -> int:
    """
    Normalize a day to its ISO number (Monday=1 ... Sunday=7).

    Args:
        today: A date/datetime, or an int already in the ISO encoding.

    Raises:
        ConfigurationError: If the value isn't a date or an int in 1..7.
    """
    if isinstance(today, date):
        return today.isoweekday()
    if isinstance(today, bool) or not isinstance(today, int):
        raise ConfigurationError(f"Cannot read a day of week from {today!r}")
    if not MONDAY <= today <= SUNDAY:
        raise ConfigurationError(f"Day of week {today} is outside 1 (Monday) .. 7 (Sunday)")
    return today


def sunday_based_index(today: DayInput) -> int:
    """Day index counting from Sunday=0 through Saturday=6."""
    return iso_day(today) % 7


def days_until_next_weekday(today: DayInput) -> int:
    """Days to add to land on a weekday. Monday through Friday use today."""
    return _WEEKDAY_OFFSETS[iso_day(today)]


def days_until_next_saturday(today: DayInput) -> int:
    """Days to add to land on a Saturday. Saturday uses today; Sunday looks ahead."""
    day = iso_day(today)
    if day == SATURDAY:
        return 0
    if day == SUNDAY:
        return 6
    return SATURDAY - day


def days_until_next_sunday(today: DayInput) -> int:
    """
    Days to add to land on a Sunday.

    Unlike the weekday and Saturday rules this never returns 0: on a Sunday
    the answer is the following Sunday, 7 days out.
    """
    return 7 - sunday_based_index(today)


def reference_instant(days_offset: int, now: Optional[datetime] = None) -> int:
    """
    Unix timestamp for 08:00 local time, days_offset calendar days from now.

    Args:
        days_offset: Whole days to add to today's date.
        now: The current time. Defaults to datetime.now(). A naive value is
             read in the process's local timezone; an aware one keeps its tzinfo.

    Returns:
        Epoch seconds, floored to an int.

    Raises:
        ConfigurationError: If days_offset is negative.
    """
    if days_offset < 0:
        raise ConfigurationError(f"Reference dates can't be in the past (offset {days_offset})")
    if now is None:
        now = datetime.now()

    # Add days to the date, not 24h blocks to the instant, so DST changes
    # in between don't move the hour.
    target_day = now.date() + timedelta(days=days_offset)
    target = datetime.combine(target_day, REFERENCE_TIME, tzinfo=now.tzinfo)
    return math.floor(target.timestamp())


def reference_instants(now: Optional[datetime] = None) -> ReferenceInstants:
    """Compute the Weekday, Saturday and Sunday reference instants from one clock reading."""
    if now is None:
        now = datetime.now()

    instants = ReferenceInstants(
        weekday=reference_instant(days_until_next_weekday(now), now),
        saturday=reference_instant(days_until_next_saturday(now), now),
        sunday=reference_instant(days_until_next_sunday(now), now),
    )
    logger.debug(f"Reference instants for {now.date().isoformat()}: {instants}")
    return instants
