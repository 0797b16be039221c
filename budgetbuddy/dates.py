"""Date utilities for budgetbuddy.

Month cursors are plain ``YYYY-MM`` strings passed explicitly to every query.
Stored transaction dates are unix timestamps in whole seconds, so month
windows are converted to that representation before comparison.
"""

import math
from datetime import datetime, timedelta, tzinfo
from typing import Literal

import pandas as pd

from budgetbuddy.domain.models import Month, Timestamp

Direction = Literal["previous", "next"]


def parse_month(value: str) -> Month:
    """Validate and normalize a month string.

    Args:
        value: Month in YYYY-MM format (a single-digit month is accepted).

    Returns:
        Month normalized to YYYY-MM.

    Raises:
        ValueError: If the value is not a valid month.
    """
    dt = datetime.strptime(value.strip(), "%Y-%m")
    return Month(dt.strftime("%Y-%m"))


def current_month(now: datetime | None = None) -> Month:
    """Get the month containing ``now`` (defaults to the local clock)."""
    if now is None:
        now = datetime.now()
    return Month(now.strftime("%Y-%m"))


def _first_of_next_month(dt: datetime) -> datetime:
    return (dt.replace(day=28) + timedelta(days=4)).replace(day=1)


def shift_month(month: Month, direction: Direction) -> Month:
    """Move a month cursor one month back or forward.

    Args:
        month: Month in YYYY-MM format.
        direction: "previous" or "next".

    Returns:
        The adjacent month, rolling over year boundaries.

    Raises:
        ValueError: If the month or direction is invalid.
    """
    dt = datetime.strptime(month, "%Y-%m")
    if direction == "previous":
        shifted = (dt - timedelta(days=1)).replace(day=1)
    elif direction == "next":
        shifted = _first_of_next_month(dt)
    else:
        raise ValueError(f"Unknown direction: {direction!r}")
    return Month(shifted.strftime("%Y-%m"))


def month_window(month: Month, tz: tzinfo | None = None) -> tuple[Timestamp, Timestamp]:
    """Calculate the timestamp window covering a month.

    The end is the last millisecond of the month, floored to whole seconds,
    so both bounds are inclusive when compared against stored dates.

    Args:
        month: Month in YYYY-MM format.
        tz: Timezone of the month boundaries. If None, uses local time.

    Returns:
        Tuple of (start, end) unix timestamps in seconds.

    Raises:
        ValueError: If the month is invalid.
    """
    start = datetime.strptime(month, "%Y-%m").replace(tzinfo=tz)
    end = _first_of_next_month(start) - timedelta(milliseconds=1)
    return Timestamp(math.floor(start.timestamp())), Timestamp(math.floor(end.timestamp()))


def month_label(month: Month) -> str:
    """Human-readable month (e.g., "January 2024")."""
    return datetime.strptime(month, "%Y-%m").strftime("%B %Y")


def month_of(timestamp: Timestamp) -> Month:
    """Get the local month containing a stored timestamp."""
    return Month(datetime.fromtimestamp(timestamp).strftime("%Y-%m"))


def to_timestamp(dt: datetime) -> Timestamp:
    """Convert a datetime to whole unix seconds (naive values are local time)."""
    return Timestamp(math.floor(dt.timestamp()))


def format_timestamp(timestamp: Timestamp) -> str:
    """Format a stored timestamp as a local YYYY-MM-DD date."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d")


def parse_date(value: str) -> Timestamp:
    """Parse a user-entered date into a stored timestamp.

    Args:
        value: Date in YYYY-MM-DD, DD/MM/YYYY or another format pandas accepts.

    Returns:
        Unix timestamp in seconds. Dates without a timezone are local time.

    Raises:
        ValueError: If the date cannot be parsed.
    """
    # pandas warns when dayfirst cannot apply to ISO input
    try:
        return to_timestamp(datetime.fromisoformat(value.strip()))
    except ValueError:
        pass

    parsed = pd.to_datetime(value, dayfirst=True)
    if pd.isna(parsed):
        raise ValueError(f"Invalid date: {value!r}")
    return to_timestamp(parsed.to_pydatetime())
