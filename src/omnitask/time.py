# SPDX-License-Identifier: MIT

import re
from typing import Callable, Optional, cast

import pendulum

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

type Clock = Callable[[], pendulum.DateTime]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def today_local_date_str(now: Optional[pendulum.DateTime] = None) -> str:
    """The current local calendar date as 'YYYY-MM-DD'."""
    if now is None:
        now = now_utc()
    return datetime_to_local_date_str(now)


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_from_str(date_str: str) -> pendulum.Date:
    """
    Parse a strict 'YYYY-MM-DD' string.

    Raises:
        ValueError: if the string is not a well-formed calendar date
    """
    if not ISO_DATE_PATTERN.match(date_str):
        raise ValueError(f"Expected a YYYY-MM-DD date, got '{date_str}'")
    return pendulum.from_format(date_str, "YYYY-MM-DD").date()


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a 'YYYY-MM-DD' string, returning None when it is missing or malformed."""
    if date_str is None or not isinstance(date_str, str):
        return None
    try:
        return date_from_str(date_str)
    except ValueError:
        return None


def weekday_sunday_first(date: pendulum.Date) -> int:
    """Day of week numbered 0=Sunday through 6=Saturday."""
    return date.isoweekday() % 7


def meeting_start_local(date_str: str, time_str: str) -> Optional[pendulum.DateTime]:
    """Combine a meeting's 'YYYY-MM-DD' date and 'HH:mm' time in local time."""
    date = date_from_str_optional(date_str)
    if date is None:
        return None
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str or "")
    if time_match is None:
        return pendulum.datetime(date.year, date.month, date.day, tz="local")
    try:
        return pendulum.datetime(
            date.year,
            date.month,
            date.day,
            int(time_match.group(1)),
            int(time_match.group(2)),
            tz="local",
        )
    except ValueError:
        return None
