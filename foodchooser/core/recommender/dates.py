"""Calendar-day helpers shared by the recommenders."""

from datetime import date, datetime
from typing import Union

from dateutil import parser as date_parser

DateLike = Union[date, datetime, str]


def parse_day(value: DateLike) -> date:
    """
    Reduce a date-like value to a local calendar day.

    "YYYY-MM-DD" strings are taken as that calendar day with no timezone
    shift. Timestamps carrying an offset are converted to local time first.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid meal date: {value!r}")

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return parse_day(date_parser.isoparse(text))


def days_since(day: date, today: date) -> int:
    """Whole days from day to today, never negative."""
    return max(0, (today - day).days)
