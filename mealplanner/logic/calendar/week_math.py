"""Calendar helpers for planner weeks.

Weeks always start on Monday regardless of locale. Everything works on local
calendar fields plus whole-day offsets; no timezone conversion happens here.
"""
from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import List, Union

from mealplanner.utilities.constants import DATE_KEY_FORMAT, DAYS_IN_WEEK

__all__ = ["week_start", "week_days", "date_key", "parse_date_key", "to_date", "shift_week", "add_days"]

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime (dropped to midnight) or YYYY-MM-DD key to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date_key(value)


def week_start(value: DateLike) -> date:
    """Monday of the week containing ``value``; Sunday goes back six days."""
    d = to_date(value)
    return d - timedelta(days=d.weekday())


def week_days(start: DateLike) -> List[date]:
    first = to_date(start)
    return [first + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def date_key(value: Union[date, datetime]) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    """Inverse of date_key. Raises ValueError for anything that is not YYYY-MM-DD."""
    if not isinstance(key, str) or len(key) != 10:
        raise ValueError(f"Invalid date key: {key!r}")
    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def shift_week(start: DateLike, offset: int) -> date:
    """Week navigation: move a week start by ``offset`` whole weeks."""
    return to_date(start) + timedelta(weeks=offset)


def add_days(key: DateLike, days: int) -> str:
    return date_key(to_date(key) + timedelta(days=days))
