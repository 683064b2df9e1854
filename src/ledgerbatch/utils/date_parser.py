"""Date parsing utilities.

Report timestamps and query dates use fixed layouts (``yyyy-MM-dd HH:mm:ss``
and ``yyyy-MM-dd``). Parsing is strict: every field must have its full width.
"""

import re
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_LENGTH = 19

_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse a ``yyyy-MM-dd HH:mm:ss`` timestamp.

    Raises:
        ValueError: If the string does not match the layout or is not a real
            calendar moment
    """
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        raise ValueError(f"Could not parse timestamp '{value}'")
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def parse_query_date(value: str) -> date:
    """Parse a ``yyyy-MM-dd`` date entered by the user.

    Raises:
        ValueError: If the string does not match the layout or is not a real
            calendar date
    """
    value = value.strip()
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Could not parse date '{value}'")
    return datetime.strptime(value, DATE_FORMAT).date()


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Expand a date range to ``start 00:00:00`` and ``end 23:59:59``."""
    return (
        datetime.combine(start, time(0, 0, 0)),
        datetime.combine(end, time(23, 59, 59)),
    )


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "this-week":
        return (today - timedelta(days=today.weekday()), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        # Day before the first of the current month
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-week":
        # Monday through Sunday of the previous week
        start_date = today - timedelta(days=today.weekday() + 7)
        end_date = start_date + timedelta(days=6)
        return (start_date, end_date)

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: this-month, this-year, this-week, last-month, last-year, last-week")
