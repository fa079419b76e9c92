"""Calendar-day helpers and the canonical YYYY-MM-DD day key."""

import calendar
import re
from datetime import date, datetime, timedelta

DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class InvalidDateError(ValueError):
    pass


def _as_date(value):
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date(value) -> str:
    # built from the local calendar fields; never goes through UTC
    d = _as_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(text: str) -> date:
    if not isinstance(text, str) or not DATE_KEY_RE.fullmatch(text):
        raise InvalidDateError(f"Expected YYYY-MM-DD, got {text!r}")
    y, m, d = (int(p) for p in text.split("-"))
    try:
        return date(y, m, d)
    except ValueError as ex:
        raise InvalidDateError(f"Not a calendar date: {text!r}") from ex


def try_parse_date(text):
    try:
        return parse_date(text)
    except InvalidDateError:
        return None


def is_date_key(text) -> bool:
    return try_parse_date(text) is not None


def local_today(now: datetime = None) -> date:
    return (now or datetime.now()).date()


def days_between(start, end) -> int:
    """Whole days from `start` to `end`, floored at 0.

    Works on calendar days, so the time of day of a datetime argument never
    shifts the result.
    """
    return max(0, (_as_date(end) - _as_date(start)).days)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(value):
    d = _as_date(value)
    first = d.replace(day=1)
    last = d.replace(day=days_in_month(d.year, d.month))
    return first, last


def month_days(value):
    first, last = month_bounds(value)
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]
