"""
Calendar-date helpers.

All helpers accept either a ``datetime.date`` or a ``YYYY-MM-DD`` string and
work on local calendar dates only; no time-zone arithmetic is performed.

Typical usage:
    >>> days_between("2024-01-01", "2024-01-29")
    28
    >>> add_days("2024-01-29", 28)
    datetime.date(2024, 2, 26)
"""
import calendar
import re
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple, Union

from cycle_engine.services.exceptions import InvalidDateError

DateLike = Union[date, str]

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def parse_date(value: DateLike) -> date:
    """
    Convert a date or ISO ``YYYY-MM-DD`` string to a ``date``.

    Args:
        value: Date object or ISO calendar-date string

    Returns:
        The corresponding ``date``

    Raises:
        InvalidDateError: If the value is not a date or a well-formed,
            existing calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        raise InvalidDateError(f"Invalid date: {value!r}, expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r} ({e})") from e

def is_valid_date(value) -> bool:
    """Check whether a value parses as a calendar date."""
    try:
        parse_date(value)
    except InvalidDateError:
        return False
    return True

def to_iso(value: Optional[DateLike]) -> str:
    """Format a date as ``YYYY-MM-DD``; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return parse_date(value).isoformat()

def today() -> date:
    """Return the host's local calendar date."""
    return date.today()

def days_between(start: DateLike, end: DateLike) -> int:
    """
    Calendar-day delta from ``start`` to ``end``.

    Negative when ``end`` is before ``start``.
    """
    return (parse_date(end) - parse_date(start)).days

def add_days(value: DateLike, days: int) -> date:
    """Shift a date by a (possibly negative) number of days."""
    return parse_date(value) + timedelta(days=days)

def shift_date(value: DateLike, days: int) -> Optional[date]:
    """
    Like ``add_days``, but None when the result falls outside the
    representable calendar (before year 1 or after year 9999).
    """
    try:
        return add_days(value, days)
    except OverflowError:
        return None

def is_same_day(first: DateLike, second: DateLike) -> bool:
    """Check whether two values denote the same calendar day."""
    return parse_date(first) == parse_date(second)

def month_range(year: int, month: int) -> Tuple[date, date]:
    """
    First and last day of a month.

    Example:
        >>> month_range(2024, 2)
        (datetime.date(2024, 2, 1), datetime.date(2024, 2, 29))
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)

def date_range(start: DateLike, end: DateLike) -> List[date]:
    """Every day from ``start`` through ``end`` inclusive; empty if reversed."""
    first = parse_date(start)
    span = days_between(first, end)
    return [first + timedelta(days=i) for i in range(span + 1)]

def is_date_in_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Check whether ``value`` lies in ``[start, end]``."""
    return parse_date(start) <= parse_date(value) <= parse_date(end)

def relative_label(value: DateLike, reference: Optional[DateLike] = None) -> str:
    """
    Describe a date relative to ``reference`` (today by default).

    Returns one of ``"today"``, ``"yesterday"``, ``"tomorrow"``,
    ``"in N days"`` or ``"N days ago"``.
    """
    reference_date = today() if reference is None else parse_date(reference)
    delta = days_between(reference_date, value)
    if delta == 0:
        return "today"
    if delta == -1:
        return "yesterday"
    if delta == 1:
        return "tomorrow"
    if delta > 0:
        return f"in {delta} days"
    return f"{abs(delta)} days ago"
