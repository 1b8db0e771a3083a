"""Calendar dates in the fixed ``YYYY-MM-DD`` todo.txt layout.

Dates are plain :class:`datetime.date` values. A missing date is ``None``,
exposed here as :data:`ABSENT` so callers never confuse it with a real day.
"""

import re
from datetime import date, datetime
from typing import Optional

DATE_LAYOUT = "%Y-%m-%d"
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

ABSENT: Optional[date] = None


def parse(text: str) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        text: Date string to parse

    Returns:
        The calendar date, or ``ABSENT`` if the text is not a valid date.
        Malformed input never raises.
    """
    if not isinstance(text, str) or not DATE_RE.fullmatch(text):
        return ABSENT
    try:
        return datetime.strptime(text, DATE_LAYOUT).date()
    except ValueError:
        return ABSENT


def now() -> date:
    """Return the current local calendar date."""
    return date.today()


def is_absent(value: Optional[date]) -> bool:
    """Check whether ``value`` is the absent date."""
    return value is ABSENT


def format(value: Optional[date]) -> str:
    """Format a date as it appears in a task line.

    Args:
        value: Date to format, or ``ABSENT``

    Returns:
        ``""`` for an absent date, otherwise ``YYYY-MM-DD`` followed by a
        single space so the result composes directly into a task line.
    """
    if is_absent(value):
        return ""
    return value.isoformat() + " "
