"""Lenient parsing helpers for values arriving as query strings or JSON."""
import re
from datetime import date, datetime
from numbers import Real
from typing import Any, Optional

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_int(value: Any) -> Optional[int]:
    """Parse ``value`` into an int, or return None when it is not one.

    Accepts ints (but not bools) and strings of decimal digits with an
    optional sign and surrounding whitespace.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value):
        return int(value)
    return None


def is_integral(value: Any) -> bool:
    """True for ints and integral floats; bools are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_number(value: Any) -> bool:
    """True for real numbers other than bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return value == value


def parse_date(value: Any) -> Optional[date]:
    """Parse a date, datetime or ISO-8601 string into a calendar date.

    Returns None when the value cannot be interpreted as a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None
