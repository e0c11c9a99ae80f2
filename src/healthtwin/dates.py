"""Calendar-day key helpers.

All analytics inputs are keyed by ``YYYY-MM-DD`` strings. Callers must pick
one day boundary (local or UTC) and use it for both health and mood entries.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

DAY_KEY_FORMAT = "%Y-%m-%d"
_DAY_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_day_key(value: str) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` key.

    Raises:
        ValueError: for any other format or an impossible calendar date
    """
    if not isinstance(value, str) or not _DAY_KEY_RE.match(value):
        raise ValueError(f"Invalid day key '{value}', expected YYYY-MM-DD")
    return datetime.strptime(value, DAY_KEY_FORMAT).date()


def to_day_key(value: Union[date, datetime, str, None] = None) -> str:
    """Normalize a date, datetime or ISO string to a day key. None means today."""
    if value is None:
        return date.today().strftime(DAY_KEY_FORMAT)
    if isinstance(value, datetime):
        return value.date().strftime(DAY_KEY_FORMAT)
    if isinstance(value, date):
        return value.strftime(DAY_KEY_FORMAT)
    if _DAY_KEY_RE.match(value):
        return parse_day_key(value).strftime(DAY_KEY_FORMAT)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().strftime(DAY_KEY_FORMAT)
    except ValueError:
        raise ValueError(f"Invalid date '{value}'") from None


def shift_days(key: str, delta_days: int) -> str:
    """Move a day key forward (or back, for negative deltas)."""
    return (parse_day_key(key) + timedelta(days=delta_days)).strftime(DAY_KEY_FORMAT)


def week_bounds(end: Optional[str] = None, days: int = 7) -> Tuple[str, str]:
    """(start, end) keys of the ``days``-long window ending on ``end``."""
    if days < 1:
        raise ValueError("days must be at least 1")
    end_key = to_day_key(end)
    return shift_days(end_key, -(days - 1)), end_key
