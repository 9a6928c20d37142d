"""Time-of-day and ISO-date primitives.

Every helper here is total: malformed input yields ``None`` (parsers) or a
clamped value (formatters), never an exception.
"""

from __future__ import annotations

import datetime as dt
import math
import re
import sys

from itinerary_kernel.domain.constants import LAST_MINUTE_OF_DAY, MINUTES_PER_HOUR

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?")
_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # math.isfinite overflows on ints beyond float range
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def as_float(value: int | float) -> float:
    """Finite number as a float; ints beyond float range saturate."""
    if isinstance(value, int) and abs(value) > sys.float_info.max:
        return sys.float_info.max if value > 0 else -sys.float_info.max
    return float(value)


def parse_time_to_minutes(value: object) -> int | None:
    """Parse strict ``HH:MM`` / ``HH:MM:SS`` text into minutes since midnight.

    Seconds must be present as two digits when given but are otherwise ignored.
    """
    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.fullmatch(value)
    if not match:
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def format_minutes_to_hhmm(minutes: object) -> str:
    if isinstance(minutes, bool) or not isinstance(minutes, (int, float)):
        total = 0
    elif isinstance(minutes, int):
        total = max(0, min(LAST_MINUTE_OF_DAY, minutes))
    elif math.isnan(minutes):
        total = 0
    elif math.isinf(minutes):
        total = LAST_MINUTE_OF_DAY if minutes > 0 else 0
    else:
        total = max(0, min(LAST_MINUTE_OF_DAY, math.floor(minutes)))
    hours, mins = divmod(total, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def is_iso_date_string(value: object) -> bool:
    return isinstance(value, str) and _ISO_DATE_PATTERN.fullmatch(value) is not None


def _to_date(value: object) -> dt.date | None:
    if not is_iso_date_string(value):
        return None
    try:
        return dt.date.fromisoformat(value)  # type: ignore[arg-type]
    except ValueError:
        return None


def get_day_of_week_from_iso_date(iso_date: object) -> int | None:
    """Weekday of ``iso_date`` with 0 = Sunday through 6 = Saturday.

    The date is read as a calendar date (equivalent to UTC midnight), so the
    local timezone of the host can never shift the weekday.
    """
    parsed = _to_date(iso_date)
    if parsed is None:
        return None
    return parsed.isoweekday() % 7


def normalize_date_key(value: object) -> str | None:
    """Reduce a date or timestamp string to its ``YYYY-MM-DD`` key."""
    if not isinstance(value, str):
        return None
    key = value.strip()[:10]
    return key if is_iso_date_string(key) else None


def shift_iso_date(iso_date: str, days: int) -> str | None:
    parsed = _to_date(iso_date)
    if parsed is None:
        return None
    return (parsed + dt.timedelta(days=days)).isoformat()


def list_iso_dates_in_range(from_date: object, to_date: object) -> list[str]:
    start = _to_date(from_date)
    end = _to_date(to_date)
    if start is None or end is None or end < start:
        return []
    span = (end - start).days
    return [(start + dt.timedelta(days=offset)).isoformat() for offset in range(span + 1)]


__all__ = [
    "as_float",
    "format_minutes_to_hhmm",
    "get_day_of_week_from_iso_date",
    "is_finite_number",
    "is_iso_date_string",
    "list_iso_dates_in_range",
    "normalize_date_key",
    "parse_time_to_minutes",
    "shift_iso_date",
]
