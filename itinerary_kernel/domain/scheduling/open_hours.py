"""Weekly opening hours materialized as per-day open intervals."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

from itinerary_kernel.domain.constants import DAYS_PER_WEEK, MINUTES_PER_DAY, MINUTES_PER_HOUR
from itinerary_kernel.domain.models import OpenInterval, WeeklyHoursRow
from itinerary_kernel.domain.scheduling.time_of_day import is_finite_number

HoursRowLike = Union[WeeklyHoursRow, Mapping[str, Any]]


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _to_minutes(hour: Any, minute: Any) -> int | None:
    hh = _as_int(hour)
    mm = _as_int(minute)
    if hh is None or mm is None:
        return None
    if not 0 <= hh <= 23 or not 0 <= mm <= 59:
        return None
    return hh * MINUTES_PER_HOUR + mm


def _clip(value: int) -> int:
    return max(0, min(MINUTES_PER_DAY, value))


def sort_intervals(intervals: Iterable[OpenInterval]) -> list[OpenInterval]:
    return sorted(intervals, key=OpenInterval.sort_key)


def get_open_intervals_for_day(rows: Iterable[HoursRowLike] | None, day: Any) -> list[OpenInterval]:
    """Open intervals of weekday ``day`` (0 = Sunday) built from raw hour rows.

    An overnight row (close at or before open) contributes both of its pieces
    to the day it is tagged with: ``[0, close)`` and ``[open, 1440)``. Rows are
    never propagated to the following weekday.
    """
    weekday = _as_int(day)
    if weekday is None or not 0 <= weekday < DAYS_PER_WEEK:
        return []
    if not rows:
        return []

    intervals: list[OpenInterval] = []
    for row in rows:
        if row is None or _as_int(_field(row, "day")) != weekday:
            continue
        open_min = _to_minutes(_field(row, "open_hour"), _field(row, "open_minute"))
        close_min = _to_minutes(_field(row, "close_hour"), _field(row, "close_minute"))
        if open_min is None or close_min is None:
            continue

        if close_min > open_min:
            intervals.append(OpenInterval(start_min=_clip(open_min), end_min=_clip(close_min)))
            continue

        # overnight
        if close_min > 0:
            intervals.append(OpenInterval(start_min=0, end_min=_clip(close_min)))
        intervals.append(OpenInterval(start_min=_clip(open_min), end_min=MINUTES_PER_DAY))

    return sort_intervals(intervals)


def is_open_for_window(intervals: Iterable[OpenInterval], start_min: Any, end_min: Any) -> bool:
    """True when one single interval contains the whole window.

    Back-to-back intervals are not merged: a window crossing their shared
    boundary is reported as closed.
    """
    if not is_finite_number(start_min) or not is_finite_number(end_min):
        return False
    if end_min <= start_min:
        return False
    return any(interval.start_min <= start_min and end_min <= interval.end_min for interval in intervals)


def suggest_next_open_start(
    intervals: Iterable[OpenInterval],
    after_min: Any,
    duration_min: Any,
) -> int | None:
    if not is_finite_number(after_min) or not is_finite_number(duration_min):
        return None
    if duration_min <= 0:
        return None
    for interval in sort_intervals(intervals):
        if interval.start_min < after_min:
            continue
        if interval.start_min + duration_min <= interval.end_min:
            return interval.start_min
    return None


__all__ = [
    "HoursRowLike",
    "get_open_intervals_for_day",
    "is_open_for_window",
    "sort_intervals",
    "suggest_next_open_start",
]
