"""Forward-only repair of activity windows against opening hours."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from itinerary_kernel.domain.models import HoursCorrection, OpenInterval
from itinerary_kernel.domain.scheduling.open_hours import is_open_for_window, suggest_next_open_start
from itinerary_kernel.domain.scheduling.time_of_day import as_float, is_finite_number


def auto_correct_to_next_open_interval(
    intervals: Iterable[OpenInterval],
    start_min: Any,
    end_min: Any,
) -> HoursCorrection | None:
    """Move a closed window to the first later interval that fits it whole.

    Returns ``None`` when there is nothing to do (window already open) and
    when nothing can be proposed (no hours, bad window, no later fit). The
    duration is kept and the start never moves earlier than requested.
    """
    rows = list(intervals)
    if not rows:
        return None
    if not is_finite_number(start_min) or not is_finite_number(end_min):
        return None
    duration = as_float(end_min) - as_float(start_min)
    if duration <= 0:
        return None
    if is_open_for_window(rows, start_min, end_min):
        return None

    new_start = suggest_next_open_start(rows, start_min, duration)
    if new_start is None:
        return None
    return HoursCorrection(new_start_min=new_start, new_end_min=new_start + duration)


__all__ = ["auto_correct_to_next_open_interval"]
