"""Warnings for activities that collide with user-entered custom events."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from itinerary_kernel.domain.constants import DEFAULT_MAX_OVERLAP_WARNINGS, MAX_OVERLAP_WARNINGS
from itinerary_kernel.domain.models import CustomEventBlock, ScheduledActivity
from itinerary_kernel.domain.scheduling.time_of_day import (
    format_minutes_to_hhmm,
    is_finite_number,
    parse_time_to_minutes,
)

_DEFAULT_KIND = "custom"
_DEFAULT_TITLE = "Custom event"


def windows_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    return a_start < b_end and a_end > b_start


def custom_event_kind_label(kind: str | None) -> str:
    text = str(kind or "").strip().lower() or _DEFAULT_KIND
    if text == _DEFAULT_KIND:
        return "custom event"
    return text.replace("_", " ")


def _window(start_time: str | None, end_time: str | None) -> tuple[int, int] | None:
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)
    if start is None or end is None or end <= start:
        return None
    return start, end


def _warning_limit(max_warnings: Any) -> int:
    if not is_finite_number(max_warnings):
        return DEFAULT_MAX_OVERLAP_WARNINGS
    return max(1, min(MAX_OVERLAP_WARNINGS, math.floor(max_warnings)))


def _span(start: int, end: int) -> str:
    return f"{format_minutes_to_hhmm(start)}-{format_minutes_to_hhmm(end)}"


def build_custom_event_overlap_warnings(
    planned: Iterable[ScheduledActivity],
    blocks: Iterable[CustomEventBlock],
    *,
    max_warnings: Any = DEFAULT_MAX_OVERLAP_WARNINGS,
) -> list[str]:
    limit = _warning_limit(max_warnings)

    blocks_by_date: dict[str, list[tuple[int, int, str, CustomEventBlock]]] = {}
    for block in blocks:
        date = str(block.date or "").strip()
        window = _window(block.start_time, block.end_time)
        if not date or window is None:
            continue
        title = block.title.strip() or _DEFAULT_TITLE
        blocks_by_date.setdefault(date, []).append((window[0], window[1], title, block))
    for rows in blocks_by_date.values():
        rows.sort(key=lambda row: (row[0], row[1], row[2]))

    warnings: list[str] = []
    suppressed = 0
    for item in planned:
        date = str(item.date or "").strip()
        same_day = blocks_by_date.get(date)
        window = _window(item.start_time, item.end_time)
        if not same_day or window is None:
            continue
        start, end = window
        for block_start, block_end, title, block in same_day:
            if not windows_overlap(start, end, block_start, block_end):
                continue
            if len(warnings) >= limit:
                suppressed += 1
                continue
            warnings.append(
                f'Overlap on {date}: "{item.name}" ({_span(start, end)}) overlaps '
                f'{custom_event_kind_label(block.kind)} "{title}" ({_span(block_start, block_end)}).'
            )

    if suppressed:
        warnings.append(f"Overlap warnings omitted for {suppressed} other item(s).")
    return warnings


__all__ = [
    "build_custom_event_overlap_warnings",
    "custom_event_kind_label",
    "windows_overlap",
]
