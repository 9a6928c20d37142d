"""Open-hours validator: activities must sit inside one opening period."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from itinerary_kernel.domain.enums import Severity
from itinerary_kernel.domain.models import ScheduledActivity, ValidationIssue
from itinerary_kernel.domain.scheduling.hours_correction import auto_correct_to_next_open_interval
from itinerary_kernel.domain.scheduling.open_hours import (
    HoursRowLike,
    get_open_intervals_for_day,
    is_open_for_window,
)
from itinerary_kernel.domain.scheduling.time_of_day import (
    format_minutes_to_hhmm,
    get_day_of_week_from_iso_date,
    parse_time_to_minutes,
)


def validate_open_hours(
    activities: Iterable[ScheduledActivity],
    hours_by_activity_id: Mapping[str, Iterable[HoursRowLike]],
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for activity in activities:
        rows = list(hours_by_activity_id.get(activity.itinerary_activity_id) or [])
        if not rows:
            continue
        weekday = get_day_of_week_from_iso_date(activity.date)
        start = parse_time_to_minutes(activity.start_time)
        end = parse_time_to_minutes(activity.end_time)
        if weekday is None or start is None or end is None or end <= start:
            continue

        name = activity.name or "Activity"
        window = f"{format_minutes_to_hhmm(start)}-{format_minutes_to_hhmm(end)}"
        intervals = get_open_intervals_for_day(rows, weekday)
        if not intervals:
            issues.append(
                ValidationIssue(
                    code="VENUE_CLOSED_ALL_DAY",
                    severity=Severity.HIGH,
                    message=f"{name} is closed all day on {activity.date}",
                    date=activity.date,
                    activity_ids=[activity.itinerary_activity_id],
                    suggestions=["Move to another day"],
                )
            )
            continue
        if is_open_for_window(intervals, start, end):
            continue

        correction = auto_correct_to_next_open_interval(intervals, start, end)
        if correction is not None:
            suggestion = (
                f"Move to {format_minutes_to_hhmm(correction.new_start_min)}-"
                f"{format_minutes_to_hhmm(correction.new_end_min)}"
            )
        else:
            suggestion = "No later opening today fits this activity; move it to another day"
        issues.append(
            ValidationIssue(
                code="OPEN_HOURS_VIOLATION",
                severity=Severity.HIGH,
                message=f"{name} {window} is outside opening hours on {activity.date}",
                date=activity.date,
                activity_ids=[activity.itinerary_activity_id],
                suggestions=[suggestion],
            )
        )
    return issues


__all__ = ["validate_open_hours"]
