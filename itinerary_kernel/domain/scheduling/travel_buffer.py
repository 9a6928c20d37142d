"""Travel-time buffer classification between consecutive activities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from itinerary_kernel.domain.enums import TravelStatus
from itinerary_kernel.domain.models import ScheduledActivity, TravelConflictAssessment, TravelLeg
from itinerary_kernel.domain.scheduling.time_of_day import as_float, is_finite_number, parse_time_to_minutes


def normalize_minutes(value: Any) -> float:
    """Finite non-negative numbers pass through; anything else becomes 0."""
    if not is_finite_number(value) or value < 0:
        return 0
    return as_float(value)


def classify_travel_time_conflict(
    *,
    gap_minutes: Any,
    travel_minutes: Any,
    buffer_minutes: Any,
) -> TravelConflictAssessment:
    gap = normalize_minutes(gap_minutes)
    travel = normalize_minutes(travel_minutes)
    buffer = normalize_minutes(buffer_minutes)

    required = travel + buffer
    short_by = max(0, required - gap)
    slack = max(0, gap - required)
    status = TravelStatus.CONFLICT if short_by > 0 else TravelStatus.TIGHT
    return TravelConflictAssessment(
        status=status,
        required_gap_minutes=required,
        slack_minutes=slack,
        short_by_minutes=short_by,
    )


def travel_leg_key(from_activity_id: str, to_activity_id: str) -> str:
    return f"{from_activity_id}->{to_activity_id}"


def _timed(activities: Iterable[ScheduledActivity]) -> list[tuple[int, int, ScheduledActivity]]:
    rows: list[tuple[int, int, ScheduledActivity]] = []
    for activity in activities:
        start = parse_time_to_minutes(activity.start_time)
        end = parse_time_to_minutes(activity.end_time)
        if start is None or end is None or end <= start:
            continue
        rows.append((start, end, activity))
    rows.sort(key=lambda row: (row[0], row[1], row[2].itinerary_activity_id))
    return rows


def build_travel_legs(activities: Iterable[ScheduledActivity]) -> list[TravelLeg]:
    """Pair consecutive timed activities of one day.

    ``gap_minutes`` is negative when the two activities overlap.
    """
    timed = _timed(activities)
    legs: list[TravelLeg] = []
    for (_, current_end, current), (next_start, _, following) in zip(timed, timed[1:]):
        legs.append(
            TravelLeg(
                from_activity_id=current.itinerary_activity_id,
                to_activity_id=following.itinerary_activity_id,
                from_name=current.name,
                to_name=following.name,
                date=current.date,
                departure_min=current_end,
                arrival_min=next_start,
                gap_minutes=next_start - current_end,
            )
        )
    return legs


def assess_travel_legs(
    legs: Iterable[TravelLeg],
    travel_minutes_by_leg: Mapping[str, Any],
    *,
    buffer_minutes: Any,
) -> list[tuple[TravelLeg, TravelConflictAssessment]]:
    assessed: list[tuple[TravelLeg, TravelConflictAssessment]] = []
    for leg in legs:
        key = travel_leg_key(leg.from_activity_id, leg.to_activity_id)
        if key not in travel_minutes_by_leg:
            continue
        assessment = classify_travel_time_conflict(
            gap_minutes=leg.gap_minutes,
            travel_minutes=travel_minutes_by_leg[key],
            buffer_minutes=buffer_minutes,
        )
        assessed.append((leg, assessment))
    return assessed


__all__ = [
    "assess_travel_legs",
    "build_travel_legs",
    "classify_travel_time_conflict",
    "normalize_minutes",
    "travel_leg_key",
]
