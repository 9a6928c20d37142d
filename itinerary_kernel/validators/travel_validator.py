"""Travel validator: consecutive activities need travel time plus buffer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from itinerary_kernel.domain.constants import CONFLICT_ERROR_THRESHOLD_MINUTES, DEFAULT_BUFFER_MINUTES
from itinerary_kernel.domain.enums import Severity, TravelStatus
from itinerary_kernel.domain.models import ScheduledActivity, TravelLeg, ValidationIssue
from itinerary_kernel.domain.scheduling.time_of_day import format_minutes_to_hhmm
from itinerary_kernel.domain.scheduling.travel_buffer import assess_travel_legs, build_travel_legs


def _group_by_date(activities: Iterable[ScheduledActivity]) -> dict[str, list[ScheduledActivity]]:
    groups: dict[str, list[ScheduledActivity]] = {}
    for activity in activities:
        groups.setdefault(str(activity.date or ""), []).append(activity)
    return groups


def _overlap_issue(leg: TravelLeg) -> ValidationIssue:
    from_name = leg.from_name or "Activity"
    to_name = leg.to_name or "Activity"
    return ValidationIssue(
        code="ACTIVITY_OVERLAP",
        severity=Severity.HIGH,
        message=f"{from_name} overlaps with {to_name} by {-leg.gap_minutes} minutes",
        date=leg.date,
        activity_ids=[leg.from_activity_id, leg.to_activity_id],
        suggestions=[
            f"End {from_name} at {format_minutes_to_hhmm(leg.arrival_min)}",
            f"Start {to_name} at {format_minutes_to_hhmm(leg.departure_min)}",
        ],
    )


def validate_travel_gaps(
    activities: Iterable[ScheduledActivity],
    travel_minutes_by_leg: Mapping[str, Any],
    *,
    buffer_minutes: Any = DEFAULT_BUFFER_MINUTES,
    error_threshold_minutes: float = CONFLICT_ERROR_THRESHOLD_MINUTES,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for _, day_activities in sorted(_group_by_date(activities).items()):
        legs = build_travel_legs(day_activities)
        overlapping = [leg for leg in legs if leg.gap_minutes < 0]
        issues.extend(_overlap_issue(leg) for leg in overlapping)

        open_legs = [leg for leg in legs if leg.gap_minutes >= 0]
        for leg, assessment in assess_travel_legs(open_legs, travel_minutes_by_leg, buffer_minutes=buffer_minutes):
            if assessment.status != TravelStatus.CONFLICT:
                continue
            from_name = leg.from_name or "Activity"
            to_name = leg.to_name or "Activity"
            required = assessment.required_gap_minutes
            severity = Severity.HIGH if assessment.short_by_minutes > error_threshold_minutes else Severity.MEDIUM
            issues.append(
                ValidationIssue(
                    code="TRAVEL_TIME_CONFLICT",
                    severity=severity,
                    message=(
                        f"Not enough time to travel from {from_name} to {to_name}: "
                        f"need {required:g}m but only have {leg.gap_minutes}m"
                    ),
                    date=leg.date,
                    activity_ids=[leg.from_activity_id, leg.to_activity_id],
                    suggestions=[
                        f"Start {to_name} at {format_minutes_to_hhmm(leg.departure_min + required)}",
                        f"End {from_name} at {format_minutes_to_hhmm(leg.arrival_min - required)}",
                    ],
                )
            )
    return issues


__all__ = ["validate_travel_gaps"]
