"""Validator orchestration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from itinerary_kernel.domain.constants import CONFLICT_ERROR_THRESHOLD_MINUTES, DEFAULT_BUFFER_MINUTES
from itinerary_kernel.domain.models import ScheduledActivity, ValidationIssue
from itinerary_kernel.domain.scheduling.open_hours import HoursRowLike
from itinerary_kernel.validators.open_hours_validator import validate_open_hours
from itinerary_kernel.validators.travel_validator import validate_travel_gaps


def run_all_validators(
    activities: Iterable[ScheduledActivity],
    *,
    hours_by_activity_id: Mapping[str, Iterable[HoursRowLike]] | None = None,
    travel_minutes_by_leg: Mapping[str, Any] | None = None,
    buffer_minutes: Any = DEFAULT_BUFFER_MINUTES,
    error_threshold_minutes: float = CONFLICT_ERROR_THRESHOLD_MINUTES,
) -> list[ValidationIssue]:
    rows = list(activities)
    issues: list[ValidationIssue] = []
    issues.extend(validate_open_hours(rows, hours_by_activity_id or {}))
    issues.extend(
        validate_travel_gaps(
            rows,
            travel_minutes_by_leg or {},
            buffer_minutes=buffer_minutes,
            error_threshold_minutes=error_threshold_minutes,
        )
    )
    return issues


__all__ = ["run_all_validators", "validate_open_hours", "validate_travel_gaps"]
