"""One-pass consistency review of a single itinerary day."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, Field

from itinerary_kernel.config.settings import KernelSettings
from itinerary_kernel.domain.enums import Severity
from itinerary_kernel.domain.models import CustomEventBlock, ScheduledActivity, ValidationIssue
from itinerary_kernel.domain.scheduling.event_overlaps import build_custom_event_overlap_warnings
from itinerary_kernel.domain.scheduling.open_hours import HoursRowLike
from itinerary_kernel.infrastructure.logging import StructuredLogger, get_logger
from itinerary_kernel.validators import run_all_validators


class DayReview(BaseModel):
    date: Optional[str] = None
    issues: list[ValidationIssue] = Field(default_factory=list)
    overlap_warnings: list[str] = Field(default_factory=list)

    @property
    def has_blocking_issues(self) -> bool:
        return any(issue.severity == Severity.HIGH for issue in self.issues)


def review_day(
    activities: Iterable[ScheduledActivity],
    *,
    date: Optional[str] = None,
    hours_by_activity_id: Mapping[str, Iterable[HoursRowLike]] | None = None,
    travel_minutes_by_leg: Mapping[str, Any] | None = None,
    custom_blocks: Iterable[CustomEventBlock] = (),
    settings: Optional[KernelSettings] = None,
    logger: Optional[StructuredLogger] = None,
) -> DayReview:
    settings = settings or KernelSettings()
    log = logger or get_logger()

    rows = [activity for activity in activities if date is None or activity.date == date]
    issues = run_all_validators(
        rows,
        hours_by_activity_id=hours_by_activity_id,
        travel_minutes_by_leg=travel_minutes_by_leg,
        buffer_minutes=settings.default_buffer_minutes,
        error_threshold_minutes=settings.conflict_error_threshold_minutes,
    )
    warnings = build_custom_event_overlap_warnings(
        rows,
        custom_blocks,
        max_warnings=settings.max_overlap_warnings,
    )
    review = DayReview(date=date, issues=issues, overlap_warnings=warnings)
    log.event(
        "day_review",
        date=date,
        activities=len(rows),
        issues=[issue.code for issue in issues],
        overlap_warnings=len(warnings),
        blocking=review.has_blocking_issues,
    )
    return review


__all__ = ["DayReview", "review_day"]
