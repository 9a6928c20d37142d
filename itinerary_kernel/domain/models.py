"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from itinerary_kernel.domain.constants import LAST_MINUTE_OF_DAY, MINUTES_PER_DAY
from itinerary_kernel.domain.enums import Severity, TravelStatus


class OpenInterval(BaseModel):
    """Open period on one calendar day, in minutes since local midnight."""

    model_config = ConfigDict(frozen=True)

    start_min: int = Field(ge=0, le=LAST_MINUTE_OF_DAY)
    end_min: int = Field(gt=0, le=MINUTES_PER_DAY)

    @model_validator(mode="after")
    def _check_order(self) -> "OpenInterval":
        if self.start_min >= self.end_min:
            raise ValueError("start_min must be before end_min")
        return self

    def sort_key(self) -> tuple[int, int]:
        return self.start_min, self.end_min


class WeeklyHoursRow(BaseModel):
    """One opening period of a venue on one weekday (0 = Sunday)."""

    day: Optional[int] = None
    open_hour: Optional[int] = None
    open_minute: Optional[int] = None
    close_hour: Optional[int] = None
    close_minute: Optional[int] = None


class ActivityWindow(BaseModel):
    start_min: float
    end_min: float

    @property
    def duration_min(self) -> float:
        return self.end_min - self.start_min


class HoursCorrection(BaseModel):
    new_start_min: float
    new_end_min: float


class TravelConflictAssessment(BaseModel):
    status: TravelStatus
    required_gap_minutes: float = 0.0
    slack_minutes: float = 0.0
    short_by_minutes: float = 0.0


class ScheduledActivity(BaseModel):
    itinerary_activity_id: str
    name: str = ""
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class TravelLeg(BaseModel):
    from_activity_id: str
    to_activity_id: str
    from_name: str = ""
    to_name: str = ""
    date: Optional[str] = None
    departure_min: int = 0
    arrival_min: int = 0
    gap_minutes: int = 0


class CustomEventBlock(BaseModel):
    id: str
    title: str = ""
    kind: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class Destination(BaseModel):
    itinerary_destination_id: Optional[str] = None
    city: str
    country: Optional[str] = None
    from_date: str
    to_date: str
    order_number: int = 0


class ValidationIssue(BaseModel):
    code: str
    severity: Severity = Severity.MEDIUM
    message: str = ""
    date: Optional[str] = None
    activity_ids: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
