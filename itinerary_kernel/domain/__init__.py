"""Domain package exports."""

from itinerary_kernel.domain.constants import (
    DEFAULT_BUFFER_MINUTES,
    MAX_ALTERNATIVES,
    MAX_OPERATIONS_PER_BATCH,
    MINUTES_PER_DAY,
)
from itinerary_kernel.domain.enums import OperationKind, Severity, TravelStatus
from itinerary_kernel.domain.exceptions import DomainError, InvalidSettings, OperationRejected
from itinerary_kernel.domain.models import (
    ActivityWindow,
    CustomEventBlock,
    Destination,
    HoursCorrection,
    OpenInterval,
    ScheduledActivity,
    TravelConflictAssessment,
    TravelLeg,
    ValidationIssue,
    WeeklyHoursRow,
)

__all__ = [
    "ActivityWindow",
    "CustomEventBlock",
    "Destination",
    "DomainError",
    "HoursCorrection",
    "InvalidSettings",
    "OpenInterval",
    "OperationKind",
    "OperationRejected",
    "ScheduledActivity",
    "Severity",
    "TravelConflictAssessment",
    "TravelLeg",
    "TravelStatus",
    "ValidationIssue",
    "WeeklyHoursRow",
    "DEFAULT_BUFFER_MINUTES",
    "MAX_ALTERNATIVES",
    "MAX_OPERATIONS_PER_BATCH",
    "MINUTES_PER_DAY",
]
