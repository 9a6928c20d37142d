"""Application layer: composes the kernel for callers and logs outcomes."""

from itinerary_kernel.application.day_review import DayReview, review_day
from itinerary_kernel.application.operation_gate import gate_operations

__all__ = ["DayReview", "gate_operations", "review_day"]
