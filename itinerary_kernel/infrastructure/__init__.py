"""Infrastructure layer (logging)."""

from itinerary_kernel.infrastructure.logging import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
