"""Kernel settings resolved from explicit overrides."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from itinerary_kernel.domain.constants import (
    CONFLICT_ERROR_THRESHOLD_MINUTES,
    DEFAULT_BUFFER_MINUTES,
    DEFAULT_MAX_OVERLAP_WARNINGS,
    MAX_OPERATIONS_PER_BATCH,
    MAX_OVERLAP_WARNINGS,
)
from itinerary_kernel.domain.exceptions import InvalidSettings


class KernelSettings(BaseModel):
    default_buffer_minutes: float = Field(default=DEFAULT_BUFFER_MINUTES, ge=0)
    max_overlap_warnings: int = Field(default=DEFAULT_MAX_OVERLAP_WARNINGS, ge=1, le=MAX_OVERLAP_WARNINGS)
    max_operations_per_batch: int = Field(default=MAX_OPERATIONS_PER_BATCH, ge=1, le=MAX_OPERATIONS_PER_BATCH)
    conflict_error_threshold_minutes: float = Field(default=CONFLICT_ERROR_THRESHOLD_MINUTES, ge=0)


def resolve_kernel_settings(overrides: Mapping[str, Any] | None = None) -> KernelSettings:
    """Build settings from caller overrides; blank values keep the default."""
    values: dict[str, Any] = {}
    for key, value in dict(overrides or {}).items():
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        if key not in KernelSettings.model_fields:
            raise InvalidSettings(f"unknown setting: {key}")
        values[key] = value.strip() if isinstance(value, str) else value
    try:
        return KernelSettings.model_validate(values)
    except ValidationError as exc:
        raise InvalidSettings(str(exc)) from exc


__all__ = ["KernelSettings", "resolve_kernel_settings"]
