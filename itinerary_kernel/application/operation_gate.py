"""Gate that admits a batch of edit operations only when all of them are valid."""

from __future__ import annotations

from typing import Any, Optional

from itinerary_kernel.config.settings import KernelSettings
from itinerary_kernel.domain.operations.validation import OperationBatchResult, validate_operations
from itinerary_kernel.infrastructure.logging import StructuredLogger, get_logger


def gate_operations(
    payloads: Any,
    *,
    proposed: bool = False,
    settings: Optional[KernelSettings] = None,
    logger: Optional[StructuredLogger] = None,
) -> OperationBatchResult:
    settings = settings or KernelSettings()
    log = logger or get_logger()

    result = validate_operations(
        payloads,
        proposed=proposed,
        max_operations=settings.max_operations_per_batch,
    )
    for issue in result.batch_issues:
        log.warning("operation_gate", issue.message, code=issue.code)
    rejected = result.issues_by_index()
    for index, issues in rejected.items():
        log.operation_rejected(
            index,
            result.results[index].requested_op,
            [issue.model_dump() for issue in issues],
        )
    log.event(
        "operation_batch",
        accepted=result.ok,
        proposed=proposed,
        count=len(result.results),
        rejected=len(rejected),
    )
    return result


__all__ = ["gate_operations"]
