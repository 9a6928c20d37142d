"""All-or-nothing validation of proposed itinerary edit operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from itinerary_kernel.domain.constants import MAX_OPERATIONS_PER_BATCH
from itinerary_kernel.domain.enums import OperationKind
from itinerary_kernel.domain.exceptions import OperationRejected
from itinerary_kernel.domain.operations.schema import OPERATION_ADAPTER, PROPOSED_OPERATION_ADAPTER

_OPERATION_TAGS = {kind.value for kind in OperationKind}


class OperationIssue(BaseModel):
    code: str
    path: str = ""
    message: str = ""


@dataclass(frozen=True)
class OperationValidationResult:
    ok: bool
    operation: Any = None
    issues: list[OperationIssue] = field(default_factory=list)
    requested_op: str | None = None

    def require(self) -> Any:
        """Return the validated operation or raise ``OperationRejected``."""
        if not self.ok:
            raise OperationRejected(self.issues)
        return self.operation


@dataclass(frozen=True)
class OperationBatchResult:
    ok: bool
    operations: list[Any] = field(default_factory=list)
    results: list[OperationValidationResult] = field(default_factory=list)
    batch_issues: list[OperationIssue] = field(default_factory=list)

    def issues_by_index(self) -> dict[int, list[OperationIssue]]:
        return {index: result.issues for index, result in enumerate(self.results) if not result.ok}


def _issue_path(loc: tuple[Any, ...]) -> str:
    parts = list(loc)
    # discriminated unions prefix the location with the tag
    if parts and isinstance(parts[0], str) and parts[0] in _OPERATION_TAGS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def issues_from_validation_error(exc: ValidationError) -> list[OperationIssue]:
    issues: list[OperationIssue] = []
    for error in exc.errors(include_url=False):
        issues.append(
            OperationIssue(
                code=str(error.get("type", "invalid")),
                path=_issue_path(tuple(error.get("loc", ()))),
                message=str(error.get("msg", "")),
            )
        )
    return issues


def _requested_op(payload: Any) -> str | None:
    raw = payload.get("op") if isinstance(payload, Mapping) else getattr(payload, "op", None)
    return raw if isinstance(raw, str) else None


def validate_operation(payload: Any, *, proposed: bool = False) -> OperationValidationResult:
    """Validate one operation payload; never raises.

    ``proposed=True`` accepts the assistant-proposal shape of ``add_place``
    (free-text query instead of a resolved place id).
    """
    adapter = PROPOSED_OPERATION_ADAPTER if proposed else OPERATION_ADAPTER
    requested_op = _requested_op(payload)
    try:
        operation = adapter.validate_python(payload)
    except ValidationError as exc:
        return OperationValidationResult(
            ok=False,
            issues=issues_from_validation_error(exc),
            requested_op=requested_op,
        )
    return OperationValidationResult(ok=True, operation=operation, requested_op=requested_op)


def validate_operations(
    payloads: Any,
    *,
    proposed: bool = False,
    max_operations: int = MAX_OPERATIONS_PER_BATCH,
) -> OperationBatchResult:
    """Validate a batch; it is accepted only when every operation is valid."""
    if isinstance(payloads, (str, bytes, Mapping)) or not isinstance(payloads, Iterable):
        return OperationBatchResult(
            ok=False,
            batch_issues=[OperationIssue(code="operations_not_list", message="Expected a list of operations")],
        )

    rows = list(payloads)
    batch_issues: list[OperationIssue] = []
    if not rows:
        batch_issues.append(OperationIssue(code="operations_empty", message="At least one operation is required"))
    elif len(rows) > max_operations:
        batch_issues.append(
            OperationIssue(
                code="operations_too_many",
                message=f"At most {max_operations} operations are allowed",
            )
        )

    results = [validate_operation(row, proposed=proposed) for row in rows]
    ok = not batch_issues and all(result.ok for result in results)
    return OperationBatchResult(
        ok=ok,
        operations=[result.operation for result in results] if ok else [],
        results=results,
        batch_issues=batch_issues,
    )


__all__ = [
    "OperationBatchResult",
    "OperationIssue",
    "OperationValidationResult",
    "issues_from_validation_error",
    "validate_operation",
    "validate_operations",
]
