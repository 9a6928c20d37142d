"""Domain semantic exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from itinerary_kernel.domain.operations.validation import OperationIssue


class DomainError(Exception):
    """Base domain exception."""


class OperationRejected(DomainError):
    """Raised when a caller insists on a valid operation and it is not."""

    def __init__(self, issues: list["OperationIssue"]):
        self.issues = list(issues)
        detail = "; ".join(f"{issue.path or '<root>'}: {issue.message}" for issue in self.issues)
        super().__init__(f"operation rejected: {detail}" if detail else "operation rejected")


class InvalidSettings(DomainError):
    """Raised when kernel settings overrides cannot be parsed."""
