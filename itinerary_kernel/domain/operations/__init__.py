"""Itinerary edit operations and their validation."""

from itinerary_kernel.domain.operations.schema import (
    AddAlternativesOperation,
    AddDestinationOperation,
    AddPlaceOperation,
    InsertDestinationAfterOperation,
    Operation,
    ProposedAddPlaceOperation,
    ProposedOperation,
    RemoveActivityOperation,
    RemoveDestinationOperation,
    UpdateActivityOperation,
    UpdateDestinationDatesOperation,
    UpdateDestinationOperation,
)
from itinerary_kernel.domain.operations.validation import (
    OperationBatchResult,
    OperationIssue,
    OperationValidationResult,
    validate_operation,
    validate_operations,
)

__all__ = [
    "AddAlternativesOperation",
    "AddDestinationOperation",
    "AddPlaceOperation",
    "InsertDestinationAfterOperation",
    "Operation",
    "OperationBatchResult",
    "OperationIssue",
    "OperationValidationResult",
    "ProposedAddPlaceOperation",
    "ProposedOperation",
    "RemoveActivityOperation",
    "RemoveDestinationOperation",
    "UpdateActivityOperation",
    "UpdateDestinationDatesOperation",
    "UpdateDestinationOperation",
    "validate_operation",
    "validate_operations",
]
