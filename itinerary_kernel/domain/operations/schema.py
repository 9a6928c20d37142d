"""Structured itinerary edit operations.

Operations arrive as plain camelCase payloads from an assistant or a bulk
editor. Each kind is one pydantic model; ``Operation`` and
``ProposedOperation`` are discriminated unions on ``op``. The proposed
family differs only in ``add_place``, which may still carry a free-text
query instead of a resolved place id.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    TypeAdapter,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from itinerary_kernel.domain.constants import (
    MAX_ALTERNATIVES,
    MAX_INSERTED_DESTINATION_DAYS,
    MAX_LOCATION_NAME_LENGTH,
    MAX_NOTES_LENGTH,
    MAX_PLACE_ID_LENGTH,
    MAX_PLACE_NAME_LENGTH,
    MAX_PLACE_QUERY_LENGTH,
    MIN_ALTERNATIVES,
)

ItineraryActivityId = Annotated[str, StringConstraints(pattern=r"^[0-9]+$")]
ItineraryDestinationId = Annotated[str, StringConstraints(pattern=r"^[0-9]+$")]
PlaceId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_PLACE_ID_LENGTH)]
IsoDate = Annotated[str, StringConstraints(pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")]
TimeText = Annotated[str, StringConstraints(pattern=r"^[0-9]{2}:[0-9]{2}(:[0-9]{2})?$")]
Notes = Annotated[str, StringConstraints(max_length=MAX_NOTES_LENGTH)]
LocationName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_LOCATION_NAME_LENGTH)
]
PlaceName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=MAX_PLACE_NAME_LENGTH)]


class OperationModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _reject(code: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(code, message)


def _check_time_pair(operation: BaseModel) -> None:
    fields = operation.model_fields_set
    if "start_time" not in fields and "end_time" not in fields:
        return
    if "start_time" not in fields or "end_time" not in fields:
        raise _reject(
            "time_pair_incomplete",
            "When changing time, provide both startTime and endTime (or set both to null).",
        )
    start = getattr(operation, "start_time")
    end = getattr(operation, "end_time")
    if (start is None) != (end is None):
        raise _reject("time_pair_mixed", "startTime and endTime must both be strings, or both be null.")


def _refuse_null(value: Any, info: ValidationInfo) -> Any:
    if value is None:
        raise _reject("null_not_allowed", f"{to_camel(info.field_name)} may be omitted but not null")
    return value


def _check_to_date(value: Optional[str], info: ValidationInfo) -> Optional[str]:
    from_date = info.data.get("from_date")
    if value is not None and from_date is not None and value < from_date:
        raise _reject("date_range_reversed", "toDate must be on or after fromDate")
    return value


class UpdateActivityOperation(OperationModel):
    op: Literal["update_activity"] = "update_activity"
    itinerary_activity_id: ItineraryActivityId
    date: Optional[IsoDate] = None
    start_time: Optional[TimeText] = None
    end_time: Optional[TimeText] = None
    notes: Optional[Notes] = None

    @model_validator(mode="after")
    def _check_fields(self) -> "UpdateActivityOperation":
        if not self.model_fields_set & {"date", "start_time", "end_time", "notes"}:
            raise _reject("update_activity_empty", "update_activity must include at least one field")
        _check_time_pair(self)
        return self


class RemoveActivityOperation(OperationModel):
    op: Literal["remove_activity"] = "remove_activity"
    itinerary_activity_id: ItineraryActivityId


class AddPlaceOperation(OperationModel):
    """``add_place`` with a resolved place id, as accepted for apply."""

    op: Literal["add_place"] = "add_place"
    place_id: PlaceId
    query: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=MAX_PLACE_QUERY_LENGTH)]] = None
    name: Optional[PlaceName] = None
    date: Optional[IsoDate] = None
    start_time: Optional[TimeText] = None
    end_time: Optional[TimeText] = None
    notes: Optional[Notes] = None

    @field_validator("query", "name", mode="before")
    @classmethod
    def _check_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _refuse_null(value, info)

    @model_validator(mode="after")
    def _check_times(self) -> "AddPlaceOperation":
        _check_time_pair(self)
        return self


class ProposedAddPlaceOperation(OperationModel):
    """``add_place`` as proposed by the assistant: a query or a place id."""

    op: Literal["add_place"] = "add_place"
    query: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_PLACE_QUERY_LENGTH)]
    ] = None
    place_id: Optional[PlaceId] = None
    name: Optional[PlaceName] = None
    date: Optional[IsoDate] = None
    start_time: Optional[TimeText] = None
    end_time: Optional[TimeText] = None
    notes: Optional[Notes] = None

    @field_validator("query", "place_id", "name", mode="before")
    @classmethod
    def _check_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _refuse_null(value, info)

    @model_validator(mode="after")
    def _check_fields(self) -> "ProposedAddPlaceOperation":
        if not self.query and not self.place_id:
            raise _reject("add_place_unresolvable", "add_place requires either query or placeId")
        _check_time_pair(self)
        return self


class AddAlternativesOperation(OperationModel):
    """Attach up to three backup activities to one scheduled activity."""

    op: Literal["add_alternatives"] = "add_alternatives"
    target_itinerary_activity_id: ItineraryActivityId
    alternative_itinerary_activity_ids: list[ItineraryActivityId] = Field(
        min_length=MIN_ALTERNATIVES,
        max_length=MAX_ALTERNATIVES,
    )

    @field_validator("alternative_itinerary_activity_ids")
    @classmethod
    def _check_alternatives(cls, value: list[str], info: ValidationInfo) -> list[str]:
        if len(set(value)) != len(value):
            raise _reject("alternatives_not_unique", "alternativeItineraryActivityIds must be unique")
        target = info.data.get("target_itinerary_activity_id")
        if target is not None and target in value:
            raise _reject(
                "alternatives_include_target",
                "alternativeItineraryActivityIds must not include the target activity",
            )
        return value


class AddDestinationOperation(OperationModel):
    op: Literal["add_destination"] = "add_destination"
    city: LocationName
    country: LocationName
    from_date: IsoDate
    to_date: IsoDate

    @field_validator("to_date")
    @classmethod
    def _check_range(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        return _check_to_date(value, info)


class UpdateDestinationDatesOperation(OperationModel):
    op: Literal["update_destination_dates"] = "update_destination_dates"
    itinerary_destination_id: ItineraryDestinationId
    from_date: IsoDate
    to_date: IsoDate
    shift_activities: Optional[StrictBool] = None

    @field_validator("shift_activities", mode="before")
    @classmethod
    def _check_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _refuse_null(value, info)

    @field_validator("to_date")
    @classmethod
    def _check_range(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        return _check_to_date(value, info)


class UpdateDestinationOperation(OperationModel):
    op: Literal["update_destination"] = "update_destination"
    itinerary_destination_id: ItineraryDestinationId
    city: Optional[LocationName] = None
    country: Optional[LocationName] = None
    from_date: Optional[IsoDate] = None
    to_date: Optional[IsoDate] = None
    shift_activities: Optional[StrictBool] = None

    @field_validator("city", "country", "from_date", "to_date", "shift_activities", mode="before")
    @classmethod
    def _check_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _refuse_null(value, info)

    @field_validator("to_date")
    @classmethod
    def _check_range(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        return _check_to_date(value, info)

    @model_validator(mode="after")
    def _check_fields(self) -> "UpdateDestinationOperation":
        touches_location = self.city is not None or self.country is not None
        touches_dates = self.from_date is not None or self.to_date is not None
        if not touches_location and not touches_dates:
            raise _reject(
                "update_destination_empty",
                "update_destination must include at least one of city/country or fromDate/toDate",
            )
        if touches_location and (self.city is None or self.country is None):
            raise _reject(
                "location_pair_incomplete",
                "When changing destination location, provide both city and country.",
            )
        if touches_dates and (self.from_date is None or self.to_date is None):
            raise _reject(
                "date_pair_incomplete",
                "When changing destination dates, provide both fromDate and toDate.",
            )
        return self


class InsertDestinationAfterOperation(OperationModel):
    op: Literal["insert_destination_after"] = "insert_destination_after"
    after_itinerary_destination_id: ItineraryDestinationId
    city: LocationName
    country: LocationName
    duration_days: Annotated[int, Field(strict=True, ge=1, le=MAX_INSERTED_DESTINATION_DAYS)]


class RemoveDestinationOperation(OperationModel):
    op: Literal["remove_destination"] = "remove_destination"
    itinerary_destination_id: ItineraryDestinationId


Operation = Annotated[
    Union[
        UpdateActivityOperation,
        RemoveActivityOperation,
        AddPlaceOperation,
        AddAlternativesOperation,
        AddDestinationOperation,
        UpdateDestinationDatesOperation,
        UpdateDestinationOperation,
        InsertDestinationAfterOperation,
        RemoveDestinationOperation,
    ],
    Field(discriminator="op"),
]

ProposedOperation = Annotated[
    Union[
        UpdateActivityOperation,
        RemoveActivityOperation,
        ProposedAddPlaceOperation,
        AddAlternativesOperation,
        AddDestinationOperation,
        UpdateDestinationDatesOperation,
        UpdateDestinationOperation,
        InsertDestinationAfterOperation,
        RemoveDestinationOperation,
    ],
    Field(discriminator="op"),
]

OPERATION_ADAPTER: TypeAdapter[Any] = TypeAdapter(Operation)
PROPOSED_OPERATION_ADAPTER: TypeAdapter[Any] = TypeAdapter(ProposedOperation)


__all__ = [
    "AddAlternativesOperation",
    "AddDestinationOperation",
    "AddPlaceOperation",
    "InsertDestinationAfterOperation",
    "OPERATION_ADAPTER",
    "Operation",
    "OperationModel",
    "PROPOSED_OPERATION_ADAPTER",
    "ProposedAddPlaceOperation",
    "ProposedOperation",
    "RemoveActivityOperation",
    "RemoveDestinationOperation",
    "UpdateActivityOperation",
    "UpdateDestinationDatesOperation",
    "UpdateDestinationOperation",
]
