"""Domain enums."""

from enum import Enum


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TravelStatus(str, Enum):
    TIGHT = "tight"
    CONFLICT = "conflict"


class OperationKind(str, Enum):
    UPDATE_ACTIVITY = "update_activity"
    REMOVE_ACTIVITY = "remove_activity"
    ADD_PLACE = "add_place"
    ADD_ALTERNATIVES = "add_alternatives"
    ADD_DESTINATION = "add_destination"
    UPDATE_DESTINATION_DATES = "update_destination_dates"
    UPDATE_DESTINATION = "update_destination"
    INSERT_DESTINATION_AFTER = "insert_destination_after"
    REMOVE_DESTINATION = "remove_destination"
