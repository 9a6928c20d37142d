"""Edit operation schema and batch validation tests."""

from __future__ import annotations

import pytest

from itinerary_kernel.domain.exceptions import OperationRejected
from itinerary_kernel.domain.operations import (
    AddAlternativesOperation,
    AddPlaceOperation,
    InsertDestinationAfterOperation,
    ProposedAddPlaceOperation,
    UpdateActivityOperation,
    validate_operation,
    validate_operations,
)


def _codes(result) -> list[str]:
    return [issue.code for issue in result.issues]


def _alternatives(target: str = "100", alternatives: list | None = None) -> dict:
    return {
        "op": "add_alternatives",
        "targetItineraryActivityId": target,
        "alternativeItineraryActivityIds": ["101", "102", "103"] if alternatives is None else alternatives,
    }


def test_add_alternatives_accepts_up_to_three_distinct_ids():
    result = validate_operation(_alternatives())

    assert result.ok
    assert isinstance(result.operation, AddAlternativesOperation)
    assert result.operation.alternative_itinerary_activity_ids == ["101", "102", "103"]
    assert result.requested_op == "add_alternatives"


def test_add_alternatives_rejects_duplicates():
    result = validate_operation(_alternatives(alternatives=["101", "101"]))

    assert not result.ok
    assert _codes(result) == ["alternatives_not_unique"]
    assert result.issues[0].path == "alternativeItineraryActivityIds"
    assert result.issues[0].message == "alternativeItineraryActivityIds must be unique"


def test_add_alternatives_rejects_target_in_list():
    result = validate_operation(_alternatives(alternatives=["100", "101"]))
    assert _codes(result) == ["alternatives_include_target"]


@pytest.mark.parametrize(
    ("alternatives", "code"),
    [
        ([], "too_short"),
        (["101", "102", "103", "104"], "too_long"),
    ],
)
def test_add_alternatives_list_size(alternatives, code):
    result = validate_operation(_alternatives(alternatives=alternatives))
    assert not result.ok
    assert code in _codes(result)


@pytest.mark.parametrize(
    "payload",
    [
        _alternatives(alternatives=["abc"]),
        _alternatives(alternatives=[101]),
        _alternatives(target="x1"),
        {"op": "add_alternatives", "alternativeItineraryActivityIds": ["101"]},
        {"op": "delete_everything", "itineraryActivityId": "1"},
        {"itineraryActivityId": "1"},
        "remove_activity",
        None,
    ],
)
def test_malformed_payloads_are_rejected(payload):
    result = validate_operation(payload)
    assert not result.ok
    assert result.issues


def test_require_raises_with_issues():
    result = validate_operation(_alternatives(alternatives=["101", "101"]))

    with pytest.raises(OperationRejected) as excinfo:
        result.require()

    assert excinfo.value.issues[0].code == "alternatives_not_unique"
    assert "alternativeItineraryActivityIds must be unique" in str(excinfo.value)


def test_require_returns_operation_when_valid():
    operation = validate_operation({"op": "remove_activity", "itineraryActivityId": "42"}).require()
    assert operation.itinerary_activity_id == "42"


def test_update_activity_requires_a_field():
    result = validate_operation({"op": "update_activity", "itineraryActivityId": "1"})
    assert _codes(result) == ["update_activity_empty"]


def test_update_activity_time_pair_rules():
    only_start = validate_operation({"op": "update_activity", "itineraryActivityId": "1", "startTime": "10:00"})
    mixed = validate_operation(
        {"op": "update_activity", "itineraryActivityId": "1", "startTime": "10:00", "endTime": None}
    )
    cleared = validate_operation(
        {"op": "update_activity", "itineraryActivityId": "1", "startTime": None, "endTime": None}
    )
    moved = validate_operation(
        {"op": "update_activity", "itineraryActivityId": "1", "startTime": "10:00", "endTime": "11:30:00"}
    )

    assert _codes(only_start) == ["time_pair_incomplete"]
    assert _codes(mixed) == ["time_pair_mixed"]
    assert cleared.ok
    assert moved.ok
    assert isinstance(moved.operation, UpdateActivityOperation)


def test_update_activity_notes_only_and_bad_time():
    assert validate_operation({"op": "update_activity", "itineraryActivityId": "1", "notes": "bring tickets"}).ok
    assert not validate_operation(
        {"op": "update_activity", "itineraryActivityId": "1", "startTime": "9:00", "endTime": "10:00"}
    ).ok
    assert not validate_operation(
        {"op": "update_activity", "itineraryActivityId": "1", "notes": "x" * 2001}
    ).ok


def test_add_place_requires_place_id_unless_proposed():
    payload = {"op": "add_place", "query": "Musée d'Orsay", "date": "2026-04-03"}

    assert not validate_operation(payload).ok
    proposed = validate_operation(payload, proposed=True)
    assert proposed.ok
    assert isinstance(proposed.operation, ProposedAddPlaceOperation)

    resolved = validate_operation({"op": "add_place", "placeId": "ChIJ-orsay"})
    assert isinstance(resolved.operation, AddPlaceOperation)


def test_proposed_add_place_needs_query_or_place_id():
    result = validate_operation({"op": "add_place", "name": "Somewhere"}, proposed=True)
    assert _codes(result) == ["add_place_unresolvable"]


def test_add_destination_date_order():
    payload = {
        "op": "add_destination",
        "city": "Lyon",
        "country": "France",
        "fromDate": "2026-04-10",
        "toDate": "2026-04-08",
    }
    result = validate_operation(payload)

    assert _codes(result) == ["date_range_reversed"]
    assert result.issues[0].path == "toDate"
    assert validate_operation({**payload, "toDate": "2026-04-10"}).ok


def test_update_destination_rules():
    base = {"op": "update_destination", "itineraryDestinationId": "3"}

    assert _codes(validate_operation(base)) == ["update_destination_empty"]
    assert _codes(validate_operation({**base, "city": "Lyon"})) == ["location_pair_incomplete"]
    assert _codes(validate_operation({**base, "fromDate": "2026-04-01"})) == ["date_pair_incomplete"]
    assert validate_operation({**base, "city": "Lyon", "country": "France"}).ok
    assert validate_operation({**base, "fromDate": "2026-04-01", "toDate": "2026-04-03", "shiftActivities": True}).ok
    assert not validate_operation(
        {**base, "fromDate": "2026-04-01", "toDate": "2026-04-03", "shiftActivities": "yes"}
    ).ok


def test_update_destination_dates():
    payload = {
        "op": "update_destination_dates",
        "itineraryDestinationId": "3",
        "fromDate": "2026-04-01",
        "toDate": "2026-04-03",
    }
    assert validate_operation(payload).ok
    assert _codes(validate_operation({**payload, "toDate": "2026-03-31"})) == ["date_range_reversed"]


@pytest.mark.parametrize(("days", "ok"), [(1, True), (60, True), (0, False), (61, False), ("3", False), (2.5, False)])
def test_insert_destination_duration(days, ok):
    result = validate_operation(
        {
            "op": "insert_destination_after",
            "afterItineraryDestinationId": "3",
            "city": "Nice",
            "country": "France",
            "durationDays": days,
        }
    )
    assert result.ok is ok
    if ok:
        assert isinstance(result.operation, InsertDestinationAfterOperation)


def test_remove_destination():
    assert validate_operation({"op": "remove_destination", "itineraryDestinationId": "9"}).ok
    assert not validate_operation({"op": "remove_destination", "itineraryDestinationId": "nine"}).ok


def test_batch_is_all_or_nothing():
    good = {"op": "remove_activity", "itineraryActivityId": "1"}
    bad = _alternatives(alternatives=["101", "101"])

    accepted = validate_operations([good, _alternatives()])
    rejected = validate_operations([good, bad])

    assert accepted.ok
    assert len(accepted.operations) == 2
    assert not rejected.ok
    assert rejected.operations == []
    assert list(rejected.issues_by_index()) == [1]


def test_batch_shape_rules():
    good = {"op": "remove_activity", "itineraryActivityId": "1"}

    assert [issue.code for issue in validate_operations([]).batch_issues] == ["operations_empty"]
    assert [issue.code for issue in validate_operations([good] * 26).batch_issues] == ["operations_too_many"]
    assert [issue.code for issue in validate_operations(good).batch_issues] == ["operations_not_list"]
    assert [issue.code for issue in validate_operations("ops").batch_issues] == ["operations_not_list"]
    assert not validate_operations([good] * 3, max_operations=2).ok


@pytest.mark.parametrize(
    ("payload", "path"),
    [
        (
            {
                "op": "update_destination",
                "itineraryDestinationId": "3",
                "city": None,
                "country": None,
                "fromDate": "2026-04-01",
                "toDate": "2026-04-03",
            },
            "city",
        ),
        (
            {"op": "update_destination", "itineraryDestinationId": "3", "fromDate": "2026-04-01", "toDate": None},
            "toDate",
        ),
        (
            {
                "op": "update_destination_dates",
                "itineraryDestinationId": "3",
                "fromDate": "2026-04-01",
                "toDate": "2026-04-03",
                "shiftActivities": None,
            },
            "shiftActivities",
        ),
        ({"op": "add_place", "placeId": "ChIJ-orsay", "name": None}, "name"),
        ({"op": "add_place", "placeId": "ChIJ-orsay", "query": None}, "query"),
    ],
)
def test_optional_fields_reject_explicit_null(payload, path):
    result = validate_operation(payload)

    assert not result.ok
    assert "null_not_allowed" in _codes(result)
    assert path in [issue.path for issue in result.issues]


def test_proposed_add_place_rejects_null_place_id():
    result = validate_operation({"op": "add_place", "query": "Orsay", "placeId": None}, proposed=True)

    assert _codes(result) == ["null_not_allowed"]
    assert result.issues[0].message == "placeId may be omitted but not null"


def test_nullable_activity_fields_still_accept_null():
    result = validate_operation(
        {"op": "add_place", "placeId": "ChIJ-orsay", "date": None, "startTime": None, "endTime": None, "notes": None}
    )
    assert result.ok
