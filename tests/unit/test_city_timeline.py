"""City label timeline tests."""

from __future__ import annotations

from itinerary_kernel.domain.models import Destination
from itinerary_kernel.domain.scheduling.city_timeline import (
    get_city_label_for_date_key,
    label_date_range,
    normalize_destinations,
)

ZURICH_PARIS = [
    {"id": 7, "city": "Paris", "country": "France", "from_date": "2026-04-03", "to_date": "2026-04-06", "order_number": 2},
    {"id": 5, "city": "Zürich", "country": "Switzerland", "from_date": "2026-03-30", "to_date": "2026-04-03", "order_number": 1},
]


def test_labels_around_a_boundary_day():
    assert get_city_label_for_date_key("2026-04-02", ZURICH_PARIS) == "Zürich"
    assert get_city_label_for_date_key("2026-04-03", ZURICH_PARIS) == "Zürich → Paris"
    assert get_city_label_for_date_key("2026-04-04", ZURICH_PARIS) == "Paris"


def test_transition_direction_follows_order_number():
    destinations = [
        Destination(city="Paris", from_date="2026-04-01", to_date="2026-04-03", order_number=1),
        Destination(city="Zürich", from_date="2026-04-03", to_date="2026-04-05", order_number=2),
    ]
    assert get_city_label_for_date_key("2026-04-03", destinations) == "Paris → Zürich"


def test_starting_destination_wins_over_containing_one():
    destinations = [
        {"city": "Lyon", "from_date": "2026-04-01", "to_date": "2026-04-10", "order_number": 1},
        {"city": "Annecy", "from_date": "2026-04-05", "to_date": "2026-04-07", "order_number": 2},
    ]
    assert get_city_label_for_date_key("2026-04-05", destinations) == "Annecy"
    assert get_city_label_for_date_key("2026-04-06", destinations) == "Lyon"


def test_same_city_back_to_back_has_plain_label():
    destinations = [
        {"city": "Paris", "from_date": "2026-04-01", "to_date": "2026-04-03", "order_number": 1},
        {"city": "Paris", "from_date": "2026-04-03", "to_date": "2026-04-05", "order_number": 2},
    ]
    assert get_city_label_for_date_key("2026-04-03", destinations) == "Paris"


def test_first_gap_day_is_the_travel_day():
    destinations = [
        {"city": "Rome", "from_date": "2026-04-01", "to_date": "2026-04-03", "order_number": 1},
        {"city": "Florence", "from_date": "2026-04-06", "to_date": "2026-04-08", "order_number": 2},
    ]
    assert get_city_label_for_date_key("2026-04-04", destinations) == "Rome → Florence"
    assert get_city_label_for_date_key("2026-04-05", destinations) is None
    assert get_city_label_for_date_key("2026-04-09", destinations) is None


def test_gap_between_stays_in_one_city_keeps_the_city():
    destinations = [
        {"city": "Rome", "from_date": "2026-04-01", "to_date": "2026-04-03", "order_number": 1},
        {"city": "Rome", "from_date": "2026-04-06", "to_date": "2026-04-08", "order_number": 2},
    ]
    assert get_city_label_for_date_key("2026-04-05", destinations) == "Rome"


def test_timestamps_and_invalid_keys():
    assert get_city_label_for_date_key("2026-04-04T09:00:00+02:00", ZURICH_PARIS) == "Paris"
    assert get_city_label_for_date_key("someday", ZURICH_PARIS) is None
    assert get_city_label_for_date_key(None, ZURICH_PARIS) is None
    assert get_city_label_for_date_key("2026-04-04", []) is None


def test_normalize_destinations_drops_unusable_rows_and_sorts():
    rows = normalize_destinations(
        [
            *ZURICH_PARIS,
            {"city": "", "from_date": "2026-04-01", "to_date": "2026-04-02"},
            {"city": "Bern", "from_date": None, "to_date": "2026-04-02"},
            None,
        ]
    )
    assert [(row.city, row.itinerary_destination_id) for row in rows] == [("Zürich", "5"), ("Paris", "7")]


def test_label_date_range():
    assert label_date_range("2026-04-02", "2026-04-04", ZURICH_PARIS) == [
        ("2026-04-02", "Zürich"),
        ("2026-04-03", "Zürich → Paris"),
        ("2026-04-04", "Paris"),
    ]


def test_unusable_order_numbers_sort_first():
    destinations = [
        {"city": "Lyon", "from_date": "2026-04-01", "to_date": "2026-04-03", "order_number": 2},
        {"city": "Nice", "from_date": "2026-04-03", "to_date": "2026-04-05", "order_number": float("inf")},
        {"city": "Arles", "from_date": "2026-04-07", "to_date": "2026-04-08", "order_number": float("nan")},
    ]

    rows = normalize_destinations(destinations)

    assert [(row.city, row.order_number) for row in rows] == [("Nice", 0), ("Arles", 0), ("Lyon", 2)]
    assert get_city_label_for_date_key("2026-04-03", destinations) == "Nice → Lyon"
