"""Which city a traveller is in on a given calendar date."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from itinerary_kernel.domain.constants import TRANSITION_ARROW
from itinerary_kernel.domain.models import Destination
from itinerary_kernel.domain.scheduling.time_of_day import (
    list_iso_dates_in_range,
    normalize_date_key,
    shift_iso_date,
)

DestinationLike = Union[Destination, Mapping[str, Any]]


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _order_number(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _normalize_destination(row: Any) -> Optional[Destination]:
    if row is None:
        return None
    from_date = normalize_date_key(_field(row, "from_date"))
    to_date = normalize_date_key(_field(row, "to_date"))
    raw_city = _field(row, "city")
    city = raw_city.strip() if isinstance(raw_city, str) else ""
    if not from_date or not to_date or not city:
        return None

    raw_id = _field(row, "itinerary_destination_id")
    if raw_id is None:
        raw_id = _field(row, "id")
    country = _field(row, "country")
    return Destination(
        itinerary_destination_id=None if raw_id is None else str(raw_id),
        city=city,
        country=country if isinstance(country, str) else None,
        from_date=from_date,
        to_date=to_date,
        order_number=_order_number(_field(row, "order_number")),
    )


def normalize_destinations(destinations: Iterable[DestinationLike] | None) -> list[Destination]:
    """Drop unusable rows and sort by ``(order_number, from_date)``."""
    rows = [row for row in (_normalize_destination(item) for item in destinations or []) if row is not None]
    rows.sort(key=lambda row: (row.order_number, row.from_date))
    return rows


def _transition_label(a: Destination, b: Destination) -> str:
    first, second = sorted((a, b), key=lambda row: (row.order_number, row.from_date))
    if first.city == second.city:
        return first.city
    return f"{first.city} {TRANSITION_ARROW} {second.city}"


def _gap_label(key: str, rows: list[Destination]) -> Optional[str]:
    for previous, following in zip(rows, rows[1:]):
        if key <= previous.to_date or key >= following.from_date:
            continue
        if previous.city == following.city:
            return previous.city
        if shift_iso_date(previous.to_date, 1) == key:
            return _transition_label(previous, following)
    return None


def get_city_label_for_date_key(
    date_key: Any,
    destinations: Iterable[DestinationLike] | None,
) -> Optional[str]:
    """Header label for ``date_key``.

    On a boundary day, where one stay ends and a different one begins, the
    label is ``"<earlier> → <later>"`` by ``order_number``. Otherwise the stay
    starting on that day wins over one merely containing it. The first day of
    a gap between two stays counts as the travel day between them.
    """
    key = normalize_date_key(date_key)
    if key is None:
        return None

    rows = normalize_destinations(destinations)
    containing = [row for row in rows if row.from_date <= key <= row.to_date]
    if not containing:
        return _gap_label(key, rows)

    ending = [row for row in containing if row.to_date == key]
    starting = [row for row in containing if row.from_date == key]
    for leaving in reversed(ending):
        for arriving in starting:
            if arriving is not leaving:
                return _transition_label(leaving, arriving)

    if starting:
        return starting[0].city
    return containing[0].city


def label_date_range(
    from_date: Any,
    to_date: Any,
    destinations: Iterable[DestinationLike] | None,
) -> list[tuple[str, Optional[str]]]:
    rows = normalize_destinations(destinations)
    return [(day, get_city_label_for_date_key(day, rows)) for day in list_iso_dates_in_range(from_date, to_date)]


__all__ = [
    "DestinationLike",
    "get_city_label_for_date_key",
    "label_date_range",
    "normalize_destinations",
]
