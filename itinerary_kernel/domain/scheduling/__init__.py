"""Scheduling-consistency primitives over plain itinerary data."""

from itinerary_kernel.domain.scheduling.city_timeline import get_city_label_for_date_key, label_date_range
from itinerary_kernel.domain.scheduling.event_overlaps import build_custom_event_overlap_warnings
from itinerary_kernel.domain.scheduling.hours_correction import auto_correct_to_next_open_interval
from itinerary_kernel.domain.scheduling.open_hours import (
    get_open_intervals_for_day,
    is_open_for_window,
    suggest_next_open_start,
)
from itinerary_kernel.domain.scheduling.time_of_day import (
    format_minutes_to_hhmm,
    get_day_of_week_from_iso_date,
    is_iso_date_string,
    list_iso_dates_in_range,
    parse_time_to_minutes,
)
from itinerary_kernel.domain.scheduling.travel_buffer import (
    assess_travel_legs,
    build_travel_legs,
    classify_travel_time_conflict,
    travel_leg_key,
)

__all__ = [
    "assess_travel_legs",
    "auto_correct_to_next_open_interval",
    "build_custom_event_overlap_warnings",
    "build_travel_legs",
    "classify_travel_time_conflict",
    "format_minutes_to_hhmm",
    "get_city_label_for_date_key",
    "get_day_of_week_from_iso_date",
    "get_open_intervals_for_day",
    "is_iso_date_string",
    "is_open_for_window",
    "label_date_range",
    "list_iso_dates_in_range",
    "parse_time_to_minutes",
    "suggest_next_open_start",
    "travel_leg_key",
]
