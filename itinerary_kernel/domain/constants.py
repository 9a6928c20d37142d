"""Domain constants shared by deterministic logic."""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1

DAYS_PER_WEEK = 7

MIN_ALTERNATIVES = 1
MAX_ALTERNATIVES = 3
MAX_OPERATIONS_PER_BATCH = 25
MAX_NOTES_LENGTH = 2000
MAX_PLACE_QUERY_LENGTH = 200
MAX_PLACE_NAME_LENGTH = 120
MAX_PLACE_ID_LENGTH = 256
MAX_LOCATION_NAME_LENGTH = 100
MAX_INSERTED_DESTINATION_DAYS = 60

DEFAULT_BUFFER_MINUTES = 10.0
DEFAULT_MAX_OVERLAP_WARNINGS = 8
MAX_OVERLAP_WARNINGS = 25
CONFLICT_ERROR_THRESHOLD_MINUTES = 15.0

TRANSITION_ARROW = "→"
