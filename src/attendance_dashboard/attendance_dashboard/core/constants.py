"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

SKIP_PREFIX = "Skip"
# Position of the label in messages shaped like "Skip day because of <reason> <label>".
HOLIDAY_LABEL_TOKEN_INDEX = 4

EMPTY_DURATION = "-"
FAILED_STATUS = "failed"

DEFAULT_REQUEST_TIMEOUT = 20
DEFAULT_SCHEDULED_SIGN_OUT = "18:45pm"
EMPTY_STATE_MESSAGE = "No attendance records found"
FETCH_FAILED_MESSAGE = "Failed to fetch data"
