SECRET_KEY = "test-secret"

# Tests inject an in-memory source; this URL is never contacted.
ATTENDANCE_API_URL = "http://attendance.invalid/data"
REQUEST_TIMEOUT = 1.0

DISPLAY_TIMEZONE = "UTC"
APP_TITLE = "greyt.io"
SCHEDULED_SIGN_OUT = "18:45pm"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
