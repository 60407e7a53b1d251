import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Upstream service returning the JSON array of attendance records
ATTENDANCE_API_URL = os.getenv("ATTENDANCE_API_URL", "https://api.rider.rahulnjs.com/greyt/data")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))

DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "UTC")
APP_TITLE = os.getenv("APP_TITLE", "greyt.io")
SCHEDULED_SIGN_OUT = os.getenv("SCHEDULED_SIGN_OUT", "18:45pm")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
