"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Single convention for every persisted date field (course date, registeredAt, signedAt).
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
TIMESTAMP_PATTERN = r"^\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2}$"

USERS = "users"
COURSES = "courses"
ENROLLMENTS = "enrollments"

DEFAULT_DATA_FILE = "db.json"
DEFAULT_AUTH_REALM = "enrollment"
