import os

DATA_FILE = os.getenv("DATA_FILE", "db.json")

DEBUG = True

# Write the default admin/student accounts when the data file has no users yet
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
# Also add sample courses and one enrollment to empty collections
SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "1")))

# Known weakness kept for compatibility: user payloads include the plaintext password
EXPOSE_PASSWORDS = bool(int(os.getenv("EXPOSE_PASSWORDS", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
AUTH_REALM = os.getenv("AUTH_REALM", "enrollment")
