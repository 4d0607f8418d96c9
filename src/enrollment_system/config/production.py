import os

DATA_FILE = os.getenv("DATA_FILE", "db.json")

DEBUG = False

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "0")))

EXPOSE_PASSWORDS = bool(int(os.getenv("EXPOSE_PASSWORDS", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
AUTH_REALM = os.getenv("AUTH_REALM", "enrollment")
