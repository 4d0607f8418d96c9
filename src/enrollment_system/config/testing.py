# None keeps the document in memory
DATA_FILE = None

DEBUG = False
TESTING = True

AUTO_SEED_DB = True
SEED_SAMPLE_DATA = False

EXPOSE_PASSWORDS = True

LOG_LEVEL = "WARNING"
AUTH_REALM = "enrollment"
