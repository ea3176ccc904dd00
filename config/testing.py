import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staffing_test_db"),
}

DEFAULT_ATTENDANCE_DURATION = 420
DEFAULT_STANDARD_BREAK_TIME = 10
DEFAULT_AVERAGE_RESPONSE_RATE = 80

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
