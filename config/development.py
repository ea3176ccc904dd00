import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staffing_db"),
}

# Planner defaults used until system parameters are saved from the admin API
DEFAULT_ATTENDANCE_DURATION = int(os.getenv("DEFAULT_ATTENDANCE_DURATION", "420"))
DEFAULT_STANDARD_BREAK_TIME = int(os.getenv("DEFAULT_STANDARD_BREAK_TIME", "10"))
DEFAULT_AVERAGE_RESPONSE_RATE = int(os.getenv("DEFAULT_AVERAGE_RESPONSE_RATE", "80"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
