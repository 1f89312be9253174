import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Read-only access to the store behind the schedule/attendance/excuse sources.
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True

WEEK_DAYS = int(os.getenv("WEEK_DAYS", "7"))
WEEK_STARTS_ON = os.getenv("WEEK_STARTS_ON", "sunday")
SOURCE_FETCH_WORKERS = int(os.getenv("SOURCE_FETCH_WORKERS", "3"))
