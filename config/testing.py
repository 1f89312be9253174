import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test_db"),
}

DEBUG = False
TESTING = True

WEEK_DAYS = 7
WEEK_STARTS_ON = "sunday"
SOURCE_FETCH_WORKERS = 1
