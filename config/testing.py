import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
}

TIMEZONE = "Asia/Kolkata"

SMTP = {"server": "localhost", "port": 25, "username": "", "password": "", "sender": ""}
ADMIN_EMAIL = ""

REMINDER_SCHEDULE = "Shift 1@09:30,Shift 2@22:00"
ENABLE_REMINDERS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
