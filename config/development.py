import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
}

# Civil timezone all timestamps are recorded in
TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

SMTP = {
    "server": os.getenv("SMTP_SERVER", "smtp.gmail.com"),
    "port": int(os.getenv("SMTP_PORT", "587")),
    "username": os.getenv("SMTP_USERNAME", ""),
    "password": os.getenv("SMTP_PASSWORD", ""),
    "sender": os.getenv("SMTP_SENDER", ""),
}
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", os.getenv("SMTP_USERNAME", ""))

# "<shift name>@HH:MM" pairs, comma separated
REMINDER_SCHEDULE = os.getenv("REMINDER_SCHEDULE", "Shift 1@09:30,Shift 2@22:00")
ENABLE_REMINDERS = bool(int(os.getenv("ENABLE_REMINDERS", "0")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
