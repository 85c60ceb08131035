import os

from config.config import (  # noqa: F401
    PAID_LEAVE_ALLOWANCE_DAYS,
    REQUIRED_WORK_MINUTES,
    TIMESHEET_PAGE_SIZE,
    TIMEZONE,
    WEEK_STARTS_ON,
)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SEED_FILE = os.getenv("SEED_FILE", "data/seed.json")

DEBUG = True
