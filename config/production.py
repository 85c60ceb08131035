import os

from config.config import (  # noqa: F401
    PAID_LEAVE_ALLOWANCE_DAYS,
    REQUIRED_WORK_MINUTES,
    SEED_FILE,
    TIMESHEET_PAGE_SIZE,
    TIMEZONE,
    WEEK_STARTS_ON,
)

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
