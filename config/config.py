import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "hr-system-secret"

    # Payroll policy
    REQUIRED_WORK_MINUTES = int(os.environ.get("REQUIRED_WORK_MINUTES", "525"))
    PAID_LEAVE_ALLOWANCE_DAYS = int(os.environ.get("PAID_LEAVE_ALLOWANCE_DAYS", "4"))

    # Calendar / timesheet view
    WEEK_STARTS_ON = int(os.environ.get("WEEK_STARTS_ON", "0"))
    TIMEZONE = os.environ.get("TIMEZONE") or None
    TIMESHEET_PAGE_SIZE = int(os.environ.get("TIMESHEET_PAGE_SIZE", "7"))

    # Optional JSON snapshot for the in-memory document repositories
    SEED_FILE = os.environ.get("SEED_FILE") or None


SECRET_KEY = Config.SECRET_KEY
REQUIRED_WORK_MINUTES = Config.REQUIRED_WORK_MINUTES
PAID_LEAVE_ALLOWANCE_DAYS = Config.PAID_LEAVE_ALLOWANCE_DAYS
WEEK_STARTS_ON = Config.WEEK_STARTS_ON
TIMEZONE = Config.TIMEZONE
TIMESHEET_PAGE_SIZE = Config.TIMESHEET_PAGE_SIZE
SEED_FILE = Config.SEED_FILE

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
