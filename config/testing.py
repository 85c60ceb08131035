SECRET_KEY = "test-secret"

REQUIRED_WORK_MINUTES = 525
PAID_LEAVE_ALLOWANCE_DAYS = 4
WEEK_STARTS_ON = 0
TIMEZONE = None
TIMESHEET_PAGE_SIZE = 7
SEED_FILE = None

DEBUG = False
TESTING = True
