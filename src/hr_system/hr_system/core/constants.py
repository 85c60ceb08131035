"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# 8 hours 45 minutes
DEFAULT_REQUIRED_WORK_MINUTES = 8 * 60 + 45
DEFAULT_PAID_LEAVE_ALLOWANCE_DAYS = 4
DEFAULT_WEEK_STARTS_ON = 0
DEFAULT_TIMESHEET_PAGE_SIZE = 7

LESS_WORKED_LABEL = "Less Worked"
NOT_SUBMITTED_LABEL = "Not Submitted"
PRODUCTIVE_LABEL = "Productive"
AVERAGE_LABEL = "Average"
LOW_LABEL = "Low"
