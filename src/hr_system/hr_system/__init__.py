"""HR System package.

This package is organized by feature modules (attendance, reports, timesheet,
payroll, analytics, ...) with a thin Flask controller layer over pure
service/calculator layers.
"""
