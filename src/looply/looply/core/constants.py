"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
ACCESS_CODE_LENGTH = 8

REPORT_KEY_PREFIX = "eod:"
EMPLOYEE_KEY_PREFIX = "employee:"
COMPANY_KEY_PREFIX = "company:"
USER_KEY_PREFIX = "user:"

CSV_HEADER = "Date,Employee,Total Hours,Shifts,Summary,Status"
UNKNOWN_EMPLOYEE = "Unknown"

DEFAULT_TIMEZONE = "UTC"
