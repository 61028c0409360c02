"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ALLOWED_LEAVES = 12
DEFAULT_BREAK_TYPE = "General"

CALENDAR_MONTH_DAYS = 30
FIXED_MONTH_DAYS = 26

OWNER_TOKEN_HOURS = 12
EMPLOYEE_TOKEN_DAYS = 30

OTP_LENGTH = 6
OTP_TTL_SECONDS = 300

MIN_PASSWORD_LENGTH = 6
MIN_PAYROLL_YEAR = 2000
MAX_PAYROLL_YEAR = 2100

# DECIMAL(10, 2) columns
MAX_MONEY_AMOUNT = "99999999.99"
