"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_REQUIRED_HOURS = Decimal("486")
DEFAULT_HOURS_PER_DAY = Decimal("8")
DEFAULT_DAYS_PER_WEEK = 5
MIN_DAYS_PER_WEEK = 1
MAX_DAYS_PER_WEEK = 6

# Column limits: students.required_hours DECIMAL(7,2), hours_per_day DECIMAL(4,2).
HOURS_PLACES = Decimal("0.01")
MAX_REQUIRED_HOURS = Decimal("99999.99")
MAX_HOURS_PER_DAY = Decimal("24")

DEFAULT_TIME_IN = "08:00"
DEFAULT_TIME_OUT = "17:00"
DEFAULT_LUNCH_START = "12:00"
DEFAULT_LUNCH_END = "13:00"

HALF_DAY_HOURS = Decimal("4.00")

COMPLETED = "COMPLETED"
RECENT_DAYS = 14
