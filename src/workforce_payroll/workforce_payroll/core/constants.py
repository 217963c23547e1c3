"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

ALLOWED_MINUTE_INCREMENTS = (1, 5, 6, 10, 15, 30, 60)

DEFAULT_MINUTE_INCREMENT = 30
DEFAULT_MIN_HOURS_PER_DAY = 0.0
DEFAULT_MAX_HOURS_PER_DAY = 8.0
DEFAULT_MAX_OT_HOURS_PER_DAY = 4.0

# Hours of overtime paid at the first tier before the second tier starts.
OT_TIER1_HOURS = 2.0

OT1_5_MULTIPLIER = Decimal("1.5")
OT2_0_MULTIPLIER = Decimal("2.0")

DEFAULT_EPF_EMPLOYEE_RATE = Decimal("11")
DEFAULT_EPF_EMPLOYER_RATE = Decimal("12")
DEFAULT_SOCSO_EMPLOYEE_RATE = Decimal("0.5")
DEFAULT_SOCSO_EMPLOYER_RATE = Decimal("1.75")
DEFAULT_EIS_EMPLOYEE_RATE = Decimal("0.2")
DEFAULT_EIS_EMPLOYER_RATE = Decimal("0.2")

MONEY_QUANTUM = Decimal("0.01")

DAYS_PER_WEEK = 7
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
