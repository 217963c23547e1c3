from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization decisions."""

    ADMIN = "admin"
    SUBCON_ADMIN = "subcon-admin"
    AGENT = "agent"
    CLIENT = "client"
    WORKER = "worker"


class PaymentType(str, Enum):
    """How a worker is paid; decides attendance vs. timesheet tracking."""

    MONTHLY_SALARY = "monthly-salary"
    HOURLY = "hourly"
    UNIT_BASED = "unit-based"


class ClockAction(str, Enum):
    CLOCK_IN = "clockIn"
    CLOCK_OUT = "clockOut"
    LUNCH_OUT = "lunchOut"
    LUNCH_IN = "lunchIn"


class CheckInMethod(str, Enum):
    MANUAL = "manual"
    QR_CODE = "qr-code"


class RoundingMethod(str, Enum):
    NEAREST = "nearest"
    UP = "up"
    DOWN = "down"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"
    LEAVE = "leave"


class TimesheetStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED_SUBCON = "approved_subcon"
    APPROVED_ADMIN = "approved_admin"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class PayrollStatus(str, Enum):
    DRAFT = "draft"
    APPROVED = "approved"
    PAID = "paid"


class DeductionConfigType(str, Enum):
    """Worker classification for deduction configs; GROUP outranks BAND."""

    GROUP = "group"
    BAND = "band"


class AmountType(str, Enum):
    """Whether an allowance/deduction amount is flat or a percent of gross."""

    FIXED = "fixed"
    PERCENTAGE = "percentage"


class LoanCategory(str, Enum):
    LOAN = "loan"
    ADVANCE = "advance"


class LoanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DEFAULTED = "defaulted"


class InstallmentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
