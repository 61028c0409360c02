from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Token roles used for access control."""

    OWNER = "owner"
    EMPLOYEE = "employee"


class EmploymentType(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"


class MonthCalculationType(str, Enum):
    """Payroll basis: calendar month (30 days) or a fixed 26 working days."""

    CALENDAR = "calendar"
    FIXED_26 = "fixed_26"


class WorkShift(str, Enum):
    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"
    CUSTOM = "custom"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    ON_LEAVE = "on-leave"


class LeaveType(str, Enum):
    PLANNED = "planned"
    HAPPY = "happy"
    MEDICAL = "medical"


class RequestStatus(str, Enum):
    """Approval flow shared by leave requests and onboarding members."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    DRAFT = "draft"
    APPROVED = "approved"
    PAID = "paid"
