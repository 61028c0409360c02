from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

from flask_mail import Mail

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.delivery import LogOtpSender, MailOtpSender, OtpSender
from .auth.mysql_admin_repository import MySQLAdminRepository
from .auth.otp_store import InMemoryOtpStore
from .auth.repository import AdminRepository
from .auth.service import AuthService
from .auth.tokens import TokenService
from .breaks.mysql_break_repository import MySQLBreakRepository
from .breaks.repository import BreakRepository
from .breaks.service import BreakService
from .core.constants import EMPLOYEE_TOKEN_DAYS, OTP_TTL_SECONDS, OWNER_TOKEN_HOURS
from .dashboard.mysql_dashboard_repository import MySQLDashboardRepository
from .dashboard.repository import DashboardRepository
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repositories:
    admins: AdminRepository
    employees: EmployeeRepository
    attendance: AttendanceRepository
    breaks: BreakRepository
    leaves: LeaveRepository
    holidays: HolidayRepository
    members: MemberRepository
    payroll: PayrollRepository
    dashboard: DashboardRepository


@dataclass(frozen=True)
class Container:
    repos: Repositories
    tokens: TokenService

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    break_service: BreakService
    leave_service: LeaveService
    holiday_service: HolidayService
    member_service: MemberService
    payroll_service: PayrollService
    dashboard_service: DashboardService

    # None when the repositories are not MySQL-backed (tests).
    conn: Optional[DatabaseConnection] = None


def assemble(
    repos: Repositories,
    *,
    tokens: TokenService,
    otp_sender: OtpSender,
    otp_store: Optional[InMemoryOtpStore] = None,
    allow_registration: bool = True,
    bypass_code: Optional[str] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any set of repositories."""

    employee_service = EmployeeService(repos.employees)
    auth_service = AuthService(
        repos.admins,
        employee_service,
        tokens,
        otp_store or InMemoryOtpStore(ttl=timedelta(seconds=OTP_TTL_SECONDS)),
        otp_sender,
        allow_registration=allow_registration,
        bypass_code=bypass_code,
    )

    return Container(
        repos=repos,
        tokens=tokens,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=AttendanceService(repos.attendance, repos.employees),
        break_service=BreakService(repos.breaks, repos.employees),
        leave_service=LeaveService(repos.leaves, repos.employees),
        holiday_service=HolidayService(repos.holidays),
        member_service=MemberService(repos.members, repos.employees),
        payroll_service=PayrollService(repos.payroll),
        dashboard_service=DashboardService(repos.dashboard),
        conn=conn,
    )


def token_service_from_settings(settings: Any) -> TokenService:
    return TokenService(
        str(getattr(settings, "JWT_SECRET", "") or getattr(settings, "SECRET_KEY")),
        owner_ttl=timedelta(hours=int(getattr(settings, "OWNER_TOKEN_HOURS", OWNER_TOKEN_HOURS))),
        employee_ttl=timedelta(days=int(getattr(settings, "EMPLOYEE_TOKEN_DAYS", EMPLOYEE_TOKEN_DAYS))),
    )


def otp_sender_from_settings(settings: Any, mail: Optional[Mail]) -> OtpSender:
    delivery = str(getattr(settings, "OTP_DELIVERY", "log")).lower()
    if delivery == "mail":
        if mail is None:
            # Scripts running without a Flask app have no mail handle.
            logger.warning("OTP_DELIVERY=mail but no Flask-Mail handle; OTP codes will be logged")
            return LogOtpSender()
        ttl_seconds = int(getattr(settings, "OTP_TTL_SECONDS", OTP_TTL_SECONDS))
        return MailOtpSender(
            mail,
            sender=str(getattr(settings, "MAIL_DEFAULT_SENDER", "") or getattr(settings, "MAIL_USERNAME", "")),
            ttl_minutes=max(ttl_seconds // 60, 1),
        )
    if delivery == "log":
        return LogOtpSender()
    raise ValueError(f"Unknown OTP_DELIVERY: {delivery}")


def build_container(*, db_config: dict, settings: Any, mail: Optional[Mail] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    repos = Repositories(
        admins=MySQLAdminRepository(conn),
        employees=MySQLEmployeeRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        breaks=MySQLBreakRepository(conn),
        leaves=MySQLLeaveRepository(conn),
        holidays=MySQLHolidayRepository(conn),
        members=MySQLMemberRepository(conn),
        payroll=MySQLPayrollRepository(conn),
        dashboard=MySQLDashboardRepository(conn),
    )

    return assemble(
        repos,
        tokens=token_service_from_settings(settings),
        otp_sender=otp_sender_from_settings(settings, mail),
        otp_store=InMemoryOtpStore(ttl=timedelta(seconds=int(getattr(settings, "OTP_TTL_SECONDS", OTP_TTL_SECONDS)))),
        allow_registration=bool(getattr(settings, "ALLOW_OWNER_REGISTRATION", True)),
        bypass_code=getattr(settings, "OTP_BYPASS_CODE", None),
        conn=conn,
    )
