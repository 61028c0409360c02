from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, EmployeeStatus
from .model import DashboardStats
from .repository import DashboardRepository


class DashboardService:
    def __init__(self, dashboard: DashboardRepository, *, max_workers: int = 7):
        self._dashboard = dashboard
        self._max_workers = max_workers

    def stats(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or now_local().date()
        repo = self._dashboard

        with ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="dashboard") as pool:
            total = pool.submit(repo.count_employees)
            active = pool.submit(repo.count_employees, status=EmployeeStatus.ACTIVE)
            present = pool.submit(repo.count_attendance, attendance_date=today, status=AttendanceStatus.PRESENT)
            late = pool.submit(repo.count_attendance, attendance_date=today, status=AttendanceStatus.LATE)
            on_leave = pool.submit(repo.count_employees, status=EmployeeStatus.ON_LEAVE)
            pending_leaves = pool.submit(repo.count_pending_leaves)
            pending_members = pool.submit(repo.count_pending_members)

        return DashboardStats(
            total_employees=total.result(),
            active_employees=active.result(),
            present_today=present.result(),
            late_today=late.result(),
            on_leave_today=on_leave.result(),
            pending_leaves=pending_leaves.result(),
            pending_members=pending_members.result(),
        )
