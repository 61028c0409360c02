from __future__ import annotations

from datetime import date

from src.payroll_desk.payroll_desk.dashboard.service import DashboardService

from .fakes import StaticDashboard


def test_stats_keys_and_absent_derivation():
    repo = StaticDashboard(total=12, active=10, present=6, late=2, on_leave=1, pending_leaves=3, pending_members=4)

    stats = DashboardService(repo).stats(today=date(2025, 3, 10)).to_dict()

    assert stats == {
        "totalEmployees": 12,
        "activeEmployees": 10,
        "presentToday": 6,
        "lateToday": 2,
        "onLeaveToday": 1,
        "absentToday": 1,
        "pendingLeaves": 3,
        "pendingMembers": 4,
    }


def test_absent_is_not_floored():
    repo = StaticDashboard(total=5, active=3, present=4, late=1, on_leave=1)

    assert DashboardService(repo).stats(today=date(2025, 3, 10)).absent_today == -3
