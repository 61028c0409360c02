from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    active_employees: int
    present_today: int
    late_today: int
    on_leave_today: int
    pending_leaves: int
    pending_members: int

    @property
    def absent_today(self) -> int:
        # Not floored: inconsistent counts show up as a negative number.
        return self.active_employees - self.present_today - self.late_today - self.on_leave_today

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "activeEmployees": self.active_employees,
            "presentToday": self.present_today,
            "lateToday": self.late_today,
            "onLeaveToday": self.on_leave_today,
            "absentToday": self.absent_today,
            "pendingLeaves": self.pending_leaves,
            "pendingMembers": self.pending_members,
        }
