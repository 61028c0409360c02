from __future__ import annotations

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import EmploymentType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import clean_employee_fields
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)

# Fields the owner may set while approving; everything else comes from the signup.
APPROVAL_OVERRIDES = ("employment_type", "work_rate", "email", "position", "department", "shift", "month_calculation_type")


class MemberService:
    """Onboarding queue: public signups waiting for the owner."""

    def __init__(self, members: MemberRepository, employees: EmployeeRepository):
        self._members = members
        self._employees = employees

    def list_all(self) -> Sequence[Member]:
        return self._members.list_all()

    def create(self, name: Any, number: Any) -> Member:
        if not name or not number:
            raise ValidationError("Name and Number are required")
        member = Member(
            id=str(uuid.uuid4()),
            name=require_non_empty(name, "Name"),
            number=require_non_empty(number, "Number"),
        )
        self._members.create(member)
        return member

    def approve(
        self,
        member_id: str,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        today: Optional[date] = None,
    ) -> Employee:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found")

        if self._employees.get_by_phone(member.number):
            raise ValidationError("An employee with this phone number already exists")

        extra = clean_employee_fields({k: v for k, v in (overrides or {}).items() if k in APPROVAL_OVERRIDES})
        fields = {
            "employment_type": EmploymentType.DAILY,
            "work_rate": Decimal("0.00"),
            **extra,
        }
        employee = Employee(
            id=str(uuid.uuid4()),
            full_name=member.name,
            phone=member.number,
            joining_date=today or now_local().date(),
            **fields,
        )

        if not self._members.convert_to_employee(member_id, employee):
            raise NotFoundError("Member not found")
        logger.info("member approved member=%s employee=%s", member_id, employee.id)
        return employee

    def reject(self, member_id: str) -> None:
        self.delete(member_id)

    def delete(self, member_id: str) -> None:
        if not self._members.delete(member_id):
            raise NotFoundError("Member not found")
