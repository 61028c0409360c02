from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.validators import (
    optional_str,
    parse_amount,
    parse_bool,
    parse_date,
    parse_enum,
    parse_int,
    parse_optional_date,
    require_non_empty,
)
from ..core.enums import EmployeeStatus, EmploymentType, MonthCalculationType, WorkShift
from ..core.exceptions import NotFoundError, ValidationError
from .model import EDITABLE_FIELDS, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def clean_employee_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate and convert the editable fields present in ``payload``."""

    out: Dict[str, Any] = {}
    for field in EDITABLE_FIELDS:
        if field not in payload:
            continue
        value = payload[field]

        if field == "full_name":
            out[field] = require_non_empty(value, "Full name")
        elif field == "joining_date":
            out[field] = parse_date(value, "Joining date")
        elif field == "dob":
            out[field] = parse_optional_date(value, "Date of birth")
        elif field == "employment_type":
            out[field] = parse_enum(EmploymentType, value, "Employment type")
        elif field == "month_calculation_type":
            out[field] = parse_enum(MonthCalculationType, value, "Month calculation type")
        elif field == "shift":
            out[field] = parse_enum(WorkShift, value, "Shift") if optional_str(value) else None
        elif field == "status":
            out[field] = parse_enum(EmployeeStatus, value, "Status")
        elif field == "work_rate":
            out[field] = parse_amount(value, "Work rate")
        elif field in ("allowed_leaves", "taken_leaves"):
            out[field] = parse_int(value, field.replace("_", " ").capitalize(), minimum=0)
        elif field in ("pf_enabled", "esi_enabled", "tds_enabled"):
            out[field] = parse_bool(value)
        elif field == "email":
            email = optional_str(value)
            out[field] = email.lower() if email else None
        else:
            out[field] = optional_str(value)
    return out


class EmployeeService:
    """Use case: owner-managed employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def verify_by_phone(self, phone: str) -> Employee:
        employee = self._employees.get_by_phone((phone or "").strip())
        if not employee:
            raise NotFoundError("Not found")
        return employee

    def find_by_identifier(self, identifier: str) -> Optional[Employee]:
        """Look an employee up by email (contains '@') or phone."""

        identifier = (identifier or "").strip()
        if not identifier:
            raise ValidationError("Email or phone is required")
        if "@" in identifier:
            return self._employees.get_by_email(identifier.lower())
        return self._employees.get_by_phone(identifier)

    def create(self, payload: Mapping[str, Any]) -> Employee:
        for required in ("full_name", "joining_date", "employment_type", "work_rate"):
            if payload.get(required) in (None, ""):
                raise ValidationError(f"{required} is required")

        fields = clean_employee_fields(payload)
        self._ensure_unique_contacts(fields)

        employee = Employee(id=str(uuid.uuid4()), **fields)
        self._employees.create(employee)
        logger.info("employee created id=%s name=%s", employee.id, employee.full_name)
        return self._employees.get_by_id(employee.id) or employee

    def update(self, employee_id: str, payload: Mapping[str, Any]) -> Employee:
        current = self.get(employee_id)
        fields = clean_employee_fields(payload)
        self._ensure_unique_contacts(fields, exclude_id=current.id)

        if fields:
            self._employees.update(employee_id, fields)
        return self._employees.get_by_id(employee_id) or replace(current, **fields)

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete(employee_id):
            raise NotFoundError("Not found")
        logger.info("employee deleted id=%s", employee_id)

    def _ensure_unique_contacts(self, fields: Mapping[str, Any], *, exclude_id: Optional[str] = None) -> None:
        phone = fields.get("phone")
        if phone:
            other = self._employees.get_by_phone(phone)
            if other and other.id != exclude_id:
                raise ValidationError("An employee with this phone number already exists")
        email = fields.get("email")
        if email:
            other = self._employees.get_by_email(email)
            if other and other.id != exclude_id:
                raise ValidationError("An employee with this email already exists")
