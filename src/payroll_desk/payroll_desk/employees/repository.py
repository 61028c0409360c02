from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_phone(self, phone: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        """Raises ValidationError when phone or email is already taken."""

        raise NotImplementedError

    def update(self, employee_id: str, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        """Raises ConflictError while child records still reference the employee."""

        raise NotImplementedError
