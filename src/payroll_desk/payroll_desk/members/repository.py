from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..employees.model import Employee
from .model import Member


class MemberRepository(Protocol):
    def list_all(self) -> Sequence[Member]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def create(self, member: Member) -> None:
        raise NotImplementedError

    def delete(self, member_id: str) -> bool:
        raise NotImplementedError

    def convert_to_employee(self, member_id: str, employee: Employee) -> bool:
        """Insert ``employee`` and drop the member row in one transaction.

        False when the member no longer exists; nothing is written then.
        """

        raise NotImplementedError
