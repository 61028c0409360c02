from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PayrollInputRow, PayrollLine


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, row: PayrollInputRow, *, month: int, year: int) -> PayrollLine:
        raise NotImplementedError
