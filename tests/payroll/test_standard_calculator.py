from decimal import Decimal

from src.payroll_desk.payroll_desk.core.enums import MonthCalculationType
from src.payroll_desk.payroll_desk.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    days_in_pay_month,
)
from src.payroll_desk.payroll_desk.payroll.model import PayrollInputRow


def _row(rate: str, present: int, calc=MonthCalculationType.CALENDAR) -> PayrollInputRow:
    return PayrollInputRow(
        employee_id="e-1",
        full_name="A",
        work_rate=Decimal(rate),
        month_calculation_type=calc,
        present_days=present,
    )


def test_calendar_month_uses_thirty_days():
    line = StandardPayrollCalculator().compute(_row("30000.00", 20), month=3, year=2025)

    assert line.total_days == 30
    assert line.gross_salary == Decimal("20000.00")
    assert line.net_payable == line.gross_salary
    assert (line.month, line.year, line.present_days) == (3, 2025, 20)


def test_fixed_26_month():
    line = StandardPayrollCalculator().compute(_row("26000", 13, MonthCalculationType.FIXED_26), month=2, year=2025)

    assert line.total_days == 26
    assert line.gross_salary == Decimal("13000.00")


def test_rounds_half_up_to_two_places():
    # 30.15 / 30 = 1.005 exactly; banker's rounding would give 1.00
    line = StandardPayrollCalculator().compute(_row("30.15", 1), month=1, year=2025)
    assert line.gross_salary == Decimal("1.01")

    line = StandardPayrollCalculator().compute(_row("1000", 7), month=1, year=2025)
    assert line.gross_salary == Decimal("233.33")


def test_no_attendance_means_zero_pay():
    line = StandardPayrollCalculator().compute(_row("30000", 0), month=1, year=2025)
    assert line.gross_salary == Decimal("0.00")


def test_days_in_pay_month():
    assert days_in_pay_month(MonthCalculationType.FIXED_26) == 26
    assert days_in_pay_month(MonthCalculationType.CALENDAR) == 30
