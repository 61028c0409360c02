"""Example: run the monthly payroll through the service layer (no Flask).

Controllers are thin; the calculation lives in PayrollService.
"""

import importlib

from config import get_settings_module

from src.payroll_desk.payroll_desk.common.datetime_utils import now_local
from src.payroll_desk.payroll_desk.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    today = now_local().date()
    for record in container.payroll_service.calculate(today.month, today.year):
        print(f"{record.full_name:<30} {record.present_days:>3} days  {record.net_payable:>12}  {record.status.value}")


if __name__ == "__main__":
    main()
