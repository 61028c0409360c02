from __future__ import annotations

import calendar
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the given month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def round_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def hours_between(start: datetime, end: datetime) -> Decimal:
    """Elapsed hours rounded to 2 decimals (half-up)."""
    seconds = Decimal(str((end - start).total_seconds()))
    return round_money(seconds / Decimal(3600))


def whole_minutes_between(start: datetime, end: datetime) -> int:
    """Elapsed whole minutes, floored, never negative."""
    minutes = int((end - start).total_seconds() // 60)
    return max(minutes, 0)
