from __future__ import annotations

from calendar import monthrange
from datetime import MAXYEAR, date, datetime
from decimal import Decimal
from typing import Iterator

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def to_decimal(value: object) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def clamp_day(year: int, month: int, day: int) -> date:
    """Day ``day`` of the month, pulled back to the month's last day when it overflows."""
    last_day = monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def next_month_start(anchor: date) -> date:
    if anchor.month == 12:
        return date(anchor.year + 1, 1, 1)
    return date(anchor.year, anchor.month + 1, 1)


def iter_month_starts(start: date, end: date) -> Iterator[date]:
    """First day of every month from ``start``'s month while it is ``<= end``."""
    current = date(start.year, start.month, 1)
    while current <= end:
        yield current
        if current.year == MAXYEAR and current.month == 12:
            return
        current = next_month_start(current)


def sunday_based_weekday(value: date) -> int:
    # 0=Sunday .. 6=Saturday
    return (value.weekday() + 1) % 7


def profit_margin(gross_profit: Decimal, revenue: Decimal) -> Decimal:
    if revenue <= ZERO:
        return ZERO
    return gross_profit / revenue * HUNDRED


__all__ = [
    "ZERO",
    "as_date",
    "to_decimal",
    "clamp_day",
    "next_month_start",
    "iter_month_starts",
    "sunday_based_weekday",
    "profit_margin",
]
