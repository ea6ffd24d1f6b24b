from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, ClassVar, Optional

from core.domain.enums import Frequency
from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class RecurringObligation:
    """
    A company expense that falls due on a frequency rule.

    Each frequency is its own subclass carrying only the parameters that
    frequency reads. Parameters may be ``None`` or empty when a record was
    saved incompletely; such an obligation simply never falls due.
    """

    id: str
    name: str
    amount: Decimal
    category: Optional[str] = None
    start_of_payment: Optional[date] = None
    end_of_payment: Optional[date] = None
    is_active: bool = True
    notes: Optional[str] = None

    frequency: ClassVar[Frequency]

    @staticmethod
    def create(name: str, amount: Decimal, frequency: Frequency | str, **extra: Any) -> "RecurringObligation":
        return build_obligation(frequency, id=generate_id(), name=name, amount=Decimal(amount), **extra)


@dataclass(frozen=True)
class OneTimeObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.ONE_TIME
    specific_date: Optional[date] = None


@dataclass(frozen=True)
class WeeklyObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.WEEKLY
    # 0=Sunday .. 6=Saturday
    day_of_week: Optional[int] = None


@dataclass(frozen=True)
class TwiceMonthlyObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.TWICE_MONTHLY
    days_of_month: tuple[int, ...] = ()


@dataclass(frozen=True)
class MonthlyObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.MONTHLY
    days_of_month: tuple[int, ...] = ()


@dataclass(frozen=True)
class QuarterlyObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.QUARTERLY
    days_of_month: tuple[int, ...] = ()
    # first month (1..12) of the three-month cycle
    month_anchor: Optional[int] = None


@dataclass(frozen=True)
class YearlyObligation(RecurringObligation):
    frequency: ClassVar[Frequency] = Frequency.YEARLY
    days_of_month: tuple[int, ...] = ()
    month_anchor: Optional[int] = None


OBLIGATION_TYPES: dict[Frequency, type[RecurringObligation]] = {
    Frequency.ONE_TIME: OneTimeObligation,
    Frequency.WEEKLY: WeeklyObligation,
    Frequency.TWICE_MONTHLY: TwiceMonthlyObligation,
    Frequency.MONTHLY: MonthlyObligation,
    Frequency.QUARTERLY: QuarterlyObligation,
    Frequency.YEARLY: YearlyObligation,
}

_VARIANT_PARAMS = ("specific_date", "day_of_week", "days_of_month", "month_anchor")


def parse_days_of_month(raw: str | None) -> tuple[int, ...]:
    """Parse stored ``"1,15"`` style text; tokens that are not integers are dropped."""
    days: list[int] = []
    for part in (raw or "").split(","):
        token = part.strip()
        if not token:
            continue
        try:
            days.append(int(token))
        except ValueError:
            continue
    return tuple(days)


def format_days_of_month(days: tuple[int, ...] | list[int] | None) -> str | None:
    if not days:
        return None
    return ",".join(str(day) for day in days)


def build_obligation(frequency: Frequency | str, **values: Any) -> RecurringObligation:
    """Build the variant for ``frequency``, discarding parameters it does not use."""
    freq = frequency if isinstance(frequency, Frequency) else Frequency(str(frequency))
    cls = OBLIGATION_TYPES[freq]
    accepted = set(cls.__dataclass_fields__)
    kwargs = {}
    for key, value in values.items():
        if key in _VARIANT_PARAMS and key not in accepted:
            continue
        if key == "days_of_month" and not isinstance(value, tuple):
            value = parse_days_of_month(value) if isinstance(value, str) or value is None else tuple(value)
        kwargs[key] = value
    return cls(**kwargs)


__all__ = [
    "RecurringObligation",
    "OneTimeObligation",
    "WeeklyObligation",
    "TwiceMonthlyObligation",
    "MonthlyObligation",
    "QuarterlyObligation",
    "YearlyObligation",
    "OBLIGATION_TYPES",
    "parse_days_of_month",
    "format_days_of_month",
    "build_obligation",
]
