from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime
from decimal import Decimal
from typing import Callable

from core.domain import (
    DateWindow,
    Frequency,
    MonthlyObligation,
    OneTimeObligation,
    QuarterlyObligation,
    RecurringObligation,
    TwiceMonthlyObligation,
    WeeklyObligation,
    YearlyObligation,
)
from core.services.finance.helpers import (
    ZERO,
    as_date,
    clamp_day,
    iter_month_starts,
    sunday_based_weekday,
    to_decimal,
)
from core.services.finance.models import EvaluationMode


def effective_bounds(
    obligation: RecurringObligation,
    window: DateWindow,
    mode: EvaluationMode,
    as_of: date | datetime,
) -> tuple[date, date]:
    """
    Intersect the query window with the obligation's payment terms.

    ACTUAL additionally stops at ``as_of`` so nothing that has not happened
    yet is counted. The result may be inverted (start after end), which
    means the obligation cannot fall due in the window.
    """
    start = window.start
    if obligation.start_of_payment is not None and obligation.start_of_payment > start:
        start = obligation.start_of_payment

    end = window.end
    if obligation.end_of_payment is not None and obligation.end_of_payment < end:
        end = obligation.end_of_payment
    if mode is EvaluationMode.ACTUAL:
        end = min(end, as_date(as_of))
    return start, end


def _first_day(days: tuple[int, ...]) -> int | None:
    if not days or days[0] < 1:
        return None
    return days[0]


def _weekly_dates(obligation: WeeklyObligation, year: int, month: int) -> list[date]:
    if obligation.day_of_week is None:
        return []
    last_day = monthrange(year, month)[1]
    out: list[date] = []
    for day in range(1, last_day + 1):
        candidate = date(year, month, day)
        if sunday_based_weekday(candidate) == obligation.day_of_week:
            out.append(candidate)
    return out


def _twice_monthly_dates(obligation: TwiceMonthlyObligation, year: int, month: int) -> list[date]:
    return [clamp_day(year, month, day) for day in obligation.days_of_month if day >= 1]


def _monthly_dates(obligation: MonthlyObligation, year: int, month: int) -> list[date]:
    day = _first_day(obligation.days_of_month)
    if day is None:
        return []
    return [clamp_day(year, month, day)]


def _quarterly_dates(obligation: QuarterlyObligation, year: int, month: int) -> list[date]:
    day = _first_day(obligation.days_of_month)
    if day is None or obligation.month_anchor is None:
        return []
    # Cycle restarts every calendar year: months before the anchor never qualify.
    offset = (month - 1) - (obligation.month_anchor - 1)
    if offset < 0 or offset % 3 != 0:
        return []
    return [clamp_day(year, month, day)]


def _yearly_dates(obligation: YearlyObligation, year: int, month: int) -> list[date]:
    day = _first_day(obligation.days_of_month)
    if day is None or month != obligation.month_anchor:
        return []
    return [clamp_day(year, month, day)]


_CANDIDATES: dict[Frequency, Callable[..., list[date]]] = {
    Frequency.WEEKLY: _weekly_dates,
    Frequency.TWICE_MONTHLY: _twice_monthly_dates,
    Frequency.MONTHLY: _monthly_dates,
    Frequency.QUARTERLY: _quarterly_dates,
    Frequency.YEARLY: _yearly_dates,
}


def occurrence_dates(
    obligation: RecurringObligation,
    window: DateWindow,
    mode: EvaluationMode,
    as_of: date | datetime,
) -> list[date]:
    """Every due date of ``obligation`` inside ``window`` under ``mode``, in order."""
    bounds = DateWindow(*effective_bounds(obligation, window, mode, as_of))
    if bounds.is_empty:
        return []

    if isinstance(obligation, OneTimeObligation):
        specific = obligation.specific_date
        if specific is not None and bounds.contains(specific):
            return [specific]
        return []

    generate = _CANDIDATES.get(obligation.frequency)
    if generate is None:
        return []

    out: list[date] = []
    for month_start in iter_month_starts(bounds.start, bounds.end):
        for candidate in generate(obligation, month_start.year, month_start.month):
            if bounds.contains(candidate):
                out.append(candidate)
    return out


def occurrence_count(
    obligation: RecurringObligation,
    window: DateWindow,
    mode: EvaluationMode,
    as_of: date | datetime,
) -> int:
    return len(occurrence_dates(obligation, window, mode, as_of))


def occurrence_total(
    obligation: RecurringObligation,
    window: DateWindow,
    mode: EvaluationMode,
    as_of: date | datetime,
) -> Decimal:
    count = occurrence_count(obligation, window, mode, as_of)
    if count == 0:
        return ZERO
    return to_decimal(obligation.amount) * count


def total_for_obligations(
    obligations: list[RecurringObligation],
    window: DateWindow,
    mode: EvaluationMode,
    as_of: date | datetime,
) -> Decimal:
    return sum(
        (occurrence_total(obligation, window, mode, as_of) for obligation in obligations),
        ZERO,
    )


__all__ = [
    "effective_bounds",
    "occurrence_dates",
    "occurrence_count",
    "occurrence_total",
    "total_for_obligations",
]
