from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from core.domain import DateWindow


class EvaluationMode(str, Enum):
    """ACTUAL stops at the as-of date; PROJECTED runs to the end of the window."""

    ACTUAL = "actual"
    PROJECTED = "projected"


class PeriodScope(str, Enum):
    MONTH = "month"
    YEAR = "year"
    ALL_TIME = "all"


@dataclass(frozen=True)
class ResolvedPeriod:
    year: Optional[int]
    month: Optional[int]
    window: DateWindow

    @property
    def scope(self) -> PeriodScope:
        if self.month is not None:
            return PeriodScope.MONTH
        if self.year is not None:
            return PeriodScope.YEAR
        return PeriodScope.ALL_TIME


@dataclass(frozen=True)
class PeriodBucket:
    label: str
    # month number (1..12) for monthly buckets, calendar year for yearly buckets
    number: int
    window: DateWindow


@dataclass(frozen=True)
class FinancialSummary:
    revenue: Decimal
    project_expenses: Decimal
    general_expenses: Decimal
    obligation_expenses_actual: Decimal
    obligation_expenses_projected: Decimal
    total_expenses_actual: Decimal
    total_expenses_projected: Decimal
    gross_profit_actual: Decimal
    gross_profit_projected: Decimal
    profit_margin_actual: Decimal
    profit_margin_projected: Decimal


@dataclass(frozen=True)
class BucketSummary:
    bucket: PeriodBucket
    summary: FinancialSummary


@dataclass(frozen=True)
class CumulativeFunds:
    as_of: date
    all_time_income: Decimal
    all_time_expenses_actual: Decimal
    all_time_expenses_projected: Decimal
    current_funds_actual: Decimal
    current_funds_projected: Decimal


@dataclass(frozen=True)
class DashboardMetrics:
    period: ResolvedPeriod
    summary: FinancialSummary
    expenses_by_category: dict[str, Decimal]
    breakdown: Optional[list[BucketSummary]]
    project_count: int
    active_obligation_count: int
    funds: CumulativeFunds


__all__ = [
    "EvaluationMode",
    "PeriodScope",
    "ResolvedPeriod",
    "PeriodBucket",
    "FinancialSummary",
    "BucketSummary",
    "CumulativeFunds",
    "DashboardMetrics",
]
