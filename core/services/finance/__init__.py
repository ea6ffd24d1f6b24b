from .aggregation import LedgerAggregator, summarize
from .buckets import build_period_buckets
from .funds import CumulativeFundsCalculator
from .models import (
    BucketSummary,
    CumulativeFunds,
    DashboardMetrics,
    EvaluationMode,
    FinancialSummary,
    PeriodBucket,
    PeriodScope,
    ResolvedPeriod,
)
from .occurrences import occurrence_count, occurrence_dates, occurrence_total
from .service import FinanceService
from .settings import FinanceSettings
from .windows import resolve_window

__all__ = [
    "FinanceService",
    "FinanceSettings",
    "LedgerAggregator",
    "CumulativeFundsCalculator",
    "summarize",
    "occurrence_total",
    "occurrence_count",
    "occurrence_dates",
    "resolve_window",
    "build_period_buckets",
    "EvaluationMode",
    "PeriodScope",
    "ResolvedPeriod",
    "PeriodBucket",
    "FinancialSummary",
    "BucketSummary",
    "CumulativeFunds",
    "DashboardMetrics",
]
