from __future__ import annotations

from core.domain import DateWindow
from core.services.finance.models import PeriodBucket, PeriodScope, ResolvedPeriod


def monthly_buckets(year: int) -> list[PeriodBucket]:
    return [
        PeriodBucket(label=f"{year}-{month:02d}", number=month, window=DateWindow.for_month(year, month))
        for month in range(1, 13)
    ]


def yearly_buckets(window: DateWindow) -> list[PeriodBucket]:
    # Most recent year first.
    return [
        PeriodBucket(label=str(year), number=year, window=DateWindow.for_year(year))
        for year in range(window.end.year, window.start.year - 1, -1)
    ]


def build_period_buckets(period: ResolvedPeriod) -> list[PeriodBucket]:
    scope = period.scope
    if scope is PeriodScope.YEAR:
        return monthly_buckets(int(period.year))  # type: ignore[arg-type]
    if scope is PeriodScope.ALL_TIME:
        return yearly_buckets(period.window)
    return []


__all__ = ["monthly_buckets", "yearly_buckets", "build_period_buckets"]
