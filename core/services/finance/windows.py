from __future__ import annotations

from datetime import date, datetime

from core.domain import DateWindow
from core.exceptions import ValidationError
from core.interfaces import LedgerExtentProvider
from core.services.finance.helpers import as_date
from core.services.finance.models import ResolvedPeriod


def validate_selector(year: int | None, month: int | None) -> None:
    if month is not None and year is None:
        raise ValidationError("A month selector needs a year.", code="PERIOD_MONTH_WITHOUT_YEAR")
    if year is not None and not 1 <= int(year) <= 9999:
        raise ValidationError("Year must be between 1 and 9999.", code="PERIOD_YEAR_INVALID")
    if month is not None and not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12.", code="PERIOD_MONTH_INVALID")


def all_time_window(extent: LedgerExtentProvider, as_of: date | datetime) -> DateWindow:
    """
    From January 1 of the earliest recorded fact to December 31 of the
    latest year that matters.

    The end never falls before the current year, and it reaches far enough
    to include obligations that only start paying later on.
    """
    current_year = as_date(as_of).year
    earliest = extent.earliest_fact_date()
    first_year = earliest.year if earliest is not None else current_year

    last_year = current_year
    for candidate in (extent.latest_transaction_date(), extent.latest_obligation_start()):
        if candidate is not None and candidate.year > last_year:
            last_year = candidate.year
    return DateWindow.for_years(min(first_year, last_year), last_year)


def resolve_window(
    year: int | None,
    month: int | None,
    extent: LedgerExtentProvider,
    as_of: date | datetime,
) -> ResolvedPeriod:
    validate_selector(year, month)
    if year is not None and month is not None:
        return ResolvedPeriod(year=int(year), month=int(month), window=DateWindow.for_month(int(year), int(month)))
    if year is not None:
        return ResolvedPeriod(year=int(year), month=None, window=DateWindow.for_year(int(year)))
    return ResolvedPeriod(year=None, month=None, window=all_time_window(extent, as_of))


__all__ = ["validate_selector", "all_time_window", "resolve_window"]
