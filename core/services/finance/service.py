from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import AggregationUnavailableError, DataSourceError
from core.interfaces import (
    LedgerExtentProvider,
    LedgerRepository,
    ObligationRepository,
    ProjectRepository,
)
from core.services.finance.aggregation import LedgerAggregator
from core.services.finance.buckets import build_period_buckets
from core.services.finance.funds import CumulativeFundsCalculator
from core.services.finance.helpers import as_date
from core.services.finance.models import CumulativeFunds, DashboardMetrics
from core.services.finance.settings import FinanceSettings
from core.services.finance.windows import resolve_window, validate_selector

logger = logging.getLogger(__name__)


@contextmanager
def _data_reads(operation: str) -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, OSError, DataSourceError) as exc:
        logger.error("Ledger read failed during %s: %s", operation, exc, exc_info=True)
        raise AggregationUnavailableError(
            f"Financial data is unavailable ({operation}).",
            code="AGGREGATION_UNAVAILABLE",
            operation=operation,
        ) from exc


class FinanceService:
    """Company-wide financial read models: dashboard summaries, breakdowns and funds."""

    def __init__(
        self,
        *,
        obligation_repo: ObligationRepository,
        ledger_repo: LedgerRepository,
        project_repo: ProjectRepository,
        extent_provider: LedgerExtentProvider,
        settings: FinanceSettings | None = None,
    ) -> None:
        self._obligation_repo: ObligationRepository = obligation_repo
        self._ledger_repo: LedgerRepository = ledger_repo
        self._project_repo: ProjectRepository = project_repo
        self._extent: LedgerExtentProvider = extent_provider
        self._settings: FinanceSettings = settings or FinanceSettings()
        self._aggregator = LedgerAggregator(
            ledger_repo=ledger_repo,
            project_repo=project_repo,
            uncategorized_label=self._settings.uncategorized_label,
        )
        self._funds = CumulativeFundsCalculator(self._aggregator, epoch=self._settings.funds_epoch)

    @property
    def aggregator(self) -> LedgerAggregator:
        return self._aggregator

    def get_dashboard_metrics(
        self,
        year: int | None = None,
        month: int | None = None,
        *,
        as_of: date | datetime | None = None,
    ) -> DashboardMetrics:
        validate_selector(year, month)
        # One instant for the whole report, buckets included.
        now = as_date(as_of or date.today())

        with _data_reads("dashboard metrics"):
            period = resolve_window(year, month, self._extent, now)
            window = period.window
            obligations = self._obligation_repo.list_obligations(active_only=True)
            summary = self._aggregator.aggregate(window, obligations, now)
            by_category = self._aggregator.expenses_by_category(window, obligations, now)

            buckets = build_period_buckets(period)
            breakdown = self._aggregator.breakdown(buckets, obligations, now) if buckets else None

            prefix = self._settings.active_project_prefix
            project_count = sum(
                1 for project in self._project_repo.list_projects(window) if project.is_active_code(prefix)
            )
            funds = self._funds.compute(obligations, now)

        logger.info(
            "Dashboard metrics %s..%s (%s): revenue=%s expenses_actual=%s buckets=%s",
            window.start,
            window.end,
            period.scope.value,
            summary.revenue,
            summary.total_expenses_actual,
            len(buckets),
        )
        return DashboardMetrics(
            period=period,
            summary=summary,
            expenses_by_category=by_category,
            breakdown=breakdown,
            project_count=project_count,
            active_obligation_count=len(obligations),
            funds=funds,
        )

    def get_current_funds(self, *, as_of: date | datetime | None = None) -> CumulativeFunds:
        now = as_date(as_of or date.today())
        with _data_reads("current funds"):
            obligations = self._obligation_repo.list_obligations(active_only=True)
            return self._funds.compute(obligations, now)


__all__ = ["FinanceService"]
