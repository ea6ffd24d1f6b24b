from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from core.domain import DateWindow, RecurringObligation, TransactionKind, TransactionStatus
from core.interfaces import LedgerRepository, ProjectRepository
from core.services.finance.analytics import build_expenses_by_category
from core.services.finance.helpers import profit_margin, to_decimal
from core.services.finance.models import BucketSummary, EvaluationMode, FinancialSummary, PeriodBucket
from core.services.finance.occurrences import total_for_obligations
from core.services.finance.settings import UNCATEGORIZED

logger = logging.getLogger(__name__)


def summarize(
    *,
    revenue: Decimal,
    project_expenses: Decimal,
    general_expenses: Decimal,
    obligation_expenses_actual: Decimal,
    obligation_expenses_projected: Decimal,
) -> FinancialSummary:
    total_actual = project_expenses + general_expenses + obligation_expenses_actual
    total_projected = project_expenses + general_expenses + obligation_expenses_projected
    gross_actual = revenue - total_actual
    gross_projected = revenue - total_projected
    return FinancialSummary(
        revenue=revenue,
        project_expenses=project_expenses,
        general_expenses=general_expenses,
        obligation_expenses_actual=obligation_expenses_actual,
        obligation_expenses_projected=obligation_expenses_projected,
        total_expenses_actual=total_actual,
        total_expenses_projected=total_projected,
        gross_profit_actual=gross_actual,
        gross_profit_projected=gross_projected,
        profit_margin_actual=profit_margin(gross_actual, revenue),
        profit_margin_projected=profit_margin(gross_projected, revenue),
    )


class LedgerAggregator:
    """Combines ledger sums with obligation occurrences for one window at a time."""

    def __init__(
        self,
        *,
        ledger_repo: LedgerRepository,
        project_repo: ProjectRepository,
        uncategorized_label: str = UNCATEGORIZED,
    ) -> None:
        self._ledger_repo: LedgerRepository = ledger_repo
        self._project_repo: ProjectRepository = project_repo
        self._uncategorized = uncategorized_label

    def revenue(self, window: DateWindow | None) -> Decimal:
        # Income is deliberately not filtered by status.
        receivables = to_decimal(self._project_repo.sum_receivables(window))
        income = to_decimal(self._ledger_repo.sum_transactions(TransactionKind.INCOME, None, window))
        return receivables + income

    def completed_expenses(self, kind: TransactionKind, window: DateWindow | None) -> Decimal:
        return to_decimal(self._ledger_repo.sum_transactions(kind, TransactionStatus.COMPLETED, window))

    def aggregate(
        self,
        window: DateWindow,
        obligations: list[RecurringObligation],
        as_of: date | datetime,
    ) -> FinancialSummary:
        summary = summarize(
            revenue=self.revenue(window),
            project_expenses=self.completed_expenses(TransactionKind.PROJECT_EXPENSE, window),
            general_expenses=self.completed_expenses(TransactionKind.GENERAL_EXPENSE, window),
            obligation_expenses_actual=total_for_obligations(obligations, window, EvaluationMode.ACTUAL, as_of),
            obligation_expenses_projected=total_for_obligations(
                obligations, window, EvaluationMode.PROJECTED, as_of
            ),
        )
        logger.debug(
            "Aggregated %s..%s: revenue=%s expenses_actual=%s expenses_projected=%s",
            window.start,
            window.end,
            summary.revenue,
            summary.total_expenses_actual,
            summary.total_expenses_projected,
        )
        return summary

    def expenses_by_category(
        self,
        window: DateWindow,
        obligations: list[RecurringObligation],
        as_of: date | datetime,
    ) -> dict[str, Decimal]:
        general = self._ledger_repo.list_transactions(
            TransactionKind.GENERAL_EXPENSE,
            TransactionStatus.COMPLETED,
            window,
        )
        return build_expenses_by_category(
            obligations=obligations,
            general_transactions=general,
            window=window,
            as_of=as_of,
            uncategorized_label=self._uncategorized,
        )

    def breakdown(
        self,
        buckets: list[PeriodBucket],
        obligations: list[RecurringObligation],
        as_of: date | datetime,
    ) -> list[BucketSummary]:
        return [
            BucketSummary(bucket=bucket, summary=self.aggregate(bucket.window, obligations, as_of))
            for bucket in buckets
        ]


__all__ = ["LedgerAggregator", "summarize"]
