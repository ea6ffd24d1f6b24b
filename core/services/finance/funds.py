from __future__ import annotations

from datetime import date, datetime

from core.domain import DateWindow, RecurringObligation, TransactionKind
from core.services.finance.aggregation import LedgerAggregator
from core.services.finance.helpers import as_date, to_decimal
from core.services.finance.models import CumulativeFunds, EvaluationMode
from core.services.finance.occurrences import total_for_obligations
from core.services.finance.settings import DEFAULT_FUNDS_EPOCH


class CumulativeFundsCalculator:
    """
    Money on hand since the beginning of the books, independent of any
    reporting window.

    Transactions count over all time. Obligations count from ``epoch``: up
    to ``as_of`` for the actual figure and through December 31 of the
    current year for the projected one.
    """

    def __init__(self, aggregator: LedgerAggregator, *, epoch: date = DEFAULT_FUNDS_EPOCH) -> None:
        self._aggregator = aggregator
        self._epoch = epoch

    def compute(self, obligations: list[RecurringObligation], as_of: date | datetime) -> CumulativeFunds:
        today = as_date(as_of)
        income = self._aggregator.revenue(None)
        transaction_expenses = self._aggregator.completed_expenses(
            TransactionKind.PROJECT_EXPENSE, None
        ) + self._aggregator.completed_expenses(TransactionKind.GENERAL_EXPENSE, None)

        actual_window = DateWindow(self._epoch, today)
        projected_window = DateWindow(self._epoch, date(today.year, 12, 31))
        obligations_actual = total_for_obligations(obligations, actual_window, EvaluationMode.ACTUAL, today)
        obligations_projected = total_for_obligations(
            obligations, projected_window, EvaluationMode.PROJECTED, today
        )

        expenses_actual = to_decimal(transaction_expenses) + obligations_actual
        expenses_projected = to_decimal(transaction_expenses) + obligations_projected
        return CumulativeFunds(
            as_of=today,
            all_time_income=income,
            all_time_expenses_actual=expenses_actual,
            all_time_expenses_projected=expenses_projected,
            current_funds_actual=income - expenses_actual,
            current_funds_projected=income - expenses_projected,
        )


__all__ = ["CumulativeFundsCalculator"]
