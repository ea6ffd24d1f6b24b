from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from core.domain import DateWindow, LedgerTransaction, RecurringObligation
from core.services.finance.helpers import ZERO, to_decimal
from core.services.finance.models import EvaluationMode
from core.services.finance.occurrences import occurrence_total
from core.services.finance.settings import UNCATEGORIZED


def category_label(value: str | None, fallback: str = UNCATEGORIZED) -> str:
    label = (value or "").strip()
    return label or fallback


def build_expenses_by_category(
    *,
    obligations: list[RecurringObligation],
    general_transactions: list[LedgerTransaction],
    window: DateWindow,
    as_of: date | datetime,
    uncategorized_label: str = UNCATEGORIZED,
) -> dict[str, Decimal]:
    """
    Actual obligation spend plus general expenses, keyed by category.

    Obligations that did not fall due still register their category with a
    zero amount.
    """
    buckets: dict[str, Decimal] = {}
    for obligation in obligations:
        key = category_label(obligation.category, uncategorized_label)
        amount = occurrence_total(obligation, window, EvaluationMode.ACTUAL, as_of)
        buckets[key] = buckets.get(key, ZERO) + amount

    for transaction in general_transactions:
        key = category_label(transaction.category, uncategorized_label)
        buckets[key] = buckets.get(key, ZERO) + to_decimal(transaction.amount)

    ordered = sorted(buckets.items(), key=lambda item: (-item[1], item[0].lower()))
    return dict(ordered)


__all__ = ["category_label", "build_expenses_by_category"]
