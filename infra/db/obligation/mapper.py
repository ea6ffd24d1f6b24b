from __future__ import annotations

from core.models import Frequency, RecurringObligation, build_obligation
from core.domain.obligation import format_days_of_month
from infra.db.models import CompanyExpenseORM


def obligation_to_orm(obligation: RecurringObligation) -> CompanyExpenseORM:
    return CompanyExpenseORM(
        id=obligation.id,
        name=obligation.name,
        amount=obligation.amount,
        frequency=obligation.frequency,
        day_of_week=getattr(obligation, "day_of_week", None),
        days_of_month=format_days_of_month(getattr(obligation, "days_of_month", None)),
        month_of_year=getattr(obligation, "month_anchor", None),
        specific_date=getattr(obligation, "specific_date", None),
        start_of_payment=obligation.start_of_payment,
        end_of_payment=obligation.end_of_payment,
        category=obligation.category,
        notes=obligation.notes,
        is_active=obligation.is_active,
    )


def obligation_from_orm(obj: CompanyExpenseORM) -> RecurringObligation:
    frequency = obj.frequency if isinstance(obj.frequency, Frequency) else Frequency(obj.frequency)
    return build_obligation(
        frequency,
        id=obj.id,
        name=obj.name,
        amount=obj.amount,
        category=obj.category,
        notes=obj.notes,
        start_of_payment=obj.start_of_payment,
        end_of_payment=obj.end_of_payment,
        is_active=bool(obj.is_active),
        day_of_week=obj.day_of_week,
        days_of_month=obj.days_of_month,
        month_anchor=obj.month_of_year,
        specific_date=obj.specific_date,
    )


__all__ = ["obligation_to_orm", "obligation_from_orm"]
