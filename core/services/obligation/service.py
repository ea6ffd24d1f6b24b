from __future__ import annotations

import dataclasses
import logging
from datetime import date
from decimal import Decimal
from typing import Any, List

from sqlalchemy.orm import Session

from core.domain import Frequency, RecurringObligation, build_obligation, generate_id, parse_days_of_month
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ObligationRepository
from core.services.obligation.validation import ObligationValidationMixin

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _normalize_days(value: Any) -> tuple[int, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return parse_days_of_month(value)
    try:
        return tuple(int(day) for day in value)
    except (TypeError, ValueError):
        raise ValidationError(
            "Days of month must be whole numbers.", code="OBLIGATION_DAYS_OF_MONTH_INVALID"
        ) from None


def _current_values(obligation: RecurringObligation) -> dict[str, Any]:
    return {field.name: getattr(obligation, field.name) for field in dataclasses.fields(obligation)}


class ObligationService(ObligationValidationMixin):
    """Management of recurring company expenses (create, edit, deactivate, list)."""

    def __init__(self, session: Session, obligation_repo: ObligationRepository):
        self._session: Session = session
        self._obligation_repo: ObligationRepository = obligation_repo

    def create_obligation(
        self,
        name: str,
        amount: Decimal | float | str,
        frequency: Frequency | str,
        *,
        day_of_week: int | None = None,
        days_of_month: str | list[int] | tuple[int, ...] | None = None,
        month_of_year: int | None = None,
        specific_date: date | None = None,
        start_of_payment: date | None = None,
        end_of_payment: date | None = None,
        category: str | None = None,
        notes: str | None = None,
    ) -> RecurringObligation:
        freq = self._coerce_frequency(frequency)
        values: dict[str, Any] = {
            "id": generate_id(),
            "name": self._validate_name(name),
            "amount": self._coerce_amount(amount),
            "category": (category or "").strip() or None,
            "notes": (notes or "").strip() or None,
            "start_of_payment": start_of_payment,
            "end_of_payment": end_of_payment,
            "is_active": True,
            "day_of_week": day_of_week,
            "days_of_month": _normalize_days(days_of_month),
            "month_anchor": month_of_year,
            "specific_date": specific_date,
        }
        self._validate_schedule(freq, values)
        self._validate_payment_terms(start_of_payment, end_of_payment)
        obligation = build_obligation(freq, **values)

        try:
            self._obligation_repo.add(obligation)
            self._session.commit()
            logger.info("Created obligation %s - %s (%s)", obligation.id, obligation.name, freq.value)
            return obligation
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating obligation: %s", e)
            raise

    def update_obligation(
        self,
        obligation_id: str,
        *,
        name: str | None = None,
        amount: Decimal | float | str | None = None,
        frequency: Frequency | str | None = None,
        day_of_week: int | None = _UNSET,
        days_of_month: str | list[int] | tuple[int, ...] | None = _UNSET,
        month_of_year: int | None = _UNSET,
        specific_date: date | None = _UNSET,
        start_of_payment: date | None = _UNSET,
        end_of_payment: date | None = _UNSET,
        category: str | None = _UNSET,
        notes: str | None = _UNSET,
    ) -> RecurringObligation:
        current = self._obligation_repo.get(obligation_id)
        if current is None:
            raise NotFoundError("Expense not found.", code="OBLIGATION_NOT_FOUND")

        values = _current_values(current)
        freq = self._coerce_frequency(frequency) if frequency is not None else current.frequency
        if name is not None:
            values["name"] = self._validate_name(name)
        if amount is not None:
            values["amount"] = self._coerce_amount(amount)
        for key, value in (
            ("day_of_week", day_of_week),
            ("month_anchor", month_of_year),
            ("specific_date", specific_date),
            ("start_of_payment", start_of_payment),
            ("end_of_payment", end_of_payment),
        ):
            if value is not _UNSET:
                values[key] = value
        if days_of_month is not _UNSET:
            values["days_of_month"] = _normalize_days(days_of_month)
        if category is not _UNSET:
            values["category"] = (category or "").strip() or None
        if notes is not _UNSET:
            values["notes"] = (notes or "").strip() or None

        self._validate_schedule(freq, values)
        self._validate_payment_terms(values.get("start_of_payment"), values.get("end_of_payment"))
        updated = build_obligation(freq, **values)

        try:
            self._obligation_repo.update(updated)
            self._session.commit()
            logger.info("Updated obligation %s", obligation_id)
            return updated
        except Exception:
            self._session.rollback()
            raise

    def deactivate_obligation(self, obligation_id: str) -> RecurringObligation:
        current = self._obligation_repo.get(obligation_id)
        if current is None:
            raise NotFoundError("Expense not found.", code="OBLIGATION_NOT_FOUND")
        updated = dataclasses.replace(current, is_active=False)
        try:
            self._obligation_repo.update(updated)
            self._session.commit()
            logger.info("Deactivated obligation %s", obligation_id)
            return updated
        except Exception:
            self._session.rollback()
            raise

    def get_obligation(self, obligation_id: str) -> RecurringObligation:
        obligation = self._obligation_repo.get(obligation_id)
        if obligation is None:
            raise NotFoundError("Expense not found.", code="OBLIGATION_NOT_FOUND")
        return obligation

    def list_obligations(
        self,
        *,
        active: bool | None = None,
        frequency: Frequency | str | None = None,
        category: str | None = None,
    ) -> List[RecurringObligation]:
        freq = self._coerce_frequency(frequency) if frequency is not None else None
        rows = self._obligation_repo.list_obligations(
            active_only=bool(active),
            frequency=freq,
            category=category,
        )
        if active is False:
            rows = [row for row in rows if not row.is_active]
        return rows


__all__ = ["ObligationService"]
