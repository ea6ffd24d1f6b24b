from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from core.domain import Frequency
from core.exceptions import ValidationError

_DAY_OF_MONTH_FREQUENCIES = {
    Frequency.TWICE_MONTHLY,
    Frequency.MONTHLY,
    Frequency.QUARTERLY,
    Frequency.YEARLY,
}
_ANCHORED_FREQUENCIES = {Frequency.QUARTERLY, Frequency.YEARLY}


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ObligationValidationMixin:
    def _coerce_frequency(self, frequency: Frequency | str | None) -> Frequency:
        if isinstance(frequency, Frequency):
            return frequency
        try:
            return Frequency(str(frequency or "").strip().lower())
        except ValueError:
            raise ValidationError("Invalid frequency value.", code="OBLIGATION_FREQUENCY_INVALID") from None

    def _coerce_amount(self, amount: Any) -> Decimal:
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError):
            raise ValidationError("Amount must be a number.", code="OBLIGATION_AMOUNT_INVALID") from None
        if not value.is_finite() or value <= 0:
            raise ValidationError("Amount must be greater than zero.", code="OBLIGATION_AMOUNT_INVALID")
        return value

    def _validate_name(self, name: str | None) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Expense name cannot be empty.", code="OBLIGATION_NAME_EMPTY")
        return cleaned

    def _validate_schedule(self, frequency: Frequency, values: dict[str, Any]) -> None:
        if frequency == Frequency.WEEKLY:
            day = _as_int(values.get("day_of_week"))
            if day is None or not 0 <= day <= 6:
                raise ValidationError(
                    "Weekly frequency requires day_of_week (0-6).",
                    code="OBLIGATION_DAY_OF_WEEK_REQUIRED",
                )
            values["day_of_week"] = day

        days: tuple[int, ...] = values.get("days_of_month") or ()
        if frequency in _DAY_OF_MONTH_FREQUENCIES:
            if not days:
                raise ValidationError(
                    f"{frequency.value} frequency requires days_of_month.",
                    code="OBLIGATION_DAYS_OF_MONTH_REQUIRED",
                )
            if any(not 1 <= day <= 31 for day in days):
                raise ValidationError(
                    "Days of month must be between 1 and 31.",
                    code="OBLIGATION_DAYS_OF_MONTH_INVALID",
                )
        if frequency == Frequency.TWICE_MONTHLY and len(days) != 2:
            raise ValidationError(
                "Twice-monthly frequency requires exactly two days of month.",
                code="OBLIGATION_DAYS_OF_MONTH_INVALID",
            )

        if frequency in _ANCHORED_FREQUENCIES:
            anchor = _as_int(values.get("month_anchor"))
            if anchor is None or not 1 <= anchor <= 12:
                raise ValidationError(
                    f"{frequency.value} frequency requires month_of_year (1-12).",
                    code="OBLIGATION_MONTH_REQUIRED",
                )
            values["month_anchor"] = anchor

        if frequency == Frequency.ONE_TIME and not isinstance(values.get("specific_date"), date):
            raise ValidationError(
                "One-time frequency requires specific_date.",
                code="OBLIGATION_SPECIFIC_DATE_REQUIRED",
            )

    def _validate_payment_terms(self, start: date | None, end: date | None) -> None:
        if start is not None and end is not None and end < start:
            raise ValidationError(
                "End of payment cannot be before start of payment.",
                code="OBLIGATION_PAYMENT_TERMS_INVALID",
            )


__all__ = ["ObligationValidationMixin"]
