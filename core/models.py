"""Compatibility wrapper re-exporting the domain records."""

from core.domain import (
    Frequency,
    LedgerTransaction,
    MonthlyObligation,
    OneTimeObligation,
    Project,
    QuarterlyObligation,
    RecurringObligation,
    TransactionKind,
    TransactionStatus,
    TwiceMonthlyObligation,
    WeeklyObligation,
    YearlyObligation,
    build_obligation,
    generate_id,
)

__all__ = [
    "generate_id",
    "Frequency",
    "TransactionKind",
    "TransactionStatus",
    "RecurringObligation",
    "OneTimeObligation",
    "WeeklyObligation",
    "TwiceMonthlyObligation",
    "MonthlyObligation",
    "QuarterlyObligation",
    "YearlyObligation",
    "build_obligation",
    "Project",
    "LedgerTransaction",
]
