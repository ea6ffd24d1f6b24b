from core.domain.enums import Frequency, TransactionKind, TransactionStatus
from core.domain.identifiers import generate_id
from core.domain.obligation import (
    OBLIGATION_TYPES,
    MonthlyObligation,
    OneTimeObligation,
    QuarterlyObligation,
    RecurringObligation,
    TwiceMonthlyObligation,
    WeeklyObligation,
    YearlyObligation,
    build_obligation,
    format_days_of_month,
    parse_days_of_month,
)
from core.domain.period import DateWindow
from core.domain.project import Project
from core.domain.transaction import LedgerTransaction

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
    "OBLIGATION_TYPES",
    "build_obligation",
    "parse_days_of_month",
    "format_days_of_month",
    "DateWindow",
    "Project",
    "LedgerTransaction",
]
