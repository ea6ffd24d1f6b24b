from __future__ import annotations

from enum import Enum


class Frequency(str, Enum):
    ONE_TIME = "one_time"
    WEEKLY = "weekly"
    TWICE_MONTHLY = "twice_monthly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class TransactionKind(str, Enum):
    PROJECT_EXPENSE = "project"
    GENERAL_EXPENSE = "general"
    INCOME = "income"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


__all__ = ["Frequency", "TransactionKind", "TransactionStatus"]
