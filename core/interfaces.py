# core/interfaces.py
"""
Read and write contracts the services depend on.

Implementations report an unreadable backing store by raising
``core.exceptions.DataSourceError``; `SQLAlchemyError` and `OSError` are
accepted as well. Finance reads turn any of these into
``AggregationUnavailableError``. Other exceptions are treated as bugs and
propagate unchanged.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List, Optional

from core.domain import (
    DateWindow,
    Frequency,
    LedgerTransaction,
    Project,
    RecurringObligation,
    TransactionKind,
    TransactionStatus,
)


class ObligationRepository(ABC):
    @abstractmethod
    def add(self, obligation: RecurringObligation) -> None: ...
    @abstractmethod
    def update(self, obligation: RecurringObligation) -> None: ...
    @abstractmethod
    def get(self, obligation_id: str) -> Optional[RecurringObligation]: ...
    @abstractmethod
    def list_obligations(
        self,
        active_only: bool = True,
        *,
        frequency: Frequency | None = None,
        category: str | None = None,
    ) -> List[RecurringObligation]: ...


class LedgerRepository(ABC):
    @abstractmethod
    def add(self, transaction: LedgerTransaction) -> None: ...
    @abstractmethod
    def sum_transactions(
        self,
        kind: TransactionKind,
        status: TransactionStatus | None = None,
        window: DateWindow | None = None,
    ) -> Decimal: ...
    @abstractmethod
    def list_transactions(
        self,
        kind: TransactionKind,
        status: TransactionStatus | None = None,
        window: DateWindow | None = None,
    ) -> List[LedgerTransaction]: ...


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...
    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...
    @abstractmethod
    def list_projects(self, window: DateWindow | None = None) -> List[Project]: ...
    @abstractmethod
    def sum_receivables(self, window: DateWindow | None = None) -> Decimal: ...


class LedgerExtentProvider(ABC):
    """Bounds of the recorded data, used to resolve an all-time window."""

    @abstractmethod
    def earliest_fact_date(self) -> Optional[date]: ...
    @abstractmethod
    def latest_transaction_date(self) -> Optional[date]: ...
    @abstractmethod
    def latest_obligation_start(self) -> Optional[date]: ...


__all__ = [
    "ObligationRepository",
    "LedgerRepository",
    "ProjectRepository",
    "LedgerExtentProvider",
]
