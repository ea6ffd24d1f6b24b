from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.domain import DateWindow
from core.interfaces import LedgerExtentProvider, LedgerRepository, ProjectRepository
from core.models import LedgerTransaction, Project, TransactionKind, TransactionStatus
from infra.db.ledger.mapper import (
    project_from_orm,
    project_to_orm,
    transaction_from_orm,
    transaction_to_orm,
)
from infra.db.models import CompanyExpenseORM, LedgerTransactionORM, ProjectORM


def _as_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _created_between(window: DateWindow):
    # created_at is a timestamp; the window's last day is included in full.
    start = datetime.combine(window.start, time.min)
    end = datetime.combine(window.end, time.max)
    return ProjectORM.created_at >= start, ProjectORM.created_at <= end


class SqlAlchemyLedgerRepository(LedgerRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, transaction: LedgerTransaction) -> None:
        self.session.add(transaction_to_orm(transaction))

    def _filtered(self, stmt, kind, status, window):
        stmt = stmt.where(LedgerTransactionORM.kind == kind)
        if status is not None:
            stmt = stmt.where(LedgerTransactionORM.status == status)
        if window is not None:
            stmt = stmt.where(
                LedgerTransactionORM.occurred_on >= window.start,
                LedgerTransactionORM.occurred_on <= window.end,
            )
        return stmt

    def sum_transactions(
        self,
        kind: TransactionKind,
        status: TransactionStatus | None = None,
        window: DateWindow | None = None,
    ) -> Decimal:
        stmt = self._filtered(select(func.sum(LedgerTransactionORM.amount)), kind, status, window)
        return _as_decimal(self.session.execute(stmt).scalar())

    def list_transactions(
        self,
        kind: TransactionKind,
        status: TransactionStatus | None = None,
        window: DateWindow | None = None,
    ) -> List[LedgerTransaction]:
        stmt = self._filtered(select(LedgerTransactionORM), kind, status, window)
        stmt = stmt.order_by(LedgerTransactionORM.occurred_on)
        rows = self.session.execute(stmt).scalars().all()
        return [transaction_from_orm(row) for row in rows]


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_projects(self, window: DateWindow | None = None) -> List[Project]:
        stmt = select(ProjectORM)
        if window is not None:
            stmt = stmt.where(*_created_between(window))
        stmt = stmt.order_by(ProjectORM.created_at)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]

    def sum_receivables(self, window: DateWindow | None = None) -> Decimal:
        stmt = select(func.sum(ProjectORM.receivable))
        if window is not None:
            stmt = stmt.where(*_created_between(window))
        return _as_decimal(self.session.execute(stmt).scalar())


class SqlAlchemyLedgerExtentProvider(LedgerExtentProvider):
    def __init__(self, session: Session):
        self.session = session

    def earliest_fact_date(self) -> Optional[date]:
        first_tx = _as_date(self.session.execute(select(func.min(LedgerTransactionORM.occurred_on))).scalar())
        first_project = _as_date(self.session.execute(select(func.min(ProjectORM.created_at))).scalar())
        candidates = [value for value in (first_tx, first_project) if value is not None]
        return min(candidates) if candidates else None

    def latest_transaction_date(self) -> Optional[date]:
        return _as_date(self.session.execute(select(func.max(LedgerTransactionORM.occurred_on))).scalar())

    def latest_obligation_start(self) -> Optional[date]:
        stmt = select(func.max(CompanyExpenseORM.start_of_payment)).where(
            CompanyExpenseORM.is_active.is_(True)
        )
        return _as_date(self.session.execute(stmt).scalar())


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyLedgerExtentProvider",
]
