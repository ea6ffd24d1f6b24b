from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import ObligationRepository
from core.models import Frequency, RecurringObligation
from infra.db.models import CompanyExpenseORM
from infra.db.obligation.mapper import obligation_from_orm, obligation_to_orm


class SqlAlchemyObligationRepository(ObligationRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, obligation: RecurringObligation) -> None:
        self.session.add(obligation_to_orm(obligation))

    def update(self, obligation: RecurringObligation) -> None:
        self.session.merge(obligation_to_orm(obligation))

    def get(self, obligation_id: str) -> Optional[RecurringObligation]:
        obj = self.session.get(CompanyExpenseORM, obligation_id)
        return obligation_from_orm(obj) if obj else None

    def list_obligations(
        self,
        active_only: bool = True,
        *,
        frequency: Frequency | None = None,
        category: str | None = None,
    ) -> List[RecurringObligation]:
        stmt = select(CompanyExpenseORM)
        if active_only:
            stmt = stmt.where(CompanyExpenseORM.is_active.is_(True))
        if frequency is not None:
            stmt = stmt.where(CompanyExpenseORM.frequency == frequency)
        if category is not None:
            stmt = stmt.where(CompanyExpenseORM.category == category)
        stmt = stmt.order_by(CompanyExpenseORM.created_at.desc())
        rows = self.session.execute(stmt).scalars().all()
        return [obligation_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyObligationRepository"]
