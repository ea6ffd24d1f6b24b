from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from core.domain.enums import TransactionKind, TransactionStatus
from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class LedgerTransaction:
    id: str
    kind: TransactionKind
    amount: Decimal
    occurred_on: date
    status: TransactionStatus = TransactionStatus.COMPLETED
    description: str = ""
    category: Optional[str] = None
    project_id: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == TransactionStatus.COMPLETED

    @staticmethod
    def create(
        kind: TransactionKind,
        amount: Decimal,
        occurred_on: date,
        status: TransactionStatus = TransactionStatus.COMPLETED,
        description: str = "",
        category: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> "LedgerTransaction":
        return LedgerTransaction(
            id=generate_id(),
            kind=kind,
            amount=Decimal(amount),
            occurred_on=occurred_on,
            status=status,
            description=description,
            category=category,
            project_id=project_id,
        )


__all__ = ["LedgerTransaction"]
