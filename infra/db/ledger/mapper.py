from __future__ import annotations

from decimal import Decimal

from core.models import LedgerTransaction, Project, TransactionKind, TransactionStatus
from infra.db.models import LedgerTransactionORM, ProjectORM


def transaction_to_orm(transaction: LedgerTransaction) -> LedgerTransactionORM:
    return LedgerTransactionORM(
        id=transaction.id,
        kind=transaction.kind,
        status=transaction.status,
        amount=transaction.amount,
        occurred_on=transaction.occurred_on,
        description=transaction.description,
        category=transaction.category,
        project_id=transaction.project_id,
    )


def transaction_from_orm(obj: LedgerTransactionORM) -> LedgerTransaction:
    return LedgerTransaction(
        id=obj.id,
        kind=TransactionKind(obj.kind),
        status=TransactionStatus(obj.status) if obj.status else TransactionStatus.COMPLETED,
        amount=Decimal(obj.amount or 0),
        occurred_on=obj.occurred_on,
        description=obj.description or "",
        category=obj.category,
        project_id=obj.project_id,
    )


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        code=project.code,
        name=project.name,
        receivable=project.receivable,
        created_at=project.created_at,
        company_name=project.company_name,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        code=obj.code,
        name=obj.name,
        receivable=(None if obj.receivable is None else Decimal(obj.receivable)),
        created_at=obj.created_at,
        company_name=obj.company_name,
    )


__all__ = ["transaction_to_orm", "transaction_from_orm", "project_to_orm", "project_from_orm"]
