# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import Frequency, TransactionKind, TransactionStatus

Money = Numeric(14, 2, asdecimal=True)


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    receivable: Mapped[Optional[Decimal]] = mapped_column(Money, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    company_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)

Index("idx_projects_created_at", ProjectORM.created_at)


class LedgerTransactionORM(Base):
    __tablename__ = "ledger_transactions"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    kind: Mapped[TransactionKind] = mapped_column(SAEnum(TransactionKind), nullable=False)
    status: Mapped[TransactionStatus] = mapped_column(
        SAEnum(TransactionStatus), default=TransactionStatus.COMPLETED, nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    occurred_on: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(String, default="")
    category: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    project_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
    )

Index("idx_ledger_kind_date", LedgerTransactionORM.kind, LedgerTransactionORM.occurred_on)


class CompanyExpenseORM(Base):
    __tablename__ = "company_expenses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    frequency: Mapped[Frequency] = mapped_column(SAEnum(Frequency), nullable=False)
    day_of_week: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    days_of_month: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    month_of_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    specific_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    start_of_payment: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_of_payment: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)

Index("idx_company_expenses_active", CompanyExpenseORM.is_active)
