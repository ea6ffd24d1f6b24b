# tests/conftest.py
import os

os.environ.setdefault("BIZLEDGER_DB_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.services.finance import FinanceSettings
from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.services import build_service_graph


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    graph = build_service_graph(session, settings=FinanceSettings())
    return graph.as_dict()


@pytest.fixture
def ledger_books(services):
    """
    A small set of books for 2024 (and one project created at the end of 2023).

    Projects: PROJ-001 10000 (Feb 2024), ENC-2019 5000 encoded (Mar 2024),
    PROJ-002 2000 (Dec 31 2023). Income 1500 completed and 500 pending.
    Project expenses 1200 completed and 800 pending. General expenses 300
    "Utilities", 200 uncategorized (July), 999 pending. Obligations: rent
    1000 monthly on the 1st from 2023, insurance 2400 every Sep 15 from
    2024, and an inactive 50 subscription.
    """
    from datetime import date, datetime
    from decimal import Decimal

    from core.domain import LedgerTransaction, Project, TransactionKind, TransactionStatus

    session = services["session"]
    projects = services["project_repo"]
    ledger = services["ledger_repo"]
    obligations = services["obligation_service"]

    projects.add(Project.create("PROJ-001", "Warehouse fit-out", receivable=Decimal("10000"),
                                created_at=datetime(2024, 2, 10, 9, 0)))
    projects.add(Project.create("ENC-2019", "Imported contract", receivable=Decimal("5000"),
                                created_at=datetime(2024, 3, 5, 14, 0)))
    projects.add(Project.create("PROJ-002", "Year-end audit", receivable=Decimal("2000"),
                                created_at=datetime(2023, 12, 31, 23, 0)))

    def tx(kind, amount, on, status=TransactionStatus.COMPLETED, category=None):
        ledger.add(LedgerTransaction.create(kind, Decimal(amount), on, status=status, category=category))

    tx(TransactionKind.INCOME, "1500", date(2024, 4, 1))
    tx(TransactionKind.INCOME, "500", date(2024, 5, 1), TransactionStatus.PENDING)
    tx(TransactionKind.PROJECT_EXPENSE, "1200", date(2024, 2, 20))
    tx(TransactionKind.PROJECT_EXPENSE, "800", date(2024, 3, 1), TransactionStatus.PENDING)
    tx(TransactionKind.GENERAL_EXPENSE, "300", date(2024, 1, 15), category="Utilities")
    tx(TransactionKind.GENERAL_EXPENSE, "200", date(2024, 7, 10))
    tx(TransactionKind.GENERAL_EXPENSE, "999", date(2024, 2, 1), TransactionStatus.PENDING, "Utilities")
    session.commit()

    obligations.create_obligation(
        "Office rent", "1000", "monthly", days_of_month="1",
        start_of_payment=date(2023, 1, 1), category="Rent",
    )
    obligations.create_obligation(
        "Liability insurance", "2400", "yearly", days_of_month=[15], month_of_year=9,
        start_of_payment=date(2024, 1, 1), category="Insurance",
    )
    old = obligations.create_obligation("Old subscription", "50", "monthly", days_of_month="1")
    obligations.deactivate_obligation(old.id)
    return services
