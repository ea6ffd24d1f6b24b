# infra/db/repositories.py
from infra.db.ledger import (
    SqlAlchemyLedgerExtentProvider,
    SqlAlchemyLedgerRepository,
    SqlAlchemyProjectRepository,
)
from infra.db.obligation import SqlAlchemyObligationRepository

__all__ = [
    "SqlAlchemyObligationRepository",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyLedgerExtentProvider",
]
