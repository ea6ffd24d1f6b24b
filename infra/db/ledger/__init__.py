from infra.db.ledger.mapper import (
    project_from_orm,
    project_to_orm,
    transaction_from_orm,
    transaction_to_orm,
)
from infra.db.ledger.repository import (
    SqlAlchemyLedgerExtentProvider,
    SqlAlchemyLedgerRepository,
    SqlAlchemyProjectRepository,
)

__all__ = [
    "transaction_to_orm",
    "transaction_from_orm",
    "project_to_orm",
    "project_from_orm",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyLedgerExtentProvider",
]
