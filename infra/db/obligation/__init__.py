from infra.db.obligation.mapper import obligation_from_orm, obligation_to_orm
from infra.db.obligation.repository import SqlAlchemyObligationRepository

__all__ = ["obligation_to_orm", "obligation_from_orm", "SqlAlchemyObligationRepository"]
