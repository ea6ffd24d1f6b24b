from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.finance import FinanceService, FinanceSettings
from core.services.obligation import ObligationService
from infra.db.repositories import (
    SqlAlchemyLedgerExtentProvider,
    SqlAlchemyLedgerRepository,
    SqlAlchemyObligationRepository,
    SqlAlchemyProjectRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    obligation_service: ObligationService
    finance_service: FinanceService
    obligation_repo: SqlAlchemyObligationRepository
    ledger_repo: SqlAlchemyLedgerRepository
    project_repo: SqlAlchemyProjectRepository

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "obligation_service": self.obligation_service,
            "finance_service": self.finance_service,
            "obligation_repo": self.obligation_repo,
            "ledger_repo": self.ledger_repo,
            "project_repo": self.project_repo,
        }


def build_service_graph(session: Session, settings: FinanceSettings | None = None) -> ServiceGraph:
    obligation_repo = SqlAlchemyObligationRepository(session)
    ledger_repo = SqlAlchemyLedgerRepository(session)
    project_repo = SqlAlchemyProjectRepository(session)
    extent_provider = SqlAlchemyLedgerExtentProvider(session)

    obligation_service = ObligationService(session, obligation_repo)
    finance_service = FinanceService(
        obligation_repo=obligation_repo,
        ledger_repo=ledger_repo,
        project_repo=project_repo,
        extent_provider=extent_provider,
        settings=settings or FinanceSettings.from_env(),
    )
    return ServiceGraph(
        session=session,
        obligation_service=obligation_service,
        finance_service=finance_service,
        obligation_repo=obligation_repo,
        ledger_repo=ledger_repo,
        project_repo=project_repo,
    )


__all__ = ["ServiceGraph", "build_service_graph"]
