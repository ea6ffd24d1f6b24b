from core.services import FinanceService, ObligationService
from core.services.finance import FinanceSettings
from infra.db.repositories import (
    SqlAlchemyLedgerRepository,
    SqlAlchemyObligationRepository,
    SqlAlchemyProjectRepository,
)
from infra.services import ServiceGraph, build_service_graph


def test_service_graph_builder_wires_all_services(session):
    graph = build_service_graph(session)

    assert isinstance(graph, ServiceGraph)
    assert isinstance(graph.obligation_service, ObligationService)
    assert isinstance(graph.finance_service, FinanceService)
    assert isinstance(graph.obligation_repo, SqlAlchemyObligationRepository)
    assert isinstance(graph.ledger_repo, SqlAlchemyLedgerRepository)
    assert isinstance(graph.project_repo, SqlAlchemyProjectRepository)
    assert graph.session is session


def test_service_graph_dict_exposes_fixture_keys(session):
    services = build_service_graph(session).as_dict()
    assert set(services) == {
        "session",
        "obligation_service",
        "finance_service",
        "obligation_repo",
        "ledger_repo",
        "project_repo",
    }


def test_finance_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("BIZLEDGER_FUNDS_EPOCH", "2015-07-01")
    monkeypatch.setenv("BIZLEDGER_ACTIVE_PROJECT_PREFIX", "JOB")
    settings = FinanceSettings.from_env()

    assert settings.funds_epoch.isoformat() == "2015-07-01"
    assert settings.active_project_prefix == "JOB"
    assert settings.uncategorized_label == "Uncategorized"


def test_finance_settings_default_when_environment_is_blank(monkeypatch):
    monkeypatch.setenv("BIZLEDGER_FUNDS_EPOCH", " ")
    monkeypatch.delenv("BIZLEDGER_ACTIVE_PROJECT_PREFIX", raising=False)

    assert FinanceSettings.from_env() == FinanceSettings()


def test_active_project_prefix_drives_project_count(session):
    from datetime import date, datetime

    from core.domain import Project

    graph = build_service_graph(session, settings=FinanceSettings(active_project_prefix="JOB"))
    graph.project_repo.add(Project.create("JOB-7", "Roof", created_at=datetime(2024, 5, 2)))
    graph.project_repo.add(Project.create("PROJ-7", "Fence", created_at=datetime(2024, 5, 3)))
    session.commit()

    metrics = graph.finance_service.get_dashboard_metrics(2024, 5, as_of=date(2024, 5, 31))
    assert metrics.project_count == 1
    # projects without a receivable add nothing
    assert metrics.summary.revenue == 0
