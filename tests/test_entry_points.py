from __future__ import annotations

import json

from sqlalchemy import create_engine, inspect

import main
from infra.migrate import run_migrations
from infra.services import build_service_graph


def test_migrations_create_ledger_schema(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'ledger.db').as_posix()}"
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert {"projects", "ledger_transactions", "company_expenses", "alembic_version"} <= tables


def test_cli_prints_dashboard_payload(session, monkeypatch, capsys):
    monkeypatch.setattr(main, "setup_logging", lambda: None)
    monkeypatch.setattr(main, "build_services", lambda: build_service_graph(session))

    assert main.main(["--year", "2024", "--month", "3"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["period"]["scope"] == "month"
    assert payload["period"]["start"] == "2024-03-01"
    assert payload["breakdown"] is None


def test_cli_reports_domain_errors(session, monkeypatch, capsys):
    monkeypatch.setattr(main, "setup_logging", lambda: None)
    monkeypatch.setattr(main, "build_services", lambda: build_service_graph(session))

    assert main.main(["--month", "3"]) == 2
    assert "PERIOD_MONTH_WITHOUT_YEAR" in capsys.readouterr().err
