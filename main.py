# main.py
import argparse
import json
import logging
import sys

from core.exceptions import DomainError
from infra.db.base import SessionLocal, resolve_db_url
from infra.logging_config import setup_logging
from infra.metrics_api import fetch_dashboard_metrics
from infra.migrate import run_migrations
from infra.services import ServiceGraph, build_service_graph

logger = logging.getLogger(__name__)


def build_services() -> ServiceGraph:
    run_migrations(db_url=resolve_db_url())
    session = SessionLocal()
    return build_service_graph(session)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bizledger",
        description="Print company dashboard metrics (revenue, expenses, funds) as JSON.",
    )
    parser.add_argument("--year", help="calendar year; omit for all time")
    parser.add_argument("--month", help="month 1-12, requires --year")
    parser.add_argument("--trace-id", dest="trace_id", help="incident id to tag logs and support events")
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    setup_logging()

    graph = build_services()
    try:
        payload = fetch_dashboard_metrics(
            graph.finance_service,
            args.year,
            args.month,
            trace_id=args.trace_id,
        )
    except DomainError as exc:
        logger.error("Dashboard metrics failed: %s", exc)
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 2
    finally:
        graph.session.close()

    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
