from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date, datetime
from typing import Any

from core.exceptions import AggregationUnavailableError, ValidationError
from core.services.finance import DashboardMetrics, FinanceService
from infra.operational_support import (
    OperationalSupport,
    bind_trace_id,
    get_operational_support,
    to_jsonable,
)

logger = logging.getLogger(__name__)


def parse_selector(raw: Any, *, field: str) -> int | None:
    """Turn a raw ``year``/``month`` query value into an int, ``None`` when absent."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid {field} selector.", code="PERIOD_SELECTOR_INVALID")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"Invalid {field} selector: {raw!r}", code="PERIOD_SELECTOR_INVALID") from None


def metrics_to_payload(metrics: DashboardMetrics) -> dict[str, Any]:
    period = metrics.period
    breakdown = None
    if metrics.breakdown is not None:
        breakdown = [
            {
                "label": row.bucket.label,
                "number": row.bucket.number,
                "start": row.bucket.window.start,
                "end": row.bucket.window.end,
                **asdict(row.summary),
            }
            for row in metrics.breakdown
        ]
    payload = {
        "period": {
            "year": period.year,
            "month": period.month,
            "scope": period.scope,
            "start": period.window.start,
            "end": period.window.end,
        },
        "summary": asdict(metrics.summary),
        "expenses_by_category": metrics.expenses_by_category,
        "breakdown": breakdown,
        "project_count": metrics.project_count,
        "active_obligation_count": metrics.active_obligation_count,
        "funds": asdict(metrics.funds),
    }
    return to_jsonable(payload)


def fetch_dashboard_metrics(
    finance_service: FinanceService,
    year: Any = None,
    month: Any = None,
    *,
    as_of: date | datetime | None = None,
    trace_id: str | None = None,
    support: OperationalSupport | None = None,
) -> dict[str, Any]:
    """Dashboard entry point for the reporting layer; returns a JSON-ready payload."""
    with bind_trace_id(trace_id) as resolved_trace:
        parsed_year = parse_selector(year, field="year")
        parsed_month = parse_selector(month, field="month")
        try:
            metrics = finance_service.get_dashboard_metrics(parsed_year, parsed_month, as_of=as_of)
        except AggregationUnavailableError as exc:
            (support or get_operational_support()).emit_event(
                event_type="finance.aggregation.unavailable",
                level="ERROR",
                trace_id=resolved_trace,
                message=str(exc),
                data={
                    "year": parsed_year,
                    "month": parsed_month,
                    "code": exc.code,
                    "operation": exc.operation,
                },
            )
            raise
        logger.info("Served dashboard metrics for year=%s month=%s", parsed_year, parsed_month)
        return metrics_to_payload(metrics)


__all__ = ["parse_selector", "metrics_to_payload", "fetch_dashboard_metrics"]
