from __future__ import annotations

import json
import logging
from datetime import date
from decimal import Decimal

from core.domain import Frequency
from infra import logging_config
from infra.operational_support import (
    OperationalSupport,
    TraceIdLogFilter,
    bind_trace_id,
    current_trace_id,
    to_jsonable,
)


def test_operational_support_emits_structured_event(tmp_path):
    events_path = tmp_path / "support-events.jsonl"
    support = OperationalSupport(events_path=events_path)

    with bind_trace_id("inc-test-123"):
        trace_id = support.emit_event(
            event_type="finance.test",
            message="dashboard served",
            data={"revenue": Decimal("17000.00"), "as_of": date(2024, 6, 30), "frequency": Frequency.MONTHLY},
        )

    assert trace_id == "inc-test-123"
    rows = events_path.read_text(encoding="utf-8").splitlines()
    assert len(rows) == 1
    payload = json.loads(rows[0])
    assert payload["trace_id"] == "inc-test-123"
    assert payload["event_type"] == "finance.test"
    assert payload["data"] == {"revenue": "17000.00", "as_of": "2024-06-30", "frequency": "monthly"}


def test_operational_support_capture_exception_records_crash_event(tmp_path):
    events_path = tmp_path / "support-events.jsonl"
    support = OperationalSupport(events_path=events_path)

    try:
        raise RuntimeError("ledger offline")
    except RuntimeError as exc:
        support.capture_exception(
            exc_type=RuntimeError,
            exc_value=exc,
            exc_traceback=exc.__traceback__,
            context="unit-test",
            trace_id="inc-crash-1",
        )

    events = support.read_events(trace_id="inc-crash-1")
    assert len(events) == 1
    assert events[0]["event_type"] == "app.crash"
    assert events[0]["level"] == "ERROR"
    assert events[0]["data"]["exception_type"] == "RuntimeError"
    assert "ledger offline" in events[0]["message"]


def test_trace_id_binding_is_scoped():
    assert current_trace_id() is None
    with bind_trace_id(None) as generated:
        assert generated.startswith("inc-")
        assert current_trace_id() == generated
    assert current_trace_id() is None


def test_trace_filter_stamps_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    with bind_trace_id("inc-log-1"):
        assert TraceIdLogFilter().filter(record)
    assert record.trace_id == "inc-log-1"


def test_to_jsonable_handles_nested_values():
    value = {"rows": (Decimal("1.50"), None, [date(2024, 1, 1)]), 3: True}
    assert to_jsonable(value) == {"rows": ["1.50", None, ["2024-01-01"]], "3": True}


def test_setup_logging_writes_to_rotating_file(tmp_path, monkeypatch):
    support = OperationalSupport(tmp_path / "events.jsonl")
    monkeypatch.setattr(logging_config, "get_operational_support", lambda: support)
    monkeypatch.setattr(logging_config, "install_global_exception_hooks", lambda: None)

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = logging_config.setup_logging("DEBUG", log_dir=tmp_path / "logs")
        with bind_trace_id("inc-file-1"):
            logging.getLogger("core.services.finance").info("aggregated")
        for handler in root.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert log_file.name == "app.log"
    assert "trace=inc-file-1 core.services.finance - aggregated" in text
    assert [e["event_type"] for e in support.read_events()] == ["app.logging.initialized"]
