# infra/logging_config.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.operational_support import (
    TraceIdLogFilter,
    get_operational_support,
    install_global_exception_hooks,
)
from infra.path import user_data_dir

FILE_FORMAT = "%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s [trace=%(trace_id)s]: %(message)s"


def _resolve_level(level: int | str | None) -> int | str:
    if level is not None:
        return level.strip().upper() if isinstance(level, str) else level
    return (os.getenv("BIZLEDGER_LOG_LEVEL") or "INFO").strip().upper()


def _with_trace(handler: logging.Handler, fmt: str, trace_filter: logging.Filter) -> logging.Handler:
    handler.addFilter(trace_filter)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(level: int | str | None = None, log_dir: Path | None = None) -> Path:
    """
    Route all records to ``<data dir>/logs/app.log`` (rotating, 5 x 1 MB) and
    the console, each line tagged with the active trace id.

    ``BIZLEDGER_LOG_LEVEL`` applies when ``level`` is not given. Returns the
    log file path.
    """
    log_dir = log_dir or (user_data_dir() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    # Repeated calls replace handlers instead of stacking them.
    root.handlers.clear()

    trace_filter = TraceIdLogFilter()
    root.addHandler(
        _with_trace(
            RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
            FILE_FORMAT,
            trace_filter,
        )
    )
    root.addHandler(_with_trace(logging.StreamHandler(), CONSOLE_FORMAT, trace_filter))

    root.info("Logging initialized. Log file at %s", log_file)
    install_global_exception_hooks()
    get_operational_support().emit_event(
        event_type="app.logging.initialized",
        message=f"Logging initialized at {log_file}",
        data={"log_file": str(log_file)},
    )
    return log_file


__all__ = ["setup_logging"]
