from __future__ import annotations

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    # Frozen builds unpack data files next to the executable (or into _MEIPASS).
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def find_script_location(app_dir: Path | None = None) -> Path:
    base = app_dir or _app_dir()
    candidates = [base / "migration", base / "_internal" / "migration"]
    for candidate in candidates:
        if (candidate / "alembic.ini").exists():
            return candidate
    raise RuntimeError(
        "Alembic migration folder not found. Tried: " + ", ".join(str(p) for p in candidates)
    )


def alembic_config(db_url: str, script_location: Path | None = None) -> Config:
    location = script_location or find_script_location()
    cfg = Config(str(location / "alembic.ini"))
    cfg.set_main_option("script_location", str(location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def run_migrations(db_url: str | None = None, revision: str = "head") -> None:
    """Upgrade the ledger schema at ``db_url`` (default: the configured database)."""
    if db_url is None:
        from infra.db.base import resolve_db_url

        db_url = resolve_db_url()
    logger.info("Applying ledger migrations up to %s", revision)
    command.upgrade(alembic_config(db_url), revision)


__all__ = ["alembic_config", "find_script_location", "run_migrations"]
