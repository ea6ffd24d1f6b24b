from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date

# Arbitrary floor for "all time" obligation sums; nothing is recorded before it.
DEFAULT_FUNDS_EPOCH = date(2000, 1, 1)
DEFAULT_ACTIVE_PROJECT_PREFIX = "PROJ"
UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class FinanceSettings:
    funds_epoch: date = DEFAULT_FUNDS_EPOCH
    active_project_prefix: str = DEFAULT_ACTIVE_PROJECT_PREFIX
    uncategorized_label: str = UNCATEGORIZED

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        epoch_raw = (os.getenv("BIZLEDGER_FUNDS_EPOCH") or "").strip()
        prefix = (os.getenv("BIZLEDGER_ACTIVE_PROJECT_PREFIX") or "").strip()
        return cls(
            funds_epoch=date.fromisoformat(epoch_raw) if epoch_raw else DEFAULT_FUNDS_EPOCH,
            active_project_prefix=prefix or DEFAULT_ACTIVE_PROJECT_PREFIX,
        )


__all__ = ["FinanceSettings", "DEFAULT_FUNDS_EPOCH", "DEFAULT_ACTIVE_PROJECT_PREFIX", "UNCATEGORIZED"]
