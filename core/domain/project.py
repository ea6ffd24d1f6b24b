from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class Project:
    id: str
    code: str
    name: str
    receivable: Optional[Decimal] = None
    created_at: datetime = field(default_factory=datetime.now)
    company_name: Optional[str] = None

    def is_active_code(self, prefix: str = "PROJ") -> bool:
        """Encoded (imported) projects carry a non-``PROJ`` code."""
        return (self.code or "").startswith(prefix)

    @staticmethod
    def create(code: str, name: str, **extra) -> "Project":
        return Project(id=generate_id(), code=code, name=name, **extra)


__all__ = ["Project"]
