from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ``[start, end]`` date range. ``end >= start`` is the caller's concern."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateWindow":
        last_day = monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, last_day))

    @classmethod
    def for_year(cls, year: int) -> "DateWindow":
        return cls(date(year, 1, 1), date(year, 12, 31))

    @classmethod
    def for_years(cls, first_year: int, last_year: int) -> "DateWindow":
        return cls(date(first_year, 1, 1), date(last_year, 12, 31))


__all__ = ["DateWindow"]
