from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Set

from core.domain.identifiers import generate_id
from core.exceptions import InvalidRangeError


@dataclass(frozen=True)
class DateRange:
    """Closed interval of calendar days; both ends are included."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidRangeError(
                f"End date {self.end.isoformat()} precedes start date {self.start.isoformat()}.",
                code="INVALID_DATE_RANGE",
            )

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def intersection(self, other: "DateRange") -> Optional["DateRange"]:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end < start:
            return None
        return DateRange(start, end)


@dataclass
class WorkingCalendar:
    id: str
    name: str = "Default"
    # 0=Monday, 6=Sunday
    working_days: Set[int] = field(default_factory=lambda: {0, 1, 2, 3, 4, 5, 6})
    hours_per_day: float = 8.0

    @staticmethod
    def create_default() -> "WorkingCalendar":
        return WorkingCalendar(id="default", name="Default")


@dataclass
class Holiday:
    id: str
    calendar_id: str
    date: date
    name: str = ""

    @staticmethod
    def create(calendar_id: str, date: date, name: str = "") -> "Holiday":
        return Holiday(id=generate_id(), calendar_id=calendar_id, date=date, name=name)


__all__ = ["DateRange", "WorkingCalendar", "Holiday"]
