from __future__ import annotations

from datetime import date
from typing import Iterable, Set

from core.interfaces import WorkingCalendarRepository
from core.models import Resource, WorkingCalendar
from core.services.calendar.intervals import iter_date_range


class WorkingDayPolicy:
    """
    Decides which calendar days count as capacity for a resource and how many hours each one holds.
    Unavailability records are applied on top of this by the utilization calculator.
    """

    def is_working_day(self, resource: Resource, day: date) -> bool:
        raise NotImplementedError

    def hours_for(self, resource: Resource, day: date) -> float:
        return float(resource.standard_hours_per_day or 0.0)

    def daily_share(self, resource: Resource, start: date, end: date, hours: float | None) -> float:
        """``hours`` spread evenly over the working days of ``start..end``; 0 when there are none."""
        working = sum(1 for d in iter_date_range(start, end) if self.is_working_day(resource, d))
        if working == 0:
            return 0.0
        return float(hours or 0.0) / working


class UniformDayPolicy(WorkingDayPolicy):
    """Uniform 7-day calendar: no weekend or holiday exclusion."""

    def is_working_day(self, resource: Resource, day: date) -> bool:
        return True


class WorkingCalendarPolicy(WorkingDayPolicy):
    """
    Working weekdays and holidays from a stored calendar.

    The calendar's ``hours_per_day`` is the length of the working day: a resource's
    standard hours count up to that limit, so a part-timer keeps their shorter day.
    """

    def __init__(self, calendar: WorkingCalendar, holidays: Iterable[date] = ()):
        self._working_days: Set[int] = set(calendar.working_days)
        self._holidays: Set[date] = set(holidays)
        self._day_length = float(calendar.hours_per_day)

    @classmethod
    def from_repository(
        cls, calendar_repo: WorkingCalendarRepository, calendar_id: str = "default"
    ) -> "WorkingCalendarPolicy":
        cal = calendar_repo.get(calendar_id)
        if cal is None:
            # ephemeral default, not persisted
            cal = WorkingCalendar.create_default()
            return cls(cal)
        return cls(cal, (h.date for h in calendar_repo.list_holidays(cal.id)))

    def is_working_day(self, resource: Resource, day: date) -> bool:
        if day.weekday() not in self._working_days:
            return False
        return day not in self._holidays

    def hours_for(self, resource: Resource, day: date) -> float:
        return min(super().hours_for(resource, day), self._day_length)


__all__ = ["WorkingDayPolicy", "UniformDayPolicy", "WorkingCalendarPolicy"]
