from __future__ import annotations

from typing import Set

from core.models import Holiday, WorkingCalendar
from infra.db.models import HolidayORM, WorkingCalendarORM


def working_days_to_str(days: Set[int]) -> str:
    return ",".join(str(day) for day in sorted(days))


def working_days_from_str(raw: str | None) -> Set[int]:
    if not raw:
        return set()
    return {int(part) for part in raw.split(",") if part.strip()}


def calendar_from_orm(obj: WorkingCalendarORM) -> WorkingCalendar:
    return WorkingCalendar(
        id=obj.id,
        name=obj.name,
        working_days=working_days_from_str(obj.working_days),
        hours_per_day=obj.hours_per_day,
    )


def holiday_to_orm(holiday: Holiday) -> HolidayORM:
    return HolidayORM(
        id=holiday.id,
        calendar_id=holiday.calendar_id,
        date=holiday.date,
        name=holiday.name,
    )


def holiday_from_orm(obj: HolidayORM) -> Holiday:
    return Holiday(id=obj.id, calendar_id=obj.calendar_id, date=obj.date, name=obj.name or "")


__all__ = [
    "calendar_from_orm",
    "holiday_to_orm",
    "holiday_from_orm",
    "working_days_to_str",
    "working_days_from_str",
]
