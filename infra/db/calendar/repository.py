from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import WorkingCalendarRepository
from core.models import Holiday, WorkingCalendar
from infra.db.calendar.mapper import (
    calendar_from_orm,
    holiday_from_orm,
    holiday_to_orm,
    working_days_to_str,
)
from infra.db.models import HolidayORM, WorkingCalendarORM


class SqlAlchemyWorkingCalendarRepository(WorkingCalendarRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, calendar_id: str) -> Optional[WorkingCalendar]:
        obj = self.session.get(WorkingCalendarORM, calendar_id)
        return calendar_from_orm(obj) if obj else None

    def upsert(self, calendar: WorkingCalendar) -> None:
        existing = self.session.get(WorkingCalendarORM, calendar.id)
        wd_str = working_days_to_str(calendar.working_days)
        if existing:
            existing.name = calendar.name
            existing.working_days = wd_str
            existing.hours_per_day = calendar.hours_per_day
        else:
            self.session.add(
                WorkingCalendarORM(
                    id=calendar.id,
                    name=calendar.name,
                    working_days=wd_str,
                    hours_per_day=calendar.hours_per_day,
                )
            )

    def list_holidays(self, calendar_id: str) -> List[Holiday]:
        stmt = select(HolidayORM).where(HolidayORM.calendar_id == calendar_id).order_by(HolidayORM.date)
        rows = self.session.execute(stmt).scalars().all()
        return [holiday_from_orm(row) for row in rows]

    def add_holiday(self, holiday: Holiday) -> None:
        self.session.add(holiday_to_orm(holiday))


__all__ = ["SqlAlchemyWorkingCalendarRepository"]
