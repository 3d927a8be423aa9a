from infra.db.calendar.mapper import calendar_from_orm, holiday_from_orm, holiday_to_orm
from infra.db.calendar.repository import SqlAlchemyWorkingCalendarRepository

__all__ = [
    "calendar_from_orm",
    "holiday_to_orm",
    "holiday_from_orm",
    "SqlAlchemyWorkingCalendarRepository",
]
