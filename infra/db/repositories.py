from infra.db.assignment.repository import SqlAlchemyAssignmentRepository
from infra.db.availability.repository import SqlAlchemyUnavailabilityRepository
from infra.db.calendar.repository import SqlAlchemyWorkingCalendarRepository
from infra.db.resource.repository import SqlAlchemyResourceRepository, SqlAlchemySkillRepository

__all__ = [
    "SqlAlchemyResourceRepository",
    "SqlAlchemySkillRepository",
    "SqlAlchemyAssignmentRepository",
    "SqlAlchemyUnavailabilityRepository",
    "SqlAlchemyWorkingCalendarRepository",
]
