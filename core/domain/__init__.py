from core.domain.assignment import Assignment
from core.domain.availability import UnavailabilityRecord
from core.domain.calendar import DateRange, Holiday, WorkingCalendar
from core.domain.enums import (
    RESOURCE_CODE_PREFIXES,
    AssignmentStatus,
    ResourceType,
    SkillCategory,
    UnavailabilityType,
    UtilizationBand,
)
from core.domain.identifiers import generate_id
from core.domain.resource import DEFAULT_STANDARD_HOURS, Resource, Skill

__all__ = [
    "generate_id",
    "ResourceType",
    "SkillCategory",
    "AssignmentStatus",
    "UnavailabilityType",
    "UtilizationBand",
    "RESOURCE_CODE_PREFIXES",
    "DEFAULT_STANDARD_HOURS",
    "Resource",
    "Skill",
    "Assignment",
    "UnavailabilityRecord",
    "DateRange",
    "WorkingCalendar",
    "Holiday",
]
