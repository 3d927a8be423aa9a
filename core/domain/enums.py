from __future__ import annotations

from enum import Enum


class ResourceType(str, Enum):
    ENGINEERING = "engineering"
    DESIGN = "design"
    FIELD = "field"
    EQUIPMENT = "equipment"
    OTHER = "other"


class SkillCategory(str, Enum):
    ENGINEERING = "engineering"
    DESIGN = "design"
    FIELD = "field"
    OPERATION = "operation"
    OTHER = "other"


class AssignmentStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class UnavailabilityType(str, Enum):
    LEAVE = "leave"
    TRAINING = "training"
    SICK = "sick"
    EQUIPMENT_DOWN = "equipment_down"
    OTHER = "other"


class UtilizationBand(str, Enum):
    OVER_ALLOCATED = "over_allocated"
    UNDER_UTILIZED = "under_utilized"
    NORMAL = "normal"


# Prefixes used in generated resource codes, e.g. ENG-2026-0001.
RESOURCE_CODE_PREFIXES: dict[ResourceType, str] = {
    ResourceType.ENGINEERING: "ENG",
    ResourceType.DESIGN: "DSG",
    ResourceType.FIELD: "FLD",
    ResourceType.EQUIPMENT: "EQP",
    ResourceType.OTHER: "OTH",
}


__all__ = [
    "ResourceType",
    "SkillCategory",
    "AssignmentStatus",
    "UnavailabilityType",
    "UtilizationBand",
    "RESOURCE_CODE_PREFIXES",
]
