from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from core.domain.enums import ResourceType, SkillCategory
from core.domain.identifiers import generate_id

DEFAULT_STANDARD_HOURS = 8.0


@dataclass
class Resource:
    id: str
    code: str
    name: str
    resource_type: ResourceType = ResourceType.ENGINEERING
    skills: Set[str] = field(default_factory=set)
    standard_hours_per_day: float = DEFAULT_STANDARD_HOURS
    hourly_rate: float = 0.0
    description: str = ""
    is_active: bool = True
    version: int = 1

    @staticmethod
    def create(
        code: str,
        name: str,
        resource_type: ResourceType = ResourceType.ENGINEERING,
        skills: Optional[Set[str]] = None,
        standard_hours_per_day: float = DEFAULT_STANDARD_HOURS,
        hourly_rate: float = 0.0,
        description: str = "",
        is_active: bool = True,
    ) -> "Resource":
        return Resource(
            id=generate_id(),
            code=code,
            name=name,
            resource_type=resource_type,
            skills=set(skills or ()),
            standard_hours_per_day=standard_hours_per_day,
            hourly_rate=hourly_rate,
            description=description,
            is_active=is_active,
        )


@dataclass
class Skill:
    id: str
    code: str
    name: str
    category: SkillCategory = SkillCategory.OTHER
    is_active: bool = True

    @staticmethod
    def create(code: str, name: str, category: SkillCategory = SkillCategory.OTHER) -> "Skill":
        return Skill(id=generate_id(), code=code, name=name, category=category)


__all__ = ["Resource", "Skill", "DEFAULT_STANDARD_HOURS"]
