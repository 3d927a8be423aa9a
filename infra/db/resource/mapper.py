from __future__ import annotations

from typing import Iterable, Set

from core.models import Resource, ResourceType, Skill, SkillCategory
from infra.db.models import ResourceORM, SkillORM


def skills_to_str(skills: Iterable[str]) -> str:
    return ",".join(sorted({s.strip() for s in skills if s and s.strip()}))


def skills_from_str(raw: str | None) -> Set[str]:
    if not raw:
        return set()
    return {part for part in (p.strip() for p in raw.split(",")) if part}


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        code=resource.code,
        name=resource.name,
        resource_type=resource.resource_type,
        skills=skills_to_str(resource.skills),
        standard_hours_per_day=resource.standard_hours_per_day,
        hourly_rate=resource.hourly_rate,
        description=resource.description,
        is_active=resource.is_active,
        version=getattr(resource, "version", 1),
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        code=obj.code,
        name=obj.name,
        resource_type=ResourceType(obj.resource_type) if obj.resource_type else ResourceType.OTHER,
        skills=skills_from_str(obj.skills),
        standard_hours_per_day=obj.standard_hours_per_day,
        hourly_rate=obj.hourly_rate,
        description=obj.description or "",
        is_active=obj.is_active,
        version=getattr(obj, "version", 1),
    )


def skill_to_orm(skill: Skill) -> SkillORM:
    return SkillORM(
        id=skill.id,
        code=skill.code,
        name=skill.name,
        category=skill.category,
        is_active=skill.is_active,
    )


def skill_from_orm(obj: SkillORM) -> Skill:
    return Skill(
        id=obj.id,
        code=obj.code,
        name=obj.name,
        category=SkillCategory(obj.category) if obj.category else SkillCategory.OTHER,
        is_active=obj.is_active,
    )


__all__ = [
    "resource_to_orm",
    "resource_from_orm",
    "skill_to_orm",
    "skill_from_orm",
    "skills_to_str",
    "skills_from_str",
]
