from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import ResourceRepository, SkillRepository
from core.models import Resource, ResourceType, Skill
from infra.db.models import ResourceORM, SkillORM
from infra.db.optimistic import update_with_version_check
from infra.db.resource.mapper import (
    resource_from_orm,
    resource_to_orm,
    skill_from_orm,
    skill_to_orm,
    skills_to_str,
)


class SqlAlchemyResourceRepository(ResourceRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, resource: Resource) -> None:
        self.session.add(resource_to_orm(resource))

    def update(self, resource: Resource) -> None:
        resource.version = update_with_version_check(
            self.session,
            ResourceORM,
            resource.id,
            getattr(resource, "version", 1),
            {
                "code": resource.code,
                "name": resource.name,
                "resource_type": resource.resource_type,
                "skills": skills_to_str(resource.skills),
                "standard_hours_per_day": resource.standard_hours_per_day,
                "hourly_rate": resource.hourly_rate,
                "description": resource.description,
                "is_active": resource.is_active,
            },
            entity_label="resource",
        )

    def get(self, resource_id: str) -> Optional[Resource]:
        obj = self.session.get(ResourceORM, resource_id)
        return resource_from_orm(obj) if obj else None

    def list_all(self) -> List[Resource]:
        stmt = select(ResourceORM).order_by(ResourceORM.resource_type, ResourceORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [resource_from_orm(row) for row in rows]

    def list_by_filter(
        self,
        resource_type: Optional[ResourceType] = None,
        resource_ids: Optional[Iterable[str]] = None,
        active_only: bool = True,
    ) -> List[Resource]:
        stmt = select(ResourceORM)
        if active_only:
            stmt = stmt.where(ResourceORM.is_active.is_(True))
        if resource_type is not None:
            stmt = stmt.where(ResourceORM.resource_type == resource_type)
        if resource_ids is not None:
            ids = list(resource_ids)
            if not ids:
                return []
            stmt = stmt.where(ResourceORM.id.in_(ids))
        stmt = stmt.order_by(ResourceORM.resource_type, ResourceORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [resource_from_orm(row) for row in rows]

    def list_codes(self) -> List[str]:
        return list(self.session.execute(select(ResourceORM.code)).scalars().all())


class SqlAlchemySkillRepository(SkillRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, skill: Skill) -> None:
        self.session.add(skill_to_orm(skill))

    def get_by_code(self, code: str) -> Optional[Skill]:
        stmt = select(SkillORM).where(SkillORM.code == code)
        obj = self.session.execute(stmt).scalars().first()
        return skill_from_orm(obj) if obj else None

    def list_all(self, active_only: bool = True) -> List[Skill]:
        stmt = select(SkillORM)
        if active_only:
            stmt = stmt.where(SkillORM.is_active.is_(True))
        stmt = stmt.order_by(SkillORM.category, SkillORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [skill_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyResourceRepository", "SqlAlchemySkillRepository"]
