from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import AssignmentRepository
from core.models import Assignment, AssignmentStatus
from infra.db.assignment.mapper import assignment_from_orm, assignment_to_orm
from infra.db.models import AssignmentORM
from infra.db.optimistic import update_with_version_check


class SqlAlchemyAssignmentRepository(AssignmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, assignment: Assignment) -> None:
        self.session.add(assignment_to_orm(assignment))

    def update(self, assignment: Assignment) -> None:
        assignment.version = update_with_version_check(
            self.session,
            AssignmentORM,
            assignment.id,
            getattr(assignment, "version", 1),
            {
                "task_description": assignment.task_description,
                "task_ref": assignment.task_ref,
                "start_date": assignment.start_date,
                "end_date": assignment.end_date,
                "planned_hours": assignment.planned_hours,
                "actual_hours": assignment.actual_hours,
                "status": assignment.status,
                "notes": assignment.notes or "",
            },
            entity_label="assignment",
        )

    def get(self, assignment_id: str) -> Optional[Assignment]:
        obj = self.session.get(AssignmentORM, assignment_id)
        return assignment_from_orm(obj) if obj else None

    def list_by_resource(self, resource_id: str, include_cancelled: bool = False) -> List[Assignment]:
        stmt = select(AssignmentORM).where(AssignmentORM.resource_id == resource_id)
        if not include_cancelled:
            stmt = stmt.where(AssignmentORM.status != AssignmentStatus.CANCELLED)
        stmt = stmt.order_by(AssignmentORM.start_date, AssignmentORM.end_date)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]

    def list_active_for_resources(
        self,
        resource_ids: Iterable[str],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Assignment]:
        ids = list(resource_ids)
        if not ids:
            return []
        stmt = select(AssignmentORM).where(
            AssignmentORM.resource_id.in_(ids),
            AssignmentORM.status != AssignmentStatus.CANCELLED,
        )
        # coarse pre-filter; callers still apply the exact overlap test
        if end_date is not None:
            stmt = stmt.where(AssignmentORM.start_date <= end_date)
        if start_date is not None:
            stmt = stmt.where(AssignmentORM.end_date >= start_date)
        stmt = stmt.order_by(AssignmentORM.resource_id, AssignmentORM.start_date)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyAssignmentRepository"]
