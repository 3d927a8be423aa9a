from __future__ import annotations

from core.models import Assignment, AssignmentStatus
from infra.db.models import AssignmentORM


def assignment_to_orm(assignment: Assignment) -> AssignmentORM:
    return AssignmentORM(
        id=assignment.id,
        resource_id=assignment.resource_id,
        task_description=assignment.task_description,
        task_ref=assignment.task_ref,
        start_date=assignment.start_date,
        end_date=assignment.end_date,
        planned_hours=assignment.planned_hours,
        actual_hours=assignment.actual_hours,
        status=assignment.status,
        notes=assignment.notes or "",
        version=getattr(assignment, "version", 1),
    )


def assignment_from_orm(obj: AssignmentORM) -> Assignment:
    return Assignment(
        id=obj.id,
        resource_id=obj.resource_id,
        task_description=obj.task_description,
        task_ref=obj.task_ref,
        start_date=obj.start_date,
        end_date=obj.end_date,
        planned_hours=float(obj.planned_hours or 0.0),
        actual_hours=obj.actual_hours,
        status=AssignmentStatus(obj.status) if obj.status else AssignmentStatus.PLANNED,
        notes=obj.notes or "",
        version=getattr(obj, "version", 1),
    )


__all__ = ["assignment_to_orm", "assignment_from_orm"]
