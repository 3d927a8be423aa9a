from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import AssignmentStatus
from core.domain.identifiers import generate_id


@dataclass
class Assignment:
    id: str
    resource_id: str
    task_description: str
    start_date: date
    end_date: date
    planned_hours: float = 0.0
    actual_hours: Optional[float] = None  # None until hours are logged
    status: AssignmentStatus = AssignmentStatus.PLANNED
    task_ref: Optional[str] = None
    notes: str = ""
    version: int = 1

    @property
    def is_cancelled(self) -> bool:
        return self.status == AssignmentStatus.CANCELLED

    @staticmethod
    def create(
        resource_id: str,
        task_description: str,
        start_date: date,
        end_date: date,
        planned_hours: float = 0.0,
        task_ref: Optional[str] = None,
        notes: str = "",
    ) -> "Assignment":
        return Assignment(
            id=generate_id(),
            resource_id=resource_id,
            task_description=task_description,
            start_date=start_date,
            end_date=end_date,
            planned_hours=planned_hours,
            task_ref=task_ref,
            notes=notes,
        )


__all__ = ["Assignment"]
