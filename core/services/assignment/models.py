from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.models import Assignment, UnavailabilityType


@dataclass(frozen=True)
class ScheduleConflict:
    """A day on which a proposed booking collides with an existing fact."""

    kind: str  # "assignment" | "unavailability"
    date: date
    message: str
    assignment_id: Optional[str] = None
    unavailability_type: Optional[UnavailabilityType] = None


@dataclass
class AssignmentBooking:
    assignment: Assignment
    conflicts: List[ScheduleConflict] = field(default_factory=list)

    @property
    def has_conflict(self) -> bool:
        return bool(self.conflicts)


@dataclass(frozen=True)
class OverAllocationCheck:
    """Whether ``requested_hours`` more on ``date`` would push a resource past that day's capacity."""

    date: date
    available_hours: float
    assigned_hours: float
    requested_hours: float
    excess_hours: float

    @property
    def is_over_allocated(self) -> bool:
        return self.excess_hours > 0


__all__ = ["ScheduleConflict", "AssignmentBooking", "OverAllocationCheck"]
