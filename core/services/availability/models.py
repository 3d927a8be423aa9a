from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from core.exceptions import ConflictLookupDegraded
from core.models import Assignment, AssignmentStatus, UnavailabilityType


@dataclass(frozen=True)
class ConflictRecord:
    """An existing assignment that covers part of a newly marked unavailable range."""

    assignment_id: str
    task_description: str
    start_date: date
    end_date: date
    status: AssignmentStatus
    conflict_dates: Tuple[date, ...] = ()


@dataclass
class UnavailabilityResult:
    created: int
    # None means the advisory lookup failed: conflicts are unknown, not absent
    conflicts: Optional[List[ConflictRecord]] = field(default_factory=list)
    warning: Optional[str] = None
    error: Optional[ConflictLookupDegraded] = None

    @property
    def degraded(self) -> bool:
        return self.conflicts is None

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


@dataclass
class DayAvailability:
    date: date
    is_available: bool
    available_hours: float
    assigned_hours: float
    remaining_hours: float
    unavailability_type: Optional[UnavailabilityType] = None
    notes: Optional[str] = None
    assignments: List[Assignment] = field(default_factory=list)


__all__ = ["ConflictRecord", "UnavailabilityResult", "DayAvailability"]
