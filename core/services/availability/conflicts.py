from __future__ import annotations

from typing import Iterable, List

from core.models import Assignment, DateRange
from core.services.availability.models import ConflictRecord
from core.services.calendar.intervals import iter_date_range, ranges_overlap


def find_conflicts(marked: DateRange, assignments: Iterable[Assignment]) -> List[ConflictRecord]:
    """Non-cancelled assignments whose range overlaps ``marked``, ordered by start date."""
    conflicts: List[ConflictRecord] = []
    for a in assignments:
        if a.is_cancelled:
            continue
        booked = DateRange(a.start_date, a.end_date)
        if not ranges_overlap(marked, booked):
            continue
        overlap = marked.intersection(booked)
        conflicts.append(
            ConflictRecord(
                assignment_id=a.id,
                task_description=a.task_description,
                start_date=a.start_date,
                end_date=a.end_date,
                status=a.status,
                conflict_dates=tuple(iter_date_range(overlap.start, overlap.end)),
            )
        )
    conflicts.sort(key=lambda c: (c.start_date, c.end_date, c.assignment_id))
    return conflicts


def describe_conflicts(conflicts: Iterable[ConflictRecord]) -> str:
    return "; ".join(
        f"{c.task_description} ({c.start_date.isoformat()} to {c.end_date.isoformat()})" for c in conflicts
    )


__all__ = ["find_conflicts", "describe_conflicts"]
