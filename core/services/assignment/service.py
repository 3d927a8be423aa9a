from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, InvalidTypeError, NotFoundError, ValidationError
from core.interfaces import AssignmentRepository, ResourceRepository, UnavailabilityRepository
from core.models import Assignment, AssignmentStatus, DateRange
from core.services.assignment.models import AssignmentBooking, OverAllocationCheck, ScheduleConflict
from core.services.calendar.intervals import coerce_date, iter_date_range, make_range, ranges_overlap
from core.services.calendar.policy import UniformDayPolicy, WorkingDayPolicy

logger = logging.getLogger(__name__)


def as_assignment_status(value: AssignmentStatus | str) -> AssignmentStatus:
    if isinstance(value, AssignmentStatus):
        return value
    try:
        return AssignmentStatus(str(value or "").strip().lower())
    except ValueError:
        raise InvalidTypeError(f"Invalid assignment status: {value!r}.", code="INVALID_ASSIGNMENT_STATUS") from None


class AssignmentService:
    """
    Books resources onto tasks over inclusive date ranges and tracks logged hours.

    Bookings are never rejected for overlapping work or unavailable days; those are
    returned as advisory ScheduleConflicts for the planner to resolve.
    """

    def __init__(
        self,
        session: Session,
        assignment_repo: AssignmentRepository,
        resource_repo: ResourceRepository,
        unavailability_repo: UnavailabilityRepository,
        policy: WorkingDayPolicy | None = None,
    ):
        self._session = session
        self._assignment_repo = assignment_repo
        self._resource_repo = resource_repo
        self._unavailability_repo = unavailability_repo
        self._policy = policy or UniformDayPolicy()

    def create_assignment(
        self,
        resource_id: str,
        task_description: str,
        start_date: date | str,
        end_date: date | str,
        planned_hours: float = 0.0,
        task_ref: str | None = None,
        notes: str = "",
    ) -> AssignmentBooking:
        if not task_description or not task_description.strip():
            raise ValidationError("Task description cannot be empty.", code="ASSIGNMENT_TASK_EMPTY")
        window = make_range(start_date, end_date)
        if planned_hours is None or planned_hours < 0:
            raise ValidationError("Planned hours cannot be negative.", code="ASSIGNMENT_HOURS_NEGATIVE")

        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        if not resource.is_active:
            raise BusinessRuleError("This resource is inactive.", code="RESOURCE_INACTIVE")

        conflicts = self.check_schedule_conflicts(resource_id, window.start, window.end)

        assignment = Assignment.create(
            resource_id=resource_id,
            task_description=task_description.strip(),
            start_date=window.start,
            end_date=window.end,
            planned_hours=float(planned_hours),
            task_ref=task_ref,
            notes=notes.strip(),
        )
        try:
            self._assignment_repo.add(assignment)
            self._session.commit()
            logger.info(
                f"Booked resource {resource.code} on '{assignment.task_description}' "
                f"{window.start.isoformat()}..{window.end.isoformat()}"
            )
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error creating assignment: {exc}")
            raise
        if conflicts:
            logger.warning(f"Assignment {assignment.id} created with {len(conflicts)} conflicting day(s)")
        domain_events.assignments_changed.emit(resource_id)
        return AssignmentBooking(assignment=assignment, conflicts=conflicts)

    def check_schedule_conflicts(
        self,
        resource_id: str,
        start_date: date | str,
        end_date: date | str,
        exclude_assignment_id: str | None = None,
    ) -> List[ScheduleConflict]:
        window = make_range(start_date, end_date)
        conflicts: List[ScheduleConflict] = []

        for other in self._assignment_repo.list_by_resource(resource_id):
            if other.id == exclude_assignment_id:
                continue
            overlap = window.intersection(DateRange(other.start_date, other.end_date))
            if overlap is None:
                continue
            for day in iter_date_range(overlap.start, overlap.end):
                conflicts.append(
                    ScheduleConflict(
                        kind="assignment",
                        date=day,
                        assignment_id=other.id,
                        message=(
                            f"Resource already assigned to {other.task_description or 'another task'} "
                            f"on {day.isoformat()}"
                        ),
                    )
                )

        for rec in self._unavailability_repo.list_for_resource(resource_id, window.start, window.end):
            conflicts.append(
                ScheduleConflict(
                    kind="unavailability",
                    date=rec.date,
                    unavailability_type=rec.unavailability_type,
                    message=f"Resource unavailable on {rec.date.isoformat()}: {rec.unavailability_type.value}",
                )
            )

        conflicts.sort(key=lambda c: (c.date, c.kind))
        return conflicts

    def update_assignment(
        self,
        assignment_id: str,
        task_description: str | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
        planned_hours: float | None = None,
        task_ref: str | None = None,
        notes: str | None = None,
        expected_version: int | None = None,
    ) -> AssignmentBooking:
        """
        Edit a booking in place. Omitted fields keep their stored value. The new window is
        re-checked against everything else on the resource, never against the booking itself.
        """
        a = self.get_assignment(assignment_id)
        if a.status == AssignmentStatus.CANCELLED:
            raise BusinessRuleError("Cannot edit a cancelled assignment.", code="ASSIGNMENT_CANCELLED")
        if expected_version is not None:
            a.version = expected_version

        if task_description is not None:
            if not task_description.strip():
                raise ValidationError("Task description cannot be empty.", code="ASSIGNMENT_TASK_EMPTY")
            a.task_description = task_description.strip()
        window = make_range(
            start_date if start_date is not None else a.start_date,
            end_date if end_date is not None else a.end_date,
        )
        a.start_date, a.end_date = window.start, window.end
        if planned_hours is not None:
            if planned_hours < 0:
                raise ValidationError("Planned hours cannot be negative.", code="ASSIGNMENT_HOURS_NEGATIVE")
            a.planned_hours = float(planned_hours)
        if task_ref is not None:
            a.task_ref = task_ref.strip() or None
        if notes is not None:
            a.notes = notes.strip()

        conflicts = self.check_schedule_conflicts(a.resource_id, window.start, window.end, exclude_assignment_id=a.id)
        self._save(a)
        logger.info(f"Updated assignment {a.id} to {window.start.isoformat()}..{window.end.isoformat()}")
        if conflicts:
            logger.warning(f"Assignment {a.id} now has {len(conflicts)} conflicting day(s)")
        return AssignmentBooking(assignment=a, conflicts=conflicts)

    def detect_over_allocation(
        self, resource_id: str, day: date | str, additional_hours: float = 0.0
    ) -> OverAllocationCheck:
        if additional_hours is None or additional_hours < 0:
            raise ValidationError("Requested hours cannot be negative.", code="ASSIGNMENT_HOURS_NEGATIVE")
        d = coerce_date(day)
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")

        capacity = 0.0
        booked = 0.0
        off = bool(self._unavailability_repo.list_for_resource(resource.id, d, d))
        if not off and self._policy.is_working_day(resource, d):
            capacity = self._policy.hours_for(resource, d)
            booked = sum(
                self._policy.daily_share(resource, a.start_date, a.end_date, a.planned_hours)
                for a in self._assignment_repo.list_active_for_resources([resource.id], d, d)
            )

        requested = float(additional_hours)
        return OverAllocationCheck(
            date=d,
            available_hours=capacity,
            assigned_hours=booked,
            requested_hours=requested,
            excess_hours=max(0.0, booked + requested - capacity),
        )

    def update_status(self, assignment_id: str, status: AssignmentStatus | str) -> Assignment:
        a = self.get_assignment(assignment_id)
        new_status = as_assignment_status(status)
        if a.status == AssignmentStatus.CANCELLED and new_status != AssignmentStatus.CANCELLED:
            raise BusinessRuleError("A cancelled assignment cannot be reopened.", code="ASSIGNMENT_CANCELLED")
        a.status = new_status
        self._save(a)
        return a

    def cancel_assignment(self, assignment_id: str) -> Assignment:
        return self.update_status(assignment_id, AssignmentStatus.CANCELLED)

    def record_actual_hours(self, assignment_id: str, actual_hours: float) -> Assignment:
        if actual_hours is None or actual_hours < 0:
            raise ValidationError("Actual hours cannot be negative.", code="ASSIGNMENT_HOURS_NEGATIVE")
        a = self.get_assignment(assignment_id)
        if a.status == AssignmentStatus.CANCELLED:
            raise BusinessRuleError("Cannot log hours on a cancelled assignment.", code="ASSIGNMENT_CANCELLED")
        a.actual_hours = float(actual_hours)
        if a.status == AssignmentStatus.PLANNED:
            a.status = AssignmentStatus.IN_PROGRESS
        self._save(a)
        return a

    def get_assignment(self, assignment_id: str) -> Assignment:
        a = self._assignment_repo.get(assignment_id)
        if not a:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        return a

    def list_assignments(
        self,
        resource_id: str,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
        include_cancelled: bool = False,
    ) -> List[Assignment]:
        rows = self._assignment_repo.list_by_resource(resource_id, include_cancelled=include_cancelled)
        if start_date is None and end_date is None:
            return rows
        window = self._open_window(start_date, end_date)
        return [a for a in rows if ranges_overlap(window, DateRange(a.start_date, a.end_date))]

    def _open_window(self, start_date, end_date) -> DateRange:
        start = coerce_date(start_date, field_name="start_date") if start_date is not None else date.min
        end = coerce_date(end_date, field_name="end_date") if end_date is not None else date.max
        return DateRange(start, end)

    def _save(self, a: Assignment) -> None:
        try:
            self._assignment_repo.update(a)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            raise exc
        domain_events.assignments_changed.emit(a.resource_id)


__all__ = ["AssignmentService", "as_assignment_status"]
