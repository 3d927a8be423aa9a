from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any, List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import ConflictLookupDegraded, InvalidTypeError, NotFoundError, PersistenceError, ValidationError
from core.interfaces import AssignmentRepository, ResourceRepository, UnavailabilityRepository
from core.models import Resource, UnavailabilityRecord, UnavailabilityType
from core.services.availability.conflicts import describe_conflicts, find_conflicts
from core.services.availability.models import DayAvailability, UnavailabilityResult
from core.services.calendar.intervals import coerce_date, expand_date_range, make_range
from core.services.calendar.policy import UniformDayPolicy, WorkingDayPolicy

logger = logging.getLogger(__name__)


def as_unavailability_type(value: UnavailabilityType | str) -> UnavailabilityType:
    if isinstance(value, UnavailabilityType):
        return value
    try:
        return UnavailabilityType(str(value or "").strip().lower())
    except ValueError:
        raise InvalidTypeError(
            f"Invalid unavailability type: {value!r}.",
            code="INVALID_UNAVAILABILITY_TYPE",
        ) from None


class AvailabilityService:
    """
    Records the days a resource cannot work and reports the bookings those days collide with.

    Marking a range is a two-step operation:
      1. upsert one UnavailabilityRecord per day, all-or-nothing (PersistenceError on failure);
      2. look up non-cancelled assignments overlapping the range and return them as conflicts.

    Step 2 never blocks or undoes step 1. If the lookup itself fails, the result comes back
    with ``conflicts=None`` and a warning so callers can tell "unknown" from "none".
    Conflicts reflect the assignment data at call time; bookings written concurrently show up
    on the next check.
    """

    def __init__(
        self,
        session: Session,
        resource_repo: ResourceRepository,
        assignment_repo: AssignmentRepository,
        unavailability_repo: UnavailabilityRepository,
        policy: WorkingDayPolicy | None = None,
    ):
        self._session = session
        self._resource_repo = resource_repo
        self._assignment_repo = assignment_repo
        self._unavailability_repo = unavailability_repo
        self._policy = policy or UniformDayPolicy()

    def set_unavailability(
        self,
        resource_id: str,
        start_date: date | str,
        end_date: date | str,
        unavailability_type: UnavailabilityType | str,
        notes: str | None = None,
    ) -> UnavailabilityResult:
        window = make_range(start_date, end_date)
        utype = as_unavailability_type(unavailability_type)
        resource = self._require_resource(resource_id)
        notes = notes.strip() if notes and notes.strip() else None

        days = expand_date_range(window.start, window.end)
        try:
            for day in days:
                self._unavailability_repo.upsert(UnavailabilityRecord.create(resource.id, day, utype, notes))
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error setting unavailability for {resource.code}: {exc}")
            raise PersistenceError(
                "Failed to set unavailability; no days were recorded.",
                code="UNAVAILABILITY_WRITE_FAILED",
            ) from exc

        logger.info(
            f"Marked {resource.code} unavailable ({utype.value}) "
            f"{window.start.isoformat()}..{window.end.isoformat()}, {len(days)} day(s)"
        )
        domain_events.availability_changed.emit(resource.id)

        try:
            assignments = self._assignment_repo.list_active_for_resources([resource.id], window.start, window.end)
            conflicts = find_conflicts(window, assignments)
        except Exception as exc:
            degraded = ConflictLookupDegraded(
                "Unavailability was recorded, but existing assignments could not be checked for conflicts.",
                code="CONFLICT_LOOKUP_DEGRADED",
            )
            degraded.__cause__ = exc
            logger.warning(f"Conflict lookup failed for {resource.code}: {exc}")
            return UnavailabilityResult(created=len(days), conflicts=None, warning=str(degraded), error=degraded)

        if conflicts:
            logger.warning(f"{resource.code} unavailable over booked work: {describe_conflicts(conflicts)}")
        return UnavailabilityResult(created=len(days), conflicts=conflicts)

    def set_unavailability_input(self, payload: Mapping[str, Any]) -> UnavailabilityResult:
        """Entry point for the dialog form: ``{resource_id, dates: [start, end], unavailability_type, notes?}``."""
        resource_id = str(payload.get("resource_id") or "").strip()
        if not resource_id:
            raise ValidationError("Resource is required.", code="RESOURCE_REQUIRED")
        dates = payload.get("dates")
        if isinstance(dates, (str, bytes)) or not isinstance(dates, Sequence) or not dates:
            raise ValidationError("At least one date is required.", code="DATES_REQUIRED")
        if len(dates) > 2:
            raise ValidationError("Dates must be given as [start, end].", code="DATES_INVALID")
        start = dates[0]
        end = dates[-1]
        if payload.get("unavailability_type") in (None, ""):
            raise InvalidTypeError("Unavailability type is required.", code="INVALID_UNAVAILABILITY_TYPE")
        return self.set_unavailability(
            resource_id,
            start,
            end,
            payload["unavailability_type"],
            notes=payload.get("notes"),
        )

    def remove_unavailability(self, resource_id: str, day: date | str) -> int:
        d = coerce_date(day)
        return self.clear_unavailability(resource_id, d, d)

    def clear_unavailability(self, resource_id: str, start_date: date | str, end_date: date | str) -> int:
        window = make_range(start_date, end_date)
        resource = self._require_resource(resource_id)
        try:
            removed = self._unavailability_repo.delete_range(resource.id, window.start, window.end)
            self._session.commit()
        except Exception as exc:
            self._session.rollback()
            logger.error(f"Error removing unavailability for {resource.code}: {exc}")
            raise PersistenceError("Failed to remove unavailability.", code="UNAVAILABILITY_DELETE_FAILED") from exc
        logger.info(f"Cleared {removed} unavailable day(s) for {resource.code}")
        if removed:
            domain_events.availability_changed.emit(resource.id)
        return removed

    def get_unavailability(
        self, resource_id: str, start_date: date | str, end_date: date | str
    ) -> List[UnavailabilityRecord]:
        window = make_range(start_date, end_date)
        return self._unavailability_repo.list_for_resource(resource_id, window.start, window.end)

    def get_availability_calendar(
        self, resource_id: str, start_date: date | str, end_date: date | str
    ) -> List[DayAvailability]:
        """One cell per day: capacity, hours already booked, and what is left."""
        window = make_range(start_date, end_date)
        resource = self._require_resource(resource_id)
        unavailable = {
            r.date: r for r in self._unavailability_repo.list_for_resource(resource.id, window.start, window.end)
        }
        assignments = self._assignment_repo.list_active_for_resources([resource.id], window.start, window.end)
        daily_rate = {
            a.id: self._policy.daily_share(resource, a.start_date, a.end_date, a.planned_hours)
            for a in assignments
        }

        cells: List[DayAvailability] = []
        for day in expand_date_range(window.start, window.end):
            covering = [a for a in assignments if a.start_date <= day <= a.end_date]
            working = self._policy.is_working_day(resource, day)
            rec = unavailable.get(day)
            if rec is not None or not working:
                # no capacity, so nothing counts as booked on this day
                cells.append(
                    DayAvailability(
                        date=day,
                        is_available=False,
                        available_hours=0.0,
                        assigned_hours=0.0,
                        remaining_hours=0.0,
                        unavailability_type=rec.unavailability_type if rec else None,
                        notes=rec.notes if rec else None,
                        assignments=covering,
                    )
                )
                continue
            assigned = sum(daily_rate[a.id] for a in covering)
            capacity = self._policy.hours_for(resource, day)
            cells.append(
                DayAvailability(
                    date=day,
                    is_available=True,
                    available_hours=capacity,
                    assigned_hours=assigned,
                    remaining_hours=max(0.0, capacity - assigned),
                    assignments=covering,
                )
            )
        return cells

    def _require_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource


__all__ = ["AvailabilityService", "as_unavailability_type"]
