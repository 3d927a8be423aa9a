from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Set, Tuple

from core.interfaces import AssignmentRepository, ResourceRepository, UnavailabilityRepository
from core.models import Assignment, DateRange, Resource, ResourceType
from core.services.calendar.intervals import coerce_date, expand_date_range, make_range, ranges_overlap
from core.services.calendar.policy import UniformDayPolicy, WorkingDayPolicy
from core.services.resource.service import as_resource_type
from core.services.utilization.models import (
    UtilizationFilter,
    UtilizationReport,
    WeeklyUtilization,
    classify_utilization,
    utilization_percentage,
)

logger = logging.getLogger(__name__)


def _resource_criteria(
    resource_filter: UtilizationFilter | Mapping[str, Any] | None,
) -> Tuple[Optional[ResourceType], Optional[List[str]]]:
    if resource_filter is None:
        return None, None
    if isinstance(resource_filter, UtilizationFilter):
        resource_type, resource_ids = resource_filter.resource_type, resource_filter.resource_ids
    else:
        resource_type, resource_ids = resource_filter.get("resource_type"), resource_filter.get("resource_ids")
    rtype = as_resource_type(resource_type) if resource_type else None
    return rtype, list(resource_ids) if resource_ids else None


class UtilizationService:
    """
    Planned vs. actual vs. available hours per resource over a reporting window.

    - available: days in the window the policy counts as working and that carry no
      unavailability record, times the policy's hours for that day
    - planned/actual: summed over non-cancelled assignments overlapping the window;
      a partially overlapping assignment contributes its full value (no pro-rating)
    - utilization: actual / available * 100, or 0 when nothing is available
    - weekly_breakdown: the same figures per Monday-start week, with assignment hours spread
      over their working days

    Read-only; repository failures propagate and no partial report is produced.
    """

    def __init__(
        self,
        resource_repo: ResourceRepository,
        assignment_repo: AssignmentRepository,
        unavailability_repo: UnavailabilityRepository,
        policy: WorkingDayPolicy | None = None,
    ):
        self._resource_repo = resource_repo
        self._assignment_repo = assignment_repo
        self._unavailability_repo = unavailability_repo
        self._policy = policy or UniformDayPolicy()

    def compute_utilization(
        self,
        resource_filter: UtilizationFilter | Mapping[str, Any] | None,
        date_from: date | str,
        date_to: date | str,
    ) -> List[UtilizationReport]:
        """
        ``resource_filter`` may narrow by ``resource_type`` and/or ``resource_ids``, either as a
        mapping or a UtilizationFilter (whose own dates are ignored here). None, an empty type or
        an empty id list means "all active resources".
        """
        window = make_range(date_from, date_to)
        rtype, resource_ids = _resource_criteria(resource_filter)
        resources = self._resource_repo.list_by_filter(
            resource_type=rtype,
            resource_ids=resource_ids,
            active_only=True,
        )
        if not resources:
            return []

        ids = [r.id for r in resources]
        assignments_by_res: Dict[str, List[Assignment]] = defaultdict(list)
        for a in self._assignment_repo.list_active_for_resources(ids, window.start, window.end):
            assignments_by_res[a.resource_id].append(a)
        unavailable_by_res: Dict[str, Set[date]] = defaultdict(set)
        for rec in self._unavailability_repo.list_for_resources(ids, window.start, window.end):
            unavailable_by_res[rec.resource_id].add(rec.date)

        days = expand_date_range(window.start, window.end)
        reports = [
            self._report_for(r, window, days, assignments_by_res[r.id], unavailable_by_res[r.id])
            for r in resources
        ]
        logger.info(
            f"Computed utilization for {len(reports)} resource(s) "
            f"{window.start.isoformat()}..{window.end.isoformat()}"
        )
        return reports

    def get_utilization_report(self, filters: UtilizationFilter | Mapping[str, Any]) -> List[UtilizationReport]:
        """Report-screen entry point: ``{date_from, date_to, resource_type?, resource_ids?}``."""
        if isinstance(filters, Mapping):
            rtype, resource_ids = _resource_criteria(filters)
            filters = UtilizationFilter(
                date_from=coerce_date(filters.get("date_from"), field_name="date_from"),
                date_to=coerce_date(filters.get("date_to"), field_name="date_to"),
                resource_type=rtype,
                resource_ids=tuple(resource_ids) if resource_ids is not None else None,
            )
        return self.compute_utilization(filters, filters.date_from, filters.date_to)

    def _report_for(
        self,
        resource: Resource,
        window: DateRange,
        days: List[date],
        assignments: List[Assignment],
        unavailable: Set[date],
    ) -> UtilizationReport:
        available = 0.0
        for day in days:
            if day in unavailable or not self._policy.is_working_day(resource, day):
                continue
            available += self._policy.hours_for(resource, day)

        in_scope = [
            a
            for a in assignments
            if not a.is_cancelled and ranges_overlap(window, DateRange(a.start_date, a.end_date))
        ]
        planned = sum(float(a.planned_hours or 0.0) for a in in_scope)
        actual = sum(float(a.actual_hours or 0.0) for a in in_scope)
        pct = utilization_percentage(actual, available)

        return UtilizationReport(
            resource_id=resource.id,
            resource_code=resource.code,
            resource_name=resource.name,
            resource_type=resource.resource_type,
            date_from=window.start,
            date_to=window.end,
            standard_hours_per_day=resource.standard_hours_per_day,
            planned_hours=planned,
            actual_hours=actual,
            available_hours=available,
            unavailable_days=sum(1 for d in unavailable if window.contains(d)),
            utilization_percentage=pct,
            band=classify_utilization(pct),
            weekly_breakdown=self._weekly_breakdown(resource, days, in_scope, unavailable),
        )

    def _weekly_breakdown(
        self,
        resource: Resource,
        days: List[date],
        assignments: List[Assignment],
        unavailable: Set[date],
    ) -> Tuple[WeeklyUtilization, ...]:
        """
        Per-week view of the window. Unlike the report totals, each assignment is spread over
        its working days at a flat daily rate, so a week only carries the hours booked inside it.
        """
        rates = {
            a.id: (
                self._policy.daily_share(resource, a.start_date, a.end_date, a.planned_hours),
                self._policy.daily_share(resource, a.start_date, a.end_date, a.actual_hours),
            )
            for a in assignments
        }
        # week_start -> [planned, actual, available]
        weeks: Dict[date, List[float]] = {}
        for day in days:
            bucket = weeks.setdefault(day - timedelta(days=day.weekday()), [0.0, 0.0, 0.0])
            if not self._policy.is_working_day(resource, day):
                continue
            if day not in unavailable:
                bucket[2] += self._policy.hours_for(resource, day)
            for a in assignments:
                if a.start_date <= day <= a.end_date:
                    bucket[0] += rates[a.id][0]
                    bucket[1] += rates[a.id][1]

        return tuple(
            WeeklyUtilization(
                week_start=week_start,
                planned_hours=planned,
                actual_hours=actual,
                available_hours=available,
                utilization_percentage=utilization_percentage(actual, available),
            )
            for week_start, (planned, actual, available) in weeks.items()
        )


__all__ = ["UtilizationService"]
