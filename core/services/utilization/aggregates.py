from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from core.exceptions import ValidationError
from core.models import ResourceType
from core.services.utilization.models import (
    TypeUtilization,
    UtilizationReport,
    UtilizationSummary,
    utilization_percentage,
)

_SORT_KEYS = {
    "utilization": lambda r: r.utilization_percentage,
    "name": lambda r: r.resource_name.lower(),
    "code": lambda r: r.resource_code,
    "type": lambda r: r.resource_type.value,
    "planned": lambda r: r.planned_hours,
    "actual": lambda r: r.actual_hours,
    "available": lambda r: r.available_hours,
}


def summarize(reports: Iterable[UtilizationReport]) -> UtilizationSummary:
    """Header figures of the report screen."""
    rows = list(reports)
    if not rows:
        return UtilizationSummary(0, 0.0, 0, 0, 0.0, 0.0, 0.0)
    return UtilizationSummary(
        total_resources=len(rows),
        average_utilization=sum(r.utilization_percentage for r in rows) / len(rows),
        over_allocated_count=sum(1 for r in rows if r.is_over_allocated),
        under_utilized_count=sum(1 for r in rows if r.is_under_utilized),
        total_planned_hours=sum(r.planned_hours for r in rows),
        total_actual_hours=sum(r.actual_hours for r in rows),
        total_available_hours=sum(r.available_hours for r in rows),
    )


def aggregate_by_type(reports: Iterable[UtilizationReport]) -> List[TypeUtilization]:
    buckets: Dict[ResourceType, List[UtilizationReport]] = defaultdict(list)
    for r in reports:
        buckets[r.resource_type].append(r)

    result: List[TypeUtilization] = []
    # enum declaration order keeps the table stable
    for rtype in ResourceType:
        rows = buckets.get(rtype)
        if not rows:
            continue
        planned = sum(r.planned_hours for r in rows)
        actual = sum(r.actual_hours for r in rows)
        available = sum(r.available_hours for r in rows)
        result.append(
            TypeUtilization(
                resource_type=rtype,
                resource_count=len(rows),
                planned_hours=planned,
                actual_hours=actual,
                available_hours=available,
                utilization_percentage=utilization_percentage(actual, available),
            )
        )
    return result


def sort_reports(
    reports: Iterable[UtilizationReport],
    key: str = "utilization",
    descending: bool = True,
) -> List[UtilizationReport]:
    try:
        sort_key = _SORT_KEYS[key]
    except KeyError:
        raise ValidationError(f"Unknown sort key: {key!r}.", code="INVALID_SORT_KEY") from None
    return sorted(reports, key=sort_key, reverse=descending)


__all__ = ["summarize", "aggregate_by_type", "sort_reports"]
