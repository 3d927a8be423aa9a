from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from core.models import ResourceType, UtilizationBand

OVER_ALLOCATED_THRESHOLD = 100.0
UNDER_UTILIZED_THRESHOLD = 50.0


def utilization_percentage(actual_hours: float, available_hours: float) -> float:
    if available_hours <= 0:
        return 0.0
    return actual_hours / available_hours * 100.0


def classify_utilization(percentage: float) -> UtilizationBand:
    if percentage > OVER_ALLOCATED_THRESHOLD:
        return UtilizationBand.OVER_ALLOCATED
    if percentage < UNDER_UTILIZED_THRESHOLD:
        return UtilizationBand.UNDER_UTILIZED
    return UtilizationBand.NORMAL


@dataclass(frozen=True)
class UtilizationFilter:
    date_from: date
    date_to: date
    resource_type: Optional[ResourceType] = None
    resource_ids: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class WeeklyUtilization:
    """One Monday-to-Sunday slice of a report window, clipped to the window."""

    week_start: date  # the Monday, even when the window opens mid-week
    planned_hours: float
    actual_hours: float
    available_hours: float
    utilization_percentage: float


@dataclass(frozen=True)
class UtilizationReport:
    resource_id: str
    resource_code: str
    resource_name: str
    resource_type: ResourceType
    date_from: date
    date_to: date
    standard_hours_per_day: float
    planned_hours: float
    actual_hours: float
    available_hours: float
    unavailable_days: int
    utilization_percentage: float
    band: UtilizationBand
    weekly_breakdown: Tuple[WeeklyUtilization, ...] = ()

    @property
    def is_over_allocated(self) -> bool:
        return self.band == UtilizationBand.OVER_ALLOCATED

    @property
    def is_under_utilized(self) -> bool:
        return self.band == UtilizationBand.UNDER_UTILIZED


@dataclass(frozen=True)
class UtilizationSummary:
    total_resources: int
    average_utilization: float
    over_allocated_count: int
    under_utilized_count: int
    total_planned_hours: float
    total_actual_hours: float
    total_available_hours: float


@dataclass(frozen=True)
class TypeUtilization:
    resource_type: ResourceType
    resource_count: int
    planned_hours: float
    actual_hours: float
    available_hours: float
    utilization_percentage: float


__all__ = [
    "OVER_ALLOCATED_THRESHOLD",
    "UNDER_UTILIZED_THRESHOLD",
    "utilization_percentage",
    "classify_utilization",
    "UtilizationFilter",
    "WeeklyUtilization",
    "UtilizationReport",
    "UtilizationSummary",
    "TypeUtilization",
]
