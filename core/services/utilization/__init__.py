from .aggregates import aggregate_by_type, sort_reports, summarize
from .models import (
    OVER_ALLOCATED_THRESHOLD,
    UNDER_UTILIZED_THRESHOLD,
    TypeUtilization,
    UtilizationFilter,
    UtilizationReport,
    UtilizationSummary,
    WeeklyUtilization,
    classify_utilization,
    utilization_percentage,
)
from .service import UtilizationService

__all__ = [
    "UtilizationService",
    "UtilizationFilter",
    "UtilizationReport",
    "UtilizationSummary",
    "WeeklyUtilization",
    "TypeUtilization",
    "OVER_ALLOCATED_THRESHOLD",
    "UNDER_UTILIZED_THRESHOLD",
    "classify_utilization",
    "utilization_percentage",
    "summarize",
    "aggregate_by_type",
    "sort_reports",
]
