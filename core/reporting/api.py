"""Reporting API wrappers around renderer classes."""

from datetime import date
from pathlib import Path
from typing import Sequence

from core.exceptions import BusinessRuleError
from core.reporting.contexts import UtilizationExportContext
from core.reporting.renderers.chart import UtilizationChartRenderer
from core.reporting.renderers.excel import UtilizationExcelRenderer
from core.services.calendar.intervals import make_range
from core.services.utilization import UtilizationReport, aggregate_by_type, summarize


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_utilization_excel(
    reports: Sequence[UtilizationReport],
    output_path: str | Path,
    date_from: date | str,
    date_to: date | str,
) -> Path:
    window = make_range(date_from, date_to)
    reports = list(reports)
    ctx = UtilizationExportContext(
        date_from=window.start,
        date_to=window.end,
        reports=reports,
        summary=summarize(reports),
        by_type=aggregate_by_type(reports),
    )
    return UtilizationExcelRenderer().render(ctx, _ensure_parent(Path(output_path)))


def export_utilization_chart(reports: Sequence[UtilizationReport], output_path: str | Path) -> Path:
    reports = list(reports)
    if not reports:
        raise BusinessRuleError("There are no utilization rows to chart.", code="NO_UTILIZATION_ROWS")
    return UtilizationChartRenderer().render(reports, _ensure_parent(Path(output_path)))


__all__ = ["export_utilization_excel", "export_utilization_chart"]
