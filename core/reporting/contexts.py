from dataclasses import dataclass
from datetime import date
from typing import List

from core.services.utilization import TypeUtilization, UtilizationReport, UtilizationSummary


@dataclass
class UtilizationExportContext:
    date_from: date
    date_to: date
    reports: List[UtilizationReport]
    summary: UtilizationSummary
    by_type: List[TypeUtilization]
