from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from core.models import UtilizationBand  # noqa: E402
from core.services.utilization import (  # noqa: E402
    OVER_ALLOCATED_THRESHOLD,
    UNDER_UTILIZED_THRESHOLD,
    UtilizationReport,
)

_BAND_COLORS = {
    UtilizationBand.OVER_ALLOCATED: "#d9534f",
    UtilizationBand.UNDER_UTILIZED: "#f0ad4e",
    UtilizationBand.NORMAL: "#5cb85c",
}


class UtilizationChartRenderer:
    def render(self, reports: List[UtilizationReport], output_path: Path) -> Path:
        if not reports:
            raise ValueError("No utilization rows to chart")
        output_path.parent.mkdir(parents=True, exist_ok=True)

        labels = [r.resource_code for r in reports]
        values = [r.utilization_percentage for r in reports]
        colors = [_BAND_COLORS[r.band] for r in reports]

        fig, ax = plt.subplots(figsize=(max(6, 0.6 * len(reports) + 2), 4))
        ax.bar(range(len(reports)), values, color=colors)
        ax.axhline(OVER_ALLOCATED_THRESHOLD, color="#d9534f", linestyle="--", linewidth=0.8, label="Over-allocated")
        ax.axhline(UNDER_UTILIZED_THRESHOLD, color="#f0ad4e", linestyle="--", linewidth=0.8, label="Under-utilized")
        ax.set_xticks(range(len(reports)))
        ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=8)
        ax.set_ylabel("Utilization (%)")
        ax.set_ylim(0, max(max(values), OVER_ALLOCATED_THRESHOLD) * 1.1)
        ax.legend(loc="upper right", fontsize=8)
        ax.grid(True, axis="y", linestyle=":", linewidth=0.6)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
