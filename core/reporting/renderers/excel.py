from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.reporting.contexts import UtilizationExportContext


class UtilizationExcelRenderer:
    def render(self, ctx: UtilizationExportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        over_fill = PatternFill("solid", fgColor="F8CBAD")
        under_fill = PatternFill("solid", fgColor="FFF2CC")

        def header_row(ws, headers):
            for c, h in enumerate(headers, start=1):
                cell = ws.cell(1, c, h)
                cell.font = header_font
                cell.fill = header_fill
                cell.alignment = center
                cell.border = thin_border

        # ---------------- Summary ----------------
        ws = wb.active
        ws.title = "Summary"
        ws["A1"] = "Resource utilization"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        s = ctx.summary
        kv("Period from", ctx.date_from.isoformat())
        kv("Period to", ctx.date_to.isoformat())
        row += 1
        kv("Resources", s.total_resources)
        kv("Average utilization (%)", round(s.average_utilization, 2))
        kv("Over-allocated", s.over_allocated_count)
        kv("Under-utilized", s.under_utilized_count)
        row += 1
        kv("Planned hours", s.total_planned_hours)
        kv("Actual hours", s.total_actual_hours)
        kv("Available hours", s.total_available_hours)

        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 18

        # ---------------- Resources ----------------
        ws_res = wb.create_sheet("Resources")
        header_row(ws_res, [
            "Code", "Name", "Type", "Hours/day", "Planned (h)", "Actual (h)",
            "Available (h)", "Unavailable days", "Utilization (%)", "Status",
        ])
        for r, rep in enumerate(ctx.reports, start=2):
            values = [
                rep.resource_code,
                rep.resource_name,
                rep.resource_type.value,
                rep.standard_hours_per_day,
                rep.planned_hours,
                rep.actual_hours,
                rep.available_hours,
                rep.unavailable_days,
                round(rep.utilization_percentage, 2),
                rep.band.value.replace("_", " "),
            ]
            for c, v in enumerate(values, 1):
                cell = ws_res.cell(r, c, v)
                cell.border = thin_border
            if rep.is_over_allocated:
                ws_res.cell(r, 9).fill = over_fill
            elif rep.is_under_utilized:
                ws_res.cell(r, 9).fill = under_fill

        ws_res.column_dimensions["A"].width = 16
        ws_res.column_dimensions["B"].width = 28
        for col_letter in ("C", "D", "E", "F", "G", "H", "I", "J"):
            ws_res.column_dimensions[col_letter].width = 15

        # ---------------- By type ----------------
        ws_type = wb.create_sheet("By type")
        header_row(ws_type, ["Type", "Resources", "Planned (h)", "Actual (h)", "Available (h)", "Utilization (%)"])
        for r, agg in enumerate(ctx.by_type, start=2):
            values = [
                agg.resource_type.value,
                agg.resource_count,
                agg.planned_hours,
                agg.actual_hours,
                agg.available_hours,
                round(agg.utilization_percentage, 2),
            ]
            for c, v in enumerate(values, 1):
                ws_type.cell(r, c, v).border = thin_border

        for col_letter in ("A", "B", "C", "D", "E", "F"):
            ws_type.column_dimensions[col_letter].width = 16

        # ---------------- Weekly ----------------
        ws_week = wb.create_sheet("Weekly")
        header_row(ws_week, ["Code", "Week of", "Planned (h)", "Actual (h)", "Available (h)", "Utilization (%)"])
        r = 2
        for rep in ctx.reports:
            for week in rep.weekly_breakdown:
                values = [
                    rep.resource_code,
                    week.week_start.isoformat(),
                    round(week.planned_hours, 2),
                    round(week.actual_hours, 2),
                    week.available_hours,
                    round(week.utilization_percentage, 2),
                ]
                for c, v in enumerate(values, 1):
                    ws_week.cell(r, c, v).border = thin_border
                r += 1

        for col_letter in ("A", "B", "C", "D", "E", "F"):
            ws_week.column_dimensions[col_letter].width = 16

        wb.save(output_path)
        return output_path
