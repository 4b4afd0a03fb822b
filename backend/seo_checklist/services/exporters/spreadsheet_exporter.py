"""
Spreadsheet Exporter - Excel workbook with a sheet per priority.

Sheets:
- Summary: URL, overall score, and category scores
- Critical / High / Medium / Low: checks of that priority (empty tiers skipped)
"""
import io
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from seo_checklist.logger import logger
from seo_checklist.services.exporters.rows import HEADER, ExportRow, rows_by_priority
from seo_checklist.services.scoring.models import AuditScores

# Column widths (characters), same order as HEADER
COLUMN_WIDTHS = [25, 12, 30, 60, 15, 40, 40]


class SpreadsheetExporter:
    """Render an audit as an .xlsx workbook."""

    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    extension = "xlsx"

    def generate(self, rows: List[ExportRow], scores: AuditScores, url: str, brand_type: str) -> bytes:
        workbook = Workbook()
        self._write_summary(workbook.active, scores, url, brand_type)

        for importance, tier_rows in rows_by_priority(rows).items():
            if not tier_rows:
                continue
            sheet = workbook.create_sheet(title=importance.label)
            _append_text(sheet, HEADER)
            for row in tier_rows:
                _append_text(sheet, row.as_list())
            self._style_header(sheet)
            for index, width in enumerate(COLUMN_WIDTHS, start=1):
                sheet.column_dimensions[get_column_letter(index)].width = width

        buffer = io.BytesIO()
        workbook.save(buffer)
        logger.info(f"Generated spreadsheet for {url} ({len(rows)} checks)")
        return buffer.getvalue()

    def _write_summary(self, sheet, scores: AuditScores, url: str, brand_type: str):
        sheet.title = "Summary"
        _append_text(sheet, ["URL", url])
        _append_text(sheet, ["Brand Type", brand_type])
        sheet.append(["Overall Score", _score_cell(scores.overall)])
        sheet.append(["Rating", scores.rating.label if scores.rating else "Not Scored"])
        sheet.append(["Checks Answered", f"{scores.answered}/{scores.total_checks}"])
        sheet.append([])
        sheet.append(["Category", "Weight", "Score", "Rating", "Passed", "Failed"])
        header_row = sheet.max_row
        for category in scores.categories:
            _append_text(sheet, [
                category.name,
                category.weight,
                _score_cell(category.score),
                category.rating.label if category.rating else "Not Scored",
                category.passed,
                category.failed,
            ])
        for cell in sheet[header_row]:
            cell.font = Font(bold=True)
        for row in range(1, 6):
            sheet.cell(row=row, column=1).font = Font(bold=True)
        sheet.column_dimensions["A"].width = 25
        sheet.column_dimensions["B"].width = 40

    def _style_header(self, sheet):
        for cell in sheet[1]:
            cell.font = Font(bold=True)
        sheet.freeze_panes = "A2"


def _score_cell(score):
    return score if score is not None else "-"


def _append_text(sheet, values):
    """Append a row with every string stored as text, never as a formula."""
    sheet.append(values)
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str):
            cell.data_type = "s"
