"""
PDF Generator Service - Generate audit checklist reports.

Uses WeasyPrint to convert HTML/CSS templates into PDF.
"""

import os
from datetime import datetime
from typing import List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seo_checklist.logger import logger
from seo_checklist.services.exporters.rows import ExportRow, rows_by_priority
from seo_checklist.services.scoring.models import AuditScores


class PdfGenerator:
    """Generate PDF reports from audit data."""

    media_type = "application/pdf"
    extension = "pdf"

    def __init__(self):
        self.template_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates")
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def render_html(self, rows: List[ExportRow], scores: AuditScores, url: str, brand_type: str) -> str:
        """Render the report as an HTML string."""
        grouped = rows_by_priority(rows)
        failed_by_priority = {
            importance.label: [row for row in tier_rows if row.status == "Fail"]
            for importance, tier_rows in grouped.items()
        }

        template = self.env.get_template("audit_report.html")
        return template.render(
            url=url,
            brand_type=brand_type,
            date=datetime.now().strftime("%B %d, %Y"),
            scores=scores,
            rows=rows,
            failed_by_priority=failed_by_priority,
            css_path=os.path.join(self.template_dir, "audit_report.css").replace("\\", "/"),
        )

    def generate(self, rows: List[ExportRow], scores: AuditScores, url: str, brand_type: str) -> bytes:
        """Generate PDF bytes from audit results.

        Args:
            rows: Export rows for every check
            scores: Score breakdown
            url: The audited URL
            brand_type: Checklist variant used

        Returns:
            bytes: PDF file content
        """
        # Imported lazily, WeasyPrint needs native Pango libraries
        from weasyprint import HTML

        try:
            html_string = self.render_html(rows, scores, url, brand_type)
            pdf_bytes = HTML(string=html_string, base_url=self.template_dir).write_pdf()

            logger.info(f"Generated PDF report for {url} ({len(pdf_bytes)} bytes)")
            return pdf_bytes

        except Exception as e:
            logger.error(f"Failed to generate PDF: {e}")
            raise
