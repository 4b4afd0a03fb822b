"""
CSV Exporter - Flat CSV with every check.
"""
import csv
import io
from typing import Iterable

from seo_checklist.services.exporters.rows import HEADER, ExportRow


class CsvExporter:
    """Render export rows as CSV."""

    media_type = "text/csv; charset=utf-8"
    extension = "csv"

    def generate(self, rows: Iterable[ExportRow]) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(HEADER)
        for row in rows:
            writer.writerow(row.as_list())
        return buffer.getvalue().encode("utf-8")
