"""
Export rows - Flatten the checklist and its answers into tabular rows.
"""
import re
from dataclasses import dataclass, astuple
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional

from seo_checklist.services.registry.models import Category, Importance
from seo_checklist.services.scoring.engine import StatusMap
from seo_checklist.services.scoring.models import CheckStatus


HEADER = ["Category", "Priority", "Check Name", "Description", "Status", "Notes", "Link"]


@dataclass
class ExportRow:
    """One check as it appears in an export."""
    category: str
    priority: str
    check_name: str
    description: str
    status: str
    notes: str = ""
    link: str = ""

    def as_list(self) -> List[str]:
        return list(astuple(self))


def build_rows(
    categories: Iterable[Category],
    statuses: StatusMap,
    notes: Optional[Mapping[str, str]] = None,
    links: Optional[Mapping[str, str]] = None,
) -> List[ExportRow]:
    """Build one row per check, in display order."""
    notes = notes or {}
    links = links or {}
    rows = []
    for category in categories:
        for check in category.checks:
            rows.append(ExportRow(
                category=category.name,
                priority=check.importance.label,
                check_name=check.name,
                description=check.description,
                status=CheckStatus.coerce(statuses.get(check.id)).label,
                notes=notes.get(check.id, ""),
                link=links.get(check.id, ""),
            ))
    return rows


def rows_by_priority(rows: Iterable[ExportRow]) -> Dict[Importance, List[ExportRow]]:
    """Group rows by priority, most important first."""
    grouped: Dict[Importance, List[ExportRow]] = {importance: [] for importance in Importance}
    for row in rows:
        grouped[Importance(row.priority.lower())].append(row)
    return grouped


def export_filename(url: str, extension: str, today: Optional[date] = None) -> str:
    """e.g. seo-audit-example-com-2024-01-31.csv"""
    today = today or date.today()
    if url:
        slug = re.sub(r"[^a-zA-Z0-9]", "-", re.sub(r"^https?://", "", url))
    else:
        slug = "audit"
    return f"seo-audit-{slug}-{today.isoformat()}.{extension}"
