"""
Audit session API endpoints.

Every mutation recomputes the scores from scratch and returns the new state.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from seo_checklist.logger import logger
from seo_checklist.schemas.audit_request import (
    CreateAuditRequest,
    ToggleCheckRequest,
    UpdateAuditRequest,
    UpdateCheckRequest,
)
from seo_checklist.schemas.audit_result import AuditSessionResult, Scores
from seo_checklist.services.audit_session import AuditSession, get_session_store
from seo_checklist.services.exporters.csv_exporter import CsvExporter
from seo_checklist.services.exporters.rows import build_rows, export_filename
from seo_checklist.services.exporters.spreadsheet_exporter import SpreadsheetExporter

router = APIRouter(tags=["Audit"])

EXPORT_FORMATS = ("csv", "xlsx", "pdf")


def _get_session(audit_id: str) -> AuditSession:
    # SessionNotFoundError is mapped to 404 by the app
    return get_session_store().get(audit_id)


def _session_result(session: AuditSession) -> AuditSessionResult:
    current = session.current_category
    return AuditSessionResult(
        id=session.id,
        url=session.url,
        brand_type=session.brand_type.value,
        created_at=session.created_at,
        current_step=session.current_step,
        step_count=session.step_count,
        is_results_screen=session.is_results_screen,
        current_category=current.id if current else None,
        statuses={check_id: status.value for check_id, status in session.statuses.items()},
        notes=dict(session.notes),
        links=dict(session.links),
        scores=Scores.model_validate(session.scores()),
    )


@router.post("", response_model=AuditSessionResult)
async def start_audit(request: CreateAuditRequest):
    """Start a new checklist audit."""
    url = request.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail="URL is required")

    session = get_session_store().create(url, request.brand_type)
    return _session_result(session)


@router.get("/{audit_id}", response_model=AuditSessionResult)
async def get_audit(audit_id: str):
    """Get audit state and current scores."""
    return _session_result(_get_session(audit_id))


@router.patch("/{audit_id}", response_model=AuditSessionResult)
async def update_audit(audit_id: str, request: UpdateAuditRequest):
    """Switch the checklist variant. Answers are kept."""
    session = _get_session(audit_id)
    session.set_brand_type(request.brand_type)
    logger.info(f"Audit {audit_id} switched to {session.brand_type.value}")
    return _session_result(session)


@router.delete("/{audit_id}", status_code=204)
async def delete_audit(audit_id: str):
    get_session_store().delete(audit_id)
    return Response(status_code=204)


@router.put("/{audit_id}/checks/{check_id}", response_model=AuditSessionResult)
async def update_check(audit_id: str, check_id: str, request: UpdateCheckRequest):
    """Record a check's status, note, and link."""
    session = _get_session(audit_id)
    session.require_check(check_id)
    if "status" in request.model_fields_set:
        session.set_status(check_id, request.status)
    if request.note is not None:
        session.set_note(check_id, request.note)
    if request.link is not None:
        session.set_link(check_id, request.link)
    return _session_result(session)


@router.post("/{audit_id}/checks/{check_id}/toggle", response_model=AuditSessionResult)
async def toggle_check(audit_id: str, check_id: str, request: ToggleCheckRequest):
    """Select a status, or clear it when it is already selected."""
    session = _get_session(audit_id)
    session.toggle_status(check_id, request.status)
    return _session_result(session)


@router.post("/{audit_id}/next", response_model=AuditSessionResult)
async def next_step(audit_id: str):
    session = _get_session(audit_id)
    session.next_step()
    return _session_result(session)


@router.post("/{audit_id}/back", response_model=AuditSessionResult)
async def previous_step(audit_id: str):
    session = _get_session(audit_id)
    session.previous_step()
    return _session_result(session)


@router.get("/{audit_id}/results", response_model=Scores)
async def get_results(audit_id: str):
    """Get the full score breakdown."""
    return Scores.model_validate(_get_session(audit_id).scores())


@router.get("/{audit_id}/export/{fmt}")
async def export_audit(audit_id: str, fmt: str):
    """Download the audit as CSV, Excel, or PDF."""
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {fmt}")

    session = _get_session(audit_id)
    rows = build_rows(session.categories, session.statuses, session.notes, session.links)
    brand_type = session.brand_type.value

    if fmt == "csv":
        exporter = CsvExporter()
        content = exporter.generate(rows)
    elif fmt == "xlsx":
        exporter = SpreadsheetExporter()
        content = exporter.generate(rows, session.scores(), session.url, brand_type)
    else:
        from seo_checklist.services.exporters.pdf_generator import PdfGenerator

        exporter = PdfGenerator()
        content = exporter.generate(rows, session.scores(), session.url, brand_type)

    filename = export_filename(session.url, exporter.extension)
    logger.info(f"Exported audit {audit_id} as {fmt}")
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )
