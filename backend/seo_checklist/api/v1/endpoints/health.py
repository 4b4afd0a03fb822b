"""
Health check endpoint.
"""

from fastapi import APIRouter

from seo_checklist.services.audit_session import get_session_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Health check with in-memory session count."""
    return {
        "status": "ok",
        "active_sessions": len(get_session_store().list_ids())
    }
