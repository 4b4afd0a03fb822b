"""
SEO Audit Checklist - FastAPI Application Entry Point

Mounts the checklist, audit session, and page analyzer routers under /api/v1.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from seo_checklist.config import settings
from seo_checklist.api.v1.endpoints import analyze, audit, checklist, health
from seo_checklist.logger import logger
from seo_checklist.services.audit_session import SessionNotFoundError, UnknownCheckError

API_VERSION = "1.0.0"

app = FastAPI(
    title=settings.APP_NAME,
    description="Interactive SEO audit checklist with weighted scoring, exports, and a best-effort page analyzer",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api/v1")
app.include_router(checklist.router, prefix="/api/v1")
app.include_router(audit.router, prefix="/api/v1/audit")
app.include_router(analyze.router, prefix="/api/v1/analyze")


@app.exception_handler(SessionNotFoundError)
async def session_not_found(request: Request, exc: SessionNotFoundError):
    logger.info(f"Unknown audit requested: {request.url.path}")
    return JSONResponse(status_code=404, content={"detail": "Audit not found"})


@app.exception_handler(UnknownCheckError)
async def unknown_check(request: Request, exc: UnknownCheckError):
    return JSONResponse(
        status_code=404,
        content={"detail": f"Check {exc.args[0]} is not part of this audit"},
    )


@app.on_event("startup")
async def startup():
    logger.info(f"Starting {settings.APP_NAME} v{API_VERSION} (SSRF protection: {settings.SSRF_PROTECTION_ENABLED})")


@app.get("/")
async def root():
    """Service info."""
    return {
        "app": settings.APP_NAME,
        "version": API_VERSION,
        "docs": "/docs"
    }
