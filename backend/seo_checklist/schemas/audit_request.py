"""
Pydantic schemas for audit session requests.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field


BrandTypeName = Literal["general", "ecommerce", "local", "international"]


class CreateAuditRequest(BaseModel):
    """Request to start a checklist audit."""
    url: str = Field(..., description="URL being audited")
    brand_type: BrandTypeName = Field("general", description="Checklist variant")

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com",
                "brand_type": "ecommerce"
            }
        }


class UpdateAuditRequest(BaseModel):
    """Switch the checklist variant of an audit."""
    brand_type: BrandTypeName


class UpdateCheckRequest(BaseModel):
    """Record a judgment and optional annotations for one check.

    ``status`` of null or "unanswered" clears the judgment. Omitted fields
    are left unchanged; an empty note or link removes it.
    """
    status: Optional[Literal["pass", "fail", "unanswered"]] = None
    note: Optional[str] = None
    link: Optional[str] = None


class ToggleCheckRequest(BaseModel):
    """Select a status, or clear it if it is already selected."""
    status: Literal["pass", "fail"]
