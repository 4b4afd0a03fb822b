"""
Pydantic schemas for audit session responses.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class Rating(BaseModel):
    """Qualitative rating with presentation color roles."""
    label: str
    color_role: str
    background_role: str

    class Config:
        from_attributes = True


class CategoryScore(BaseModel):
    """Score breakdown for one category."""
    id: str
    name: str
    weight: float
    score: Optional[int] = Field(None, ge=0, le=100)
    rating: Optional[Rating] = None
    total_checks: int
    answered: int
    passed: int
    failed: int

    class Config:
        from_attributes = True


class Scores(BaseModel):
    """Complete score breakdown. ``overall`` is None until a category is scored."""
    overall: Optional[int] = Field(None, ge=0, le=100)
    rating: Optional[Rating] = None
    categories: List[CategoryScore] = []
    passed: int = 0
    failed: int = 0
    answered: int = 0
    total_checks: int = 0
    failed_by_priority: Dict[str, int] = {}
    scoring_version: str = ""

    class Config:
        from_attributes = True


class AuditSessionResult(BaseModel):
    """Wizard state of an audit with freshly computed scores."""
    id: str
    url: str
    brand_type: str
    created_at: datetime
    current_step: int
    step_count: int
    is_results_screen: bool
    current_category: Optional[str] = None
    statuses: Dict[str, Literal["pass", "fail"]] = {}
    notes: Dict[str, str] = {}
    links: Dict[str, str] = {}
    scores: Scores

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b8f7c1e-3f7a-4a39-9d51-3c2f1c0f5d2a",
                "url": "https://example.com",
                "brand_type": "general",
                "created_at": "2024-01-01T12:00:00Z",
                "current_step": 1,
                "step_count": 7,
                "is_results_screen": False,
                "current_category": "on-page",
                "statuses": {"dr-growth": "pass", "spam-score": "fail"},
                "scores": {"overall": 67, "rating": {"label": "Good", "color_role": "success", "background_role": "success-light"}}
            }
        }


class CheckItem(BaseModel):
    id: str
    name: str
    description: str
    importance: Literal["critical", "high", "medium", "low"]


class CategoryItem(BaseModel):
    id: str
    name: str
    description: str
    weight: float
    checks: List[CheckItem]


class Checklist(BaseModel):
    """Categories and checks for a brand type."""
    brand_type: str
    categories: List[CategoryItem]
