"""
Pydantic schemas for page analysis responses.

Every section has defaults so a failed fetch still yields a complete
response with only ``error`` set.
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request to analyze a single page."""
    url: str = Field(..., description="URL to analyze")

    class Config:
        json_schema_extra = {
            "example": {"url": "https://example.com"}
        }


class RobotsTxtInfo(BaseModel):
    exists: bool = False
    content: Optional[str] = None
    blocks_ai_crawlers: Optional[bool] = None


class SitemapInfo(BaseModel):
    exists: bool = False
    url: Optional[str] = None


class MetaInfo(BaseModel):
    title: Optional[str] = None
    title_length: Optional[int] = None
    description: Optional[str] = None
    description_length: Optional[int] = None
    favicon: Optional[str] = None
    og_tags: Optional[Dict[str, str]] = None


class HeadingsInfo(BaseModel):
    h1_count: int = 0
    h1_tags: List[str] = []


class StructuredDataInfo(BaseModel):
    has_organization: bool = False
    has_person: bool = False
    has_faq: bool = False
    has_article: bool = False
    has_breadcrumb: bool = False
    types: List[str] = []


class PagesInfo(BaseModel):
    has_about: bool = False
    has_privacy: bool = False
    has_terms: bool = False
    has_contact: bool = False


class SocialLink(BaseModel):
    platform: str
    url: str


class SocialInfo(BaseModel):
    links: List[SocialLink] = []
    has_twitter: bool = False
    has_facebook: bool = False
    has_linkedin: bool = False
    has_instagram: bool = False
    has_youtube: bool = False
    has_tiktok: bool = False
    has_pinterest: bool = False


class TechnicalInfo(BaseModel):
    has_canonical: bool = False
    canonical_url: Optional[str] = None
    has_noindex: bool = False
    load_time_ms: Optional[int] = None


class AnalysisResult(BaseModel):
    """Best-effort metadata for a single page. Not authoritative."""
    url: str
    fetched_at: datetime
    robots_txt: RobotsTxtInfo = Field(default_factory=RobotsTxtInfo)
    sitemap: SitemapInfo = Field(default_factory=SitemapInfo)
    meta: MetaInfo = Field(default_factory=MetaInfo)
    headings: HeadingsInfo = Field(default_factory=HeadingsInfo)
    structured_data: StructuredDataInfo = Field(default_factory=StructuredDataInfo)
    pages: PagesInfo = Field(default_factory=PagesInfo)
    social: SocialInfo = Field(default_factory=SocialInfo)
    technical: TechnicalInfo = Field(default_factory=TechnicalInfo)
    error: Optional[str] = None
