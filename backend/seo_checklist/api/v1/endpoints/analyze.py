"""
Page analysis endpoint.
"""
from fastapi import APIRouter, HTTPException

from seo_checklist.logger import logger
from seo_checklist.schemas.analysis_result import AnalysisResult, AnalyzeRequest
from seo_checklist.services.page_analyzer import PageAnalyzer

router = APIRouter(tags=["Analyze"])


@router.post("", response_model=AnalysisResult)
async def analyze_page(request: AnalyzeRequest):
    """Fetch a page and report best-effort SEO metadata.

    Fetch failures are reported in the ``error`` field, not as HTTP errors.
    """
    if not request.url.strip():
        raise HTTPException(status_code=400, detail="URL is required")

    analyzer = PageAnalyzer()
    result = await analyzer.analyze(request.url)

    if result.error:
        logger.info(f"Analysis of {result.url} finished with error: {result.error}")
    return result
