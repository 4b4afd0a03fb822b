"""
Page Analyzer - Best-effort metadata for a single page.

Assists manual judgment in the checklist; it does not crawl and its findings
are heuristics, not verdicts.

Flow:
1. URL normalization (and optional SSRF guard)
2. Main page fetch (failure ends the analysis with ``error`` set)
3. robots.txt and sitemap probes in parallel
4. Metadata, structured data, and link extraction from the HTML
"""
import asyncio
import time
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

import httpx

from seo_checklist.config import settings
from seo_checklist.logger import logger
from seo_checklist.schemas.analysis_result import (
    AnalysisResult,
    HeadingsInfo,
    MetaInfo,
    PagesInfo,
    RobotsTxtInfo,
    SitemapInfo,
    SocialInfo,
    SocialLink,
    StructuredDataInfo,
    TechnicalInfo,
)
from seo_checklist.services.collectors.links_collector import LinksCollector, LinksData
from seo_checklist.services.collectors.meta_collector import MetaCollector
from seo_checklist.services.collectors.robots_collector import RobotsCollector
from seo_checklist.services.collectors.schema_collector import SchemaCollector
from seo_checklist.services.collectors.sitemap_collector import SitemapCollector
from seo_checklist.services.ssrf_protection import SSRFProtection


class PageAnalyzer:
    """Fetches one page and sniffs SEO-relevant metadata."""

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        guard_urls: Optional[bool] = None,
    ):
        self.transport = transport
        self.guard_urls = settings.SSRF_PROTECTION_ENABLED if guard_urls is None else guard_urls
        self.meta_collector = MetaCollector()
        self.schema_collector = SchemaCollector()
        self.links_collector = LinksCollector()
        self.robots_collector = RobotsCollector()
        self.sitemap_collector = SitemapCollector()

    @staticmethod
    def normalize_url(url: str) -> str:
        """Trim and add https:// when no scheme is given."""
        url = url.strip()
        if not url.startswith(('http://', 'https://')):
            url = 'https://' + url
        return url

    async def analyze(self, url: str) -> AnalysisResult:
        """Analyze a page.

        Never raises: failures are reported through ``AnalysisResult.error``.
        """
        normalized_url = self.normalize_url(url)
        result = AnalysisResult(url=normalized_url, fetched_at=datetime.utcnow())

        try:
            if self.guard_urls:
                is_safe, reason = SSRFProtection.validate_url(normalized_url)
                if not is_safe:
                    logger.warning(f"SSRF protection blocked {normalized_url}: {reason}")
                    result.error = f"URL blocked: {reason}"
                    return result

            parsed = urlparse(normalized_url)
            base_url = f"{parsed.scheme}://{parsed.netloc}"

            async with httpx.AsyncClient(
                transport=self.transport,
                follow_redirects=True,
                timeout=settings.HTTP_TIMEOUT,
                headers={"User-Agent": settings.USER_AGENT},
            ) as client:
                logger.info(f"Analyzing {normalized_url}")

                start = time.perf_counter()
                try:
                    response = await client.get(normalized_url)
                    html = response.text
                except (httpx.HTTPError, httpx.InvalidURL) as e:
                    logger.warning(f"Failed to fetch {normalized_url}: {e}")
                    result.error = str(e) or "Failed to fetch URL"
                    return result
                finally:
                    result.technical.load_time_ms = int((time.perf_counter() - start) * 1000)

                robots_data, sitemap_data = await asyncio.gather(
                    self.robots_collector.fetch(client, base_url),
                    self.sitemap_collector.fetch(client, base_url),
                )

            if robots_data.exists:
                result.robots_txt = RobotsTxtInfo(
                    exists=True,
                    content=robots_data.content,
                    blocks_ai_crawlers=robots_data.blocks_ai_crawlers,
                )
            if sitemap_data.exists:
                result.sitemap = SitemapInfo(exists=True, url=sitemap_data.url)

            if html:
                self._apply_html(result, html)

            return result

        except Exception as e:
            logger.exception(f"Analysis failed for {normalized_url}: {e}")
            result.error = str(e) or "Analysis failed"
            return result

    def _apply_html(self, result: AnalysisResult, html: str):
        meta = self.meta_collector.collect(html)
        schema = self.schema_collector.collect(html)
        links = self.links_collector.collect(html)

        result.meta = MetaInfo(
            title=meta.title or None,
            title_length=len(meta.title) if meta.title else None,
            description=meta.description or None,
            description_length=len(meta.description) if meta.description else None,
            favicon=meta.favicon or None,
            og_tags=meta.og_tags or None,
        )
        result.headings = HeadingsInfo(h1_count=len(meta.h1_tags), h1_tags=meta.h1_tags)
        result.technical = TechnicalInfo(
            has_canonical=bool(meta.canonical),
            canonical_url=meta.canonical or None,
            has_noindex=meta.has_noindex,
            load_time_ms=result.technical.load_time_ms,
        )
        result.structured_data = StructuredDataInfo(
            has_organization=schema.has_organization,
            has_person=schema.has_person,
            has_faq=schema.has_faq,
            has_article=schema.has_article,
            has_breadcrumb=schema.has_breadcrumb,
            types=schema.types,
        )
        result.pages = PagesInfo(
            has_about=links.has_about,
            has_privacy=links.has_privacy,
            has_terms=links.has_terms,
            has_contact=links.has_contact,
        )
        result.social = self._social_info(links)

    def _social_info(self, links: LinksData) -> SocialInfo:
        return SocialInfo(
            links=[SocialLink(**link) for link in links.social_links],
            has_twitter=links.has_platform("Twitter/X"),
            has_facebook=links.has_platform("Facebook"),
            has_linkedin=links.has_platform("LinkedIn"),
            has_instagram=links.has_platform("Instagram"),
            has_youtube=links.has_platform("YouTube"),
            has_tiktok=links.has_platform("TikTok"),
            has_pinterest=links.has_platform("Pinterest"),
        )
