"""
Sitemap Collector - Detect a sitemap at its common locations.
"""

import httpx
from typing import Optional
from dataclasses import dataclass
from urllib.parse import urljoin

from seo_checklist.config import settings
from seo_checklist.logger import logger


@dataclass
class SitemapData:
    """Sitemap detection result."""
    exists: bool = False
    url: Optional[str] = None


class SitemapCollector:
    """Collector for sitemap.xml."""

    COMMON_PATHS = [
        "/sitemap.xml",
        "/sitemap_index.xml",
        "/sitemap/sitemap.xml",
    ]

    async def fetch(self, client: httpx.AsyncClient, base_url: str) -> SitemapData:
        """Return the first common sitemap location answering a HEAD request."""
        for path in self.COMMON_PATHS:
            sitemap_url = urljoin(base_url, path)
            if await self._exists(client, sitemap_url):
                return SitemapData(exists=True, url=sitemap_url)

        return SitemapData(exists=False)

    async def _exists(self, client: httpx.AsyncClient, url: str) -> bool:
        try:
            response = await client.head(url, timeout=settings.AUX_TIMEOUT)
            return response.is_success
        except httpx.HTTPError as e:
            logger.debug(f"Sitemap probe failed for {url}: {e}")
            return False
