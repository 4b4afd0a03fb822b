"""
Links Collector - Trust pages and social profiles linked from a page.
"""
from dataclasses import dataclass, field
from typing import Dict, List
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from seo_checklist.logger import logger


# Platform -> domains that identify it
SOCIAL_PLATFORMS: Dict[str, List[str]] = {
    "Twitter/X": ["twitter.com", "x.com"],
    "Facebook": ["facebook.com"],
    "LinkedIn": ["linkedin.com"],
    "Instagram": ["instagram.com"],
    "YouTube": ["youtube.com"],
    "TikTok": ["tiktok.com"],
    "Pinterest": ["pinterest.com"],
}


@dataclass
class LinksData:
    """Trust page and social link signals."""
    has_about: bool = False
    has_privacy: bool = False
    has_terms: bool = False
    has_contact: bool = False
    social_links: List[Dict[str, str]] = field(default_factory=list)

    def has_platform(self, platform: str) -> bool:
        return any(link["platform"] == platform for link in self.social_links)


def _platform_for(href: str):
    host = (urlparse(href).hostname or "").lower()
    for platform, domains in SOCIAL_PLATFORMS.items():
        if any(host == domain or host.endswith("." + domain) for domain in domains):
            return platform
    return None


class LinksCollector:
    """Collects trust page and social profile links."""

    def collect(self, html: str) -> LinksData:
        data = LinksData()
        try:
            soup = BeautifulSoup(html, 'html.parser')
            hrefs = [a['href'].strip() for a in soup.find_all('a', href=True)]
        except Exception as e:
            logger.error(f"LinksCollector error: {e}")
            return data

        paths = [h.lower() for h in hrefs]
        text = html.lower()

        def linked(fragment: str) -> bool:
            return any(fragment in path for path in paths)

        data.has_about = linked('/about') or 'about us' in text or 'about-us' in text
        data.has_privacy = linked('/privacy') or 'privacy policy' in text
        data.has_terms = linked('/terms') or (
            'terms' in text and ('conditions' in text or 'service' in text)
        )
        data.has_contact = linked('/contact') or 'contact us' in text

        seen = set()
        for href in hrefs:
            platform = _platform_for(href)
            if platform and href not in seen:
                seen.add(href)
                data.social_links.append({"platform": platform, "url": href})

        return data
