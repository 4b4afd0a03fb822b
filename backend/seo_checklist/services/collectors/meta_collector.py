"""
Meta Collector - Extract meta tags, headings, and indexing hints from HTML.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List
from bs4 import BeautifulSoup

from seo_checklist.logger import logger


@dataclass
class MetaData:
    """Extracted metadata from a page."""
    title: str = ""
    description: str = ""
    favicon: str = ""
    og_tags: Dict[str, str] = field(default_factory=dict)
    h1_tags: List[str] = field(default_factory=list)
    canonical: str = ""
    has_noindex: bool = False


def _has_rel(tag, *values: str) -> bool:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    rel = [r.lower() for r in rel]
    return any(value in rel for value in values)


class MetaCollector:
    """Collects metadata from HTML content."""

    def collect(self, html: str) -> MetaData:
        """Extract metadata from HTML."""
        try:
            soup = BeautifulSoup(html, 'html.parser')
            data = MetaData()

            # Title
            title_tag = soup.find('title')
            if title_tag:
                data.title = title_tag.get_text(strip=True)

            # Meta description
            desc_tag = soup.find('meta', attrs={'name': re.compile(r'^description$', re.I)})
            if desc_tag:
                data.description = (desc_tag.get('content') or '').strip()

            # Favicon
            for link in soup.find_all('link', href=True):
                if _has_rel(link, 'icon'):
                    data.favicon = link['href']
                    break

            # OpenGraph
            for og in soup.find_all('meta', property=re.compile(r'^og:')):
                prop = og.get('property', '')[len('og:'):]
                data.og_tags[prop] = og.get('content', '')

            # Headings
            data.h1_tags = [h.get_text(strip=True) for h in soup.find_all('h1')]

            # Canonical
            for link in soup.find_all('link', href=True):
                if _has_rel(link, 'canonical'):
                    data.canonical = link['href']
                    break

            # Robots meta
            robots_tag = soup.find('meta', attrs={'name': re.compile(r'^robots$', re.I)})
            if robots_tag:
                data.has_noindex = 'noindex' in (robots_tag.get('content') or '').lower()

            return data

        except Exception as e:
            logger.error(f"MetaCollector error: {e}")
            return MetaData()
