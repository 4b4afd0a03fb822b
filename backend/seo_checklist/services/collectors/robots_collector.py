"""
Robots.txt Collector - Fetch and parse robots.txt.
"""
import httpx
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

from seo_checklist.config import settings
from seo_checklist.logger import logger


# Crawlers used by AI assistants and LLM training pipelines
AI_CRAWLERS = [
    "GPTBot",
    "ChatGPT-User",
    "CCBot",
    "anthropic-ai",
    "Claude-Web",
    "Bytespider",
    "Diffbot",
    "PerplexityBot",
]


@dataclass
class RobotsData:
    """Parsed robots.txt data."""
    exists: bool = False
    content: str = ""
    allows_all: bool = True
    disallowed_bots: List[str] = field(default_factory=list)
    sitemaps: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def blocks_ai_crawlers(self) -> bool:
        """True if any AI crawler, or every crawler, is disallowed from the whole site."""
        if not self.allows_all:
            return True
        blocked = {bot.lower() for bot in self.disallowed_bots}
        return any(crawler.lower() in blocked for crawler in AI_CRAWLERS)


class RobotsCollector:
    """Fetches and parses robots.txt."""

    async def fetch(self, client: httpx.AsyncClient, base_url: str) -> RobotsData:
        """Fetch robots.txt from the domain."""
        robots_url = urljoin(base_url, '/robots.txt')

        try:
            response = await client.get(robots_url, timeout=settings.AUX_TIMEOUT)
            if response.is_success:
                return self.parse(response.text)
            return RobotsData(exists=False)

        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch robots.txt: {e}")
            return RobotsData(exists=False, error=str(e))

    def parse(self, content: str) -> RobotsData:
        """Parse robots.txt content into user-agent groups."""
        data = RobotsData(exists=True, content=content[:settings.ROBOTS_CONTENT_LIMIT])

        groups = []
        current = {'agents': [], 'rules': []}

        for line in content.splitlines():
            line = line.split('#', 1)[0].strip()
            if not line or ':' not in line:
                continue

            key, value = line.split(':', 1)
            key = key.strip().lower()
            value = value.strip()

            if key == 'user-agent':
                # A user-agent after rules starts a new group
                if current['rules']:
                    groups.append(current)
                    current = {'agents': [], 'rules': []}
                current['agents'].append(value)
            elif key in ('disallow', 'allow'):
                current['rules'].append((key, value))
            elif key == 'sitemap':
                data.sitemaps.append(value)

        if current['agents']:
            groups.append(current)

        for group in groups:
            if not any(rule == ('disallow', '/') for rule in group['rules']):
                continue
            for agent in group['agents']:
                if agent == '*':
                    data.allows_all = False
                elif agent not in data.disallowed_bots:
                    data.disallowed_bots.append(agent)

        return data
