"""
Schema Collector - Extract schema.org types from JSON-LD.

Types are collected from every JSON-LD block, including @graph arrays and
nested objects (e.g. an Article's author Person).
"""

import json
from dataclasses import dataclass, field
from typing import Any, List
from bs4 import BeautifulSoup

from seo_checklist.logger import logger


@dataclass
class SchemaData:
    """Structured data types found on a page."""
    types: List[str] = field(default_factory=list)

    def _has(self, schema_type: str) -> bool:
        return any(t.lower() == schema_type for t in self.types)

    @property
    def has_organization(self) -> bool:
        return self._has("organization")

    @property
    def has_person(self) -> bool:
        return self._has("person")

    @property
    def has_faq(self) -> bool:
        return self._has("faqpage")

    @property
    def has_article(self) -> bool:
        return any("article" in t.lower() for t in self.types)

    @property
    def has_breadcrumb(self) -> bool:
        return self._has("breadcrumblist")


class SchemaCollector:
    """Collector for JSON-LD structured data."""

    def collect(self, html: str) -> SchemaData:
        """Extract all schema types from HTML.

        Args:
            html: HTML content

        Returns:
            SchemaData with unique types in document order
        """
        schema_data = SchemaData()
        try:
            soup = BeautifulSoup(html, 'html.parser')
            scripts = soup.find_all('script', type='application/ld+json')
        except Exception as e:
            logger.error(f"Schema extraction failed: {e}")
            return schema_data

        for script in scripts:
            if not script.string:
                continue
            try:
                data = json.loads(script.string)
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid JSON-LD: {e}")
                continue

            for schema_type in self._walk_types(data):
                if schema_type not in schema_data.types:
                    schema_data.types.append(schema_type)

        logger.debug(f"Found schema types: {schema_data.types}")
        return schema_data

    def _walk_types(self, node: Any):
        if isinstance(node, list):
            for item in node:
                yield from self._walk_types(item)
        elif isinstance(node, dict):
            schema_type = node.get("@type")
            if isinstance(schema_type, str):
                yield schema_type
            elif isinstance(schema_type, list):
                yield from (t for t in schema_type if isinstance(t, str))
            for key, value in node.items():
                if key != "@type":
                    yield from self._walk_types(value)
