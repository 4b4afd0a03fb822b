"""
Category composition for each brand type.

Brand-specific categories come first, followed by the base categories shared
by every audit.
"""
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from seo_checklist.services.registry.checks import (
    AI_SEARCH_CHECKS,
    AUTHORITY_CHECKS,
    ECOMMERCE_COLLECTION_CHECKS,
    ECOMMERCE_PRODUCT_CHECKS,
    EEAT_CHECKS,
    INTERNATIONAL_CHECKS,
    LOCAL_GBP_CHECKS,
    LOCAL_LANDING_CHECKS,
    ON_PAGE_CHECKS,
    PERFORMANCE_CHECKS,
    SOCIAL_SEARCH_CHECKS,
    TECHNICAL_CHECKS,
)
from seo_checklist.services.registry.models import BrandType, Category, Check


BASE_CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="authority",
        name="Authority",
        description="Backlink profile, domain strength, brand mentions, and trust signals",
        weight=20,
        checks=AUTHORITY_CHECKS,
    ),
    Category(
        id="on-page",
        name="On-Page",
        description="Title tags, meta descriptions, headings, keyword optimisation, and content structure",
        weight=15,
        checks=ON_PAGE_CHECKS,
    ),
    Category(
        id="technical",
        name="Technical",
        description="Crawlability, indexability, site architecture, and technical health",
        weight=15,
        checks=TECHNICAL_CHECKS,
    ),
    Category(
        id="eeat",
        name="EEAT",
        description="Experience, Expertise, Authoritativeness, and Trustworthiness signals",
        weight=15,
        checks=EEAT_CHECKS,
    ),
    Category(
        id="social-search",
        name="Social Search",
        description="Discoverability on TikTok, YouTube, Instagram, and social platforms",
        weight=15,
        checks=SOCIAL_SEARCH_CHECKS,
    ),
    Category(
        id="ai-search",
        name="AI Search",
        description="Optimisation for AI Overviews, SGE, ChatGPT, Perplexity, and LLM visibility",
        weight=10,
        checks=AI_SEARCH_CHECKS,
    ),
    Category(
        id="performance",
        name="Performance",
        description="Page speed, Core Web Vitals (LCP, INP, CLS), and loading optimisation",
        weight=10,
        checks=PERFORMANCE_CHECKS,
    ),
)

ECOMMERCE_CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="ecommerce-collection",
        name="Collection Pages",
        description="Product carousels, filters, FAQs, and collection page optimisation",
        weight=10,
        checks=ECOMMERCE_COLLECTION_CHECKS,
    ),
    Category(
        id="ecommerce-product",
        name="Product Pages",
        description="Pricing, stock, schema, reviews, and product page optimisation",
        weight=10,
        checks=ECOMMERCE_PRODUCT_CHECKS,
    ),
)

LOCAL_CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="local-gbp",
        name="Google Business Profile",
        description="GBP verification, NAP details, categories, photos, and reviews",
        weight=10,
        checks=LOCAL_GBP_CHECKS,
    ),
    Category(
        id="local-landing",
        name="Landing Pages",
        description="Local SEO, NAP integration, maps, and location page optimisation",
        weight=10,
        checks=LOCAL_LANDING_CHECKS,
    ),
)

INTERNATIONAL_CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="international",
        name="International",
        description="Hreflang implementation, content differentiation, and multi-region setup",
        weight=10,
        checks=INTERNATIONAL_CHECKS,
    ),
)

_BRAND_CATEGORIES: Dict[BrandType, Tuple[Category, ...]] = {
    BrandType.GENERAL: (),
    BrandType.ECOMMERCE: ECOMMERCE_CATEGORIES,
    BrandType.LOCAL: LOCAL_CATEGORIES,
    BrandType.INTERNATIONAL: INTERNATIONAL_CATEGORIES,
}


def categories_for_brand_type(brand_type: Union[BrandType, str, None]) -> Tuple[Category, ...]:
    """Get the ordered categories audited for a brand type."""
    return _BRAND_CATEGORIES[BrandType.parse(brand_type)] + BASE_CATEGORIES


def all_checks(categories: Iterable[Category]) -> Iterator[Check]:
    for category in categories:
        yield from category.checks


def find_check(check_id: str, categories: Iterable[Category]) -> Optional[Check]:
    for check in all_checks(categories):
        if check.id == check_id:
            return check
    return None


# --- Validation (Prevent Drift) ---
def _validate_catalogue():
    """Ensure check ids are unique across the whole catalogue."""
    seen = set()
    every_category = BASE_CATEGORIES + ECOMMERCE_CATEGORIES + LOCAL_CATEGORIES + INTERNATIONAL_CATEGORIES
    for check in all_checks(every_category):
        if check.id in seen:
            raise ValueError(f"CRITICAL: Duplicate check id {check.id!r} in catalogue")
        seen.add(check.id)

_validate_catalogue()
