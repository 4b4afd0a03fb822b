"""
Checklist catalogue and rating endpoints.
"""
from fastapi import APIRouter, Path

from seo_checklist.schemas.audit_request import BrandTypeName
from seo_checklist.schemas.audit_result import CategoryItem, CheckItem, Checklist, Rating
from seo_checklist.services.registry.categories import categories_for_brand_type
from seo_checklist.services.scoring.engine import rating_for

router = APIRouter(tags=["Checklist"])


@router.get("/checklist", response_model=Checklist)
async def get_checklist(brand_type: BrandTypeName = "general"):
    """Get the ordered categories and checks audited for a brand type."""
    categories = categories_for_brand_type(brand_type)
    return Checklist(
        brand_type=brand_type,
        categories=[
            CategoryItem(
                id=category.id,
                name=category.name,
                description=category.description,
                weight=category.weight,
                checks=[
                    CheckItem(
                        id=check.id,
                        name=check.name,
                        description=check.description,
                        importance=check.importance.value,
                    )
                    for check in category.checks
                ],
            )
            for category in categories
        ],
    )


@router.get("/rating/{score}", response_model=Rating)
async def get_rating(score: int = Path(..., ge=0, le=100)):
    """Get the qualitative rating for a score."""
    return Rating.model_validate(rating_for(score))
