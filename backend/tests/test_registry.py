"""
Unit tests for the checklist registry.
"""
import pytest

from seo_checklist.services.registry.categories import (
    BASE_CATEGORIES,
    ECOMMERCE_CATEGORIES,
    INTERNATIONAL_CATEGORIES,
    LOCAL_CATEGORIES,
    all_checks,
    categories_for_brand_type,
    find_check,
)
from seo_checklist.services.registry.models import BrandType, Category, Check, Importance


BASE_IDS = ["authority", "on-page", "technical", "eeat", "social-search", "ai-search", "performance"]


class TestBrandTypes:
    """Category composition per brand type."""

    def test_general_is_base_categories(self):
        categories = categories_for_brand_type(BrandType.GENERAL)
        assert [c.id for c in categories] == BASE_IDS
        assert sum(c.weight for c in categories) == 100
        assert len(list(all_checks(categories))) == 86

    @pytest.mark.parametrize("brand_type,extra_ids,check_count", [
        ("ecommerce", ["ecommerce-collection", "ecommerce-product"], 111),
        ("local", ["local-gbp", "local-landing"], 119),
        ("international", ["international"], 94),
    ])
    def test_brand_categories_come_first(self, brand_type, extra_ids, check_count):
        categories = categories_for_brand_type(brand_type)
        assert [c.id for c in categories] == extra_ids + BASE_IDS
        assert len(list(all_checks(categories))) == check_count

    @pytest.mark.parametrize("value", [None, "", "spaceship", "  "])
    def test_unknown_brand_type_falls_back_to_general(self, value):
        assert categories_for_brand_type(value) == BASE_CATEGORIES

    def test_brand_type_parse_is_case_insensitive(self):
        assert BrandType.parse(" Local ") is BrandType.LOCAL


class TestCatalogue:
    """Catalogue invariants."""

    def test_check_ids_are_unique_across_catalogue(self):
        every_category = BASE_CATEGORIES + ECOMMERCE_CATEGORIES + LOCAL_CATEGORIES + INTERNATIONAL_CATEGORIES
        ids = [check.id for check in all_checks(every_category)]
        assert len(ids) == len(set(ids)) == 152

    def test_checks_are_ordered_by_importance(self):
        order = list(Importance)
        every_category = BASE_CATEGORIES + ECOMMERCE_CATEGORIES + LOCAL_CATEGORIES + INTERNATIONAL_CATEGORIES
        for category in every_category:
            ranks = [order.index(check.importance) for check in category.checks]
            assert ranks == sorted(ranks), category.id

    def test_find_check(self):
        check = find_check("dr-growth", categories_for_brand_type("general"))
        assert check.name == "Domain Rating Growth"
        assert check.importance is Importance.CRITICAL

    def test_find_check_outside_variant(self):
        assert find_check("gbp-verified", categories_for_brand_type("general")) is None
        assert find_check("gbp-verified", categories_for_brand_type("local")) is not None


class TestModels:
    """Check and Category validation."""

    def test_importance_string_is_coerced(self):
        check = Check(id="x", name="X", description="", importance="high")
        assert check.importance is Importance.HIGH

    def test_unknown_importance_rejected(self):
        with pytest.raises(ValueError):
            Check(id="x", name="X", description="", importance="urgent")

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            Category(id="c", name="C", description="", weight=-1)

    def test_zero_weight_allowed(self):
        assert Category(id="c", name="C", description="", weight=0).weight == 0

    def test_checks_stored_as_tuple(self):
        check = Check(id="x", name="X", description="", importance=Importance.LOW)
        category = Category(id="c", name="C", description="", weight=1, checks=[check])
        assert category.checks == (check,)

    def test_importance_label(self):
        assert Importance.CRITICAL.label == "Critical"
