"""
Unit tests for the scoring engine.

Pins down the exact numbers the checklist shows:
- Importance-weighted category scores
- Overall score renormalized over scored categories
- Rating thresholds
- Round-half-up behavior on exact ties
"""
from fractions import Fraction

import pytest

from seo_checklist.services.registry.categories import categories_for_brand_type
from seo_checklist.services.registry.models import Category, Check, Importance
from seo_checklist.services.scoring.engine import (
    category_score,
    overall_score,
    rating_for,
    round_half_up,
    summarize,
)
from seo_checklist.services.scoring.models import CheckStatus


def make_check(check_id, importance):
    return Check(id=check_id, name=check_id, description="", importance=importance)


def make_category(category_id, weight, checks):
    return Category(id=category_id, name=category_id, description="", weight=weight, checks=checks)


CRITICAL_A = make_check("critical-a", Importance.CRITICAL)
CRITICAL_B = make_check("critical-b", Importance.CRITICAL)
HIGH_A = make_check("high-a", Importance.HIGH)
MEDIUM_A = make_check("medium-a", Importance.MEDIUM)
MEDIUM_B = make_check("medium-b", Importance.MEDIUM)
LOW_CHECKS = [make_check(f"low-{i}", Importance.LOW) for i in range(4)]


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_ties_round_up(self):
        assert round_half_up(Fraction(75, 2)) == 38
        assert round_half_up(Fraction(25, 2)) == 13
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_non_ties_round_to_nearest(self):
        assert round_half_up(Fraction(100, 3)) == 33
        assert round_half_up(Fraction(200, 3)) == 67
        assert round_half_up(0) == 0
        assert round_half_up(100) == 100

    def test_negative_ties_round_away_from_zero(self):
        assert round_half_up(-2.5) == -3
        assert round_half_up(-2.4) == -2


class TestCategoryScore:
    """Tests for category_score."""

    def test_empty_checks_has_no_score(self):
        assert category_score([], {}) is None

    def test_all_unanswered_has_no_score(self):
        checks = [CRITICAL_A, HIGH_A, MEDIUM_A]
        assert category_score(checks, {}) is None

    def test_single_unanswered_medium_has_no_score(self):
        assert category_score([MEDIUM_A], {}) is None

    def test_explicit_unanswered_and_none_match_missing(self):
        checks = [CRITICAL_A, MEDIUM_A]
        statuses = {"critical-a": CheckStatus.UNANSWERED, "medium-a": None}
        assert category_score(checks, statuses) is None

        statuses = {"critical-a": "unanswered", "medium-a": "pass"}
        assert category_score(checks, statuses) == category_score(checks, {"medium-a": "pass"}) == 100

    def test_no_score_is_not_zero(self):
        assert category_score([CRITICAL_A], {"critical-a": CheckStatus.FAIL}) == 0
        assert category_score([CRITICAL_A], {}) is None

    def test_single_critical_pass_and_fail(self):
        assert category_score([CRITICAL_A], {"critical-a": CheckStatus.PASS}) == 100
        assert category_score([CRITICAL_A], {"critical-a": CheckStatus.FAIL}) == 0

    def test_equal_weights_half_pass(self):
        statuses = {"medium-a": CheckStatus.PASS, "medium-b": CheckStatus.FAIL}
        assert category_score([MEDIUM_A, MEDIUM_B], statuses) == 50

    def test_two_criticals_one_pass(self):
        statuses = {"critical-a": "pass", "critical-b": "fail"}
        assert category_score([CRITICAL_A, CRITICAL_B], statuses) == 50

    def test_critical_failure_outweighs_low_passes(self):
        """critical fail (4) + four low passes (1 each) -> 4/8 -> 50."""
        checks = [CRITICAL_A] + LOW_CHECKS
        statuses = {"critical-a": "fail"}
        statuses.update({check.id: "pass" for check in LOW_CHECKS})

        assert category_score(checks, statuses) == 50

    def test_unanswered_checks_are_skipped(self):
        checks = [CRITICAL_A, HIGH_A, MEDIUM_A]
        # Only the high check is answered
        assert category_score(checks, {"high-a": "pass"}) == 100
        assert category_score(checks, {"high-a": "fail"}) == 0

    def test_exact_half_rounds_up(self):
        """critical + high + low = 8; passing only the high check is 37.5."""
        checks = [CRITICAL_A, HIGH_A, LOW_CHECKS[0]]
        answered = {"critical-a": "fail", "high-a": "fail", "low-0": "fail"}

        assert category_score(checks, {**answered, "high-a": "pass"}) == 38
        assert category_score(checks, {**answered, "low-0": "pass"}) == 13
        assert category_score(checks, {**answered, "critical-a": "pass", "low-0": "pass"}) == 63

    def test_thirds_round_to_nearest(self):
        checks = [MEDIUM_A, MEDIUM_B, make_check("medium-c", Importance.MEDIUM)]
        assert category_score(checks, {"medium-a": "pass", "medium-b": "fail", "medium-c": "fail"}) == 33
        assert category_score(checks, {"medium-a": "pass", "medium-b": "pass", "medium-c": "fail"}) == 67

    def test_unknown_ids_are_ignored(self):
        statuses = {"critical-a": "pass", "not-a-check": "fail", "another": "bogus"}
        assert category_score([CRITICAL_A], statuses) == 100

    def test_invalid_status_value_raises(self):
        with pytest.raises(ValueError):
            category_score([CRITICAL_A], {"critical-a": "maybe"})

    def test_does_not_mutate_statuses(self):
        statuses = {"critical-a": "pass"}
        category_score([CRITICAL_A, HIGH_A], statuses)
        assert statuses == {"critical-a": "pass"}

    def test_idempotent(self):
        checks = [CRITICAL_A, HIGH_A, LOW_CHECKS[0]]
        statuses = {"critical-a": "pass", "high-a": "fail"}
        results = {category_score(checks, statuses) for _ in range(5)}
        assert results == {57}


class TestOverallScore:
    """Tests for overall_score."""

    def test_no_scored_categories_has_no_score(self):
        categories = [
            make_category("a", 20, [CRITICAL_A]),
            make_category("b", 10, [MEDIUM_A]),
        ]
        assert overall_score(categories, {}) is None

    def test_empty_category_list_has_no_score(self):
        assert overall_score([], {"critical-a": "pass"}) is None

    def test_unscored_category_is_excluded(self):
        """A scores 80 (critical pass + low fail), B untouched -> 80."""
        categories = [
            make_category("a", 20, [CRITICAL_A, LOW_CHECKS[0]]),
            make_category("b", 10, [MEDIUM_A]),
        ]
        statuses = {"critical-a": "pass", "low-0": "fail"}

        assert category_score(categories[0].checks, statuses) == 80
        assert overall_score(categories, statuses) == 80

    def test_equal_weights_average(self):
        categories = [
            make_category("a", 50, [CRITICAL_A]),
            make_category("b", 50, [MEDIUM_A]),
        ]
        statuses = {"critical-a": "pass", "medium-a": "fail"}
        assert overall_score(categories, statuses) == 50

    def test_weights_are_relative(self):
        categories = [
            make_category("a", 30, [CRITICAL_A]),
            make_category("b", 10, [MEDIUM_A]),
        ]
        statuses = {"critical-a": "pass", "medium-a": "fail"}
        # 30 * 100 / 40
        assert overall_score(categories, statuses) == 75

        scaled = [
            make_category("a", 3, [CRITICAL_A]),
            make_category("b", 1, [MEDIUM_A]),
        ]
        assert overall_score(scaled, statuses) == 75

    def test_zero_weight_category_contributes_nothing(self):
        categories = [
            make_category("zero", 0, [CRITICAL_A]),
            make_category("b", 10, [MEDIUM_A]),
        ]
        statuses = {"critical-a": "fail", "medium-a": "pass"}
        assert overall_score(categories, statuses) == 100

    def test_only_zero_weight_scored_has_no_score(self):
        categories = [
            make_category("zero", 0, [CRITICAL_A]),
            make_category("b", 10, [MEDIUM_A]),
        ]
        assert overall_score(categories, {"critical-a": "pass"}) is None

    def test_uses_rounded_category_scores(self):
        """A rounds 12.5 up to 13, B is 0 -> (13 + 0) / 2 = 6.5 -> 7."""
        categories = [
            make_category("a", 1, [CRITICAL_A, HIGH_A, LOW_CHECKS[0]]),
            make_category("b", 1, [MEDIUM_A]),
        ]
        statuses = {"critical-a": "fail", "high-a": "fail", "low-0": "pass", "medium-a": "fail"}

        assert category_score(categories[0].checks, statuses) == 13
        assert overall_score(categories, statuses) == 7

    def test_accepts_plain_objects_with_weight_and_checks(self):
        class Plain:
            def __init__(self, weight, checks):
                self.weight = weight
                self.checks = checks

        categories = [Plain(1, [CRITICAL_A]), Plain(1, [MEDIUM_A])]
        assert overall_score(categories, {"critical-a": "pass", "medium-a": "fail"}) == 50


class TestMonotonicity:
    """Flipping fail -> pass never lowers a score."""

    def test_flip_to_pass_never_decreases_scores(self):
        categories = categories_for_brand_type("ecommerce")
        checks = [check for category in categories for check in category.checks]
        baseline = {
            check.id: ("pass" if index % 3 == 0 else "fail")
            for index, check in enumerate(checks)
        }
        baseline_overall = overall_score(categories, baseline)

        for category in categories:
            baseline_category = category_score(category.checks, baseline)
            for check in category.checks:
                if baseline[check.id] != "fail":
                    continue
                flipped = {**baseline, check.id: "pass"}
                assert category_score(category.checks, flipped) >= baseline_category
                assert overall_score(categories, flipped) >= baseline_overall


class TestRating:
    """Tests for rating_for thresholds."""

    @pytest.mark.parametrize("score,label", [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Good"),
        (60, "Good"),
        (59, "Needs Improvement"),
        (40, "Needs Improvement"),
        (39, "Poor"),
        (0, "Poor"),
    ])
    def test_boundaries(self, score, label):
        assert rating_for(score).label == label

    def test_excellent_and_good_share_success_role(self):
        assert rating_for(90).color_role == rating_for(70).color_role == "success"
        assert rating_for(90).background_role == "success-light"

    def test_other_roles(self):
        assert rating_for(50).color_role == "warning"
        assert rating_for(50).background_role == "warning-light"
        assert rating_for(10).color_role == "error"
        assert rating_for(10).background_role == "error-light"


class TestSummarize:
    """Tests for the results breakdown."""

    def test_breakdown_counts_and_scores(self):
        categories = categories_for_brand_type("general")
        statuses = {
            "dr-growth": "pass",
            "natural-link-profile": "fail",
            "spam-score": "fail",
            "gbp-verified": "pass",  # not in the general checklist
        }

        result = summarize(categories, statuses)

        # critical pass (4) / (4 + 4 + 2)
        assert result.overall == 40
        assert result.rating.label == "Needs Improvement"
        assert result.passed == 1
        assert result.failed == 2
        assert result.answered == 3
        assert result.total_checks == 86
        assert result.failed_by_priority == {"critical": 1, "high": 0, "medium": 1, "low": 0}

        authority = result.categories[0]
        assert authority.id == "authority"
        assert authority.score == 40
        assert authority.answered == 3
        assert authority.total_checks == 6

        untouched = result.categories[1]
        assert untouched.score is None
        assert untouched.rating is None
        assert untouched.answered == 0

    def test_empty_statuses(self):
        result = summarize(categories_for_brand_type("general"), {})
        assert result.overall is None
        assert result.rating is None
        assert result.answered == 0
        assert all(category.score is None for category in result.categories)
