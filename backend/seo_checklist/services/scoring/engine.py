"""
Scoring Engine - Weighted aggregation of manual check judgments.

Pure functions, recomputed from scratch on every call:
- Category score: importance-weighted pass rate over answered checks
- Overall score: category-weighted mean over categories that have a score
- Rating: qualitative label for a score

Unanswered checks and unscored categories are left out of both numerator and
denominator, so interim results are not deflated by work not yet done.
"""

import math
from fractions import Fraction
from typing import Iterable, Mapping, Optional, Sequence, Union

from seo_checklist.services.registry.models import Category, Check, Importance
from seo_checklist.services.scoring.models import (
    AuditScores,
    CategoryBreakdown,
    CheckStatus,
    Rating,
)
from seo_checklist.services.scoring.weights import (
    IMPORTANCE_MULTIPLIERS,
    RATING_THRESHOLDS,
    SCORING_VERSION,
    STATUS_SCORES,
)
from seo_checklist.logger import logger


StatusMap = Mapping[str, Union[CheckStatus, str, None]]


def round_half_up(value: Union[Fraction, int, float]) -> int:
    """Round to the nearest integer, ties away from zero (37.5 -> 38)."""
    value = Fraction(value)
    if value < 0:
        return -round_half_up(-value)
    return math.floor(value + Fraction(1, 2))


def category_score(checks: Iterable[Check], statuses: StatusMap) -> Optional[int]:
    """Calculate the score for a single category.

    Args:
        checks: The category's checks
        statuses: Check id -> status. Missing entries count as unanswered,
            entries for ids outside ``checks`` are ignored.

    Returns:
        Score from 0-100, or None if no check has been answered
    """
    total_weight = 0
    earned_weight = 0
    has_answers = False

    for check in checks:
        status = CheckStatus.coerce(statuses.get(check.id))

        # Skip if not answered
        if status is CheckStatus.UNANSWERED:
            continue

        has_answers = True
        weight = IMPORTANCE_MULTIPLIERS[check.importance]
        total_weight += weight
        earned_weight += weight * STATUS_SCORES[status]

    if not has_answers or total_weight == 0:
        return None

    return round_half_up(Fraction(100 * earned_weight, total_weight))


def overall_score(categories: Iterable[Category], statuses: StatusMap) -> Optional[int]:
    """Calculate the overall score across all categories.

    Categories without a score are excluded from the weight denominator, so
    the result is normalized over the categories answered so far.

    Returns:
        Score from 0-100, or None if no category has a score
    """
    total_weight = Fraction(0)
    weighted_score = Fraction(0)
    has_scores = False

    for category in categories:
        score = category_score(category.checks, statuses)
        if score is None:
            continue

        has_scores = True
        weight = Fraction(category.weight)
        total_weight += weight
        weighted_score += Fraction(score, 100) * weight

    if not has_scores or total_weight == 0:
        return None

    return round_half_up(weighted_score / total_weight * 100)


def rating_for(score: int) -> Rating:
    """Get the rating for a score. Thresholds are inclusive lower bounds."""
    for lower_bound, rating in RATING_THRESHOLDS:
        if score >= lower_bound:
            return rating
    return RATING_THRESHOLDS[-1][1]


def summarize(categories: Sequence[Category], statuses: StatusMap) -> AuditScores:
    """Build the full score breakdown for the results screen.

    Counts only cover checks in ``categories``.
    """
    failed_by_priority = {importance.value: 0 for importance in Importance}
    breakdowns = []

    for category in categories:
        passed = failed = 0
        for check in category.checks:
            status = CheckStatus.coerce(statuses.get(check.id))
            if status is CheckStatus.PASS:
                passed += 1
            elif status is CheckStatus.FAIL:
                failed += 1
                failed_by_priority[check.importance.value] += 1
        answered = passed + failed

        score = category_score(category.checks, statuses)
        breakdowns.append(CategoryBreakdown(
            id=category.id,
            name=category.name,
            weight=category.weight,
            score=score,
            rating=rating_for(score) if score is not None else None,
            total_checks=len(category.checks),
            answered=answered,
            passed=passed,
            failed=failed,
        ))

    overall = overall_score(categories, statuses)
    result = AuditScores(
        overall=overall,
        rating=rating_for(overall) if overall is not None else None,
        categories=breakdowns,
        passed=sum(b.passed for b in breakdowns),
        failed=sum(b.failed for b in breakdowns),
        answered=sum(b.answered for b in breakdowns),
        total_checks=sum(b.total_checks for b in breakdowns),
        failed_by_priority=failed_by_priority,
        scoring_version=SCORING_VERSION,
    )

    logger.debug(
        f"Scores: overall={result.overall}, answered={result.answered}/{result.total_checks}"
    )
    return result
