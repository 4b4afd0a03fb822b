"""
Scoring models - check statuses, ratings, and the score breakdown.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class CheckStatus(str, Enum):
    """Judgment recorded for a check."""
    PASS = "pass"
    FAIL = "fail"
    UNANSWERED = "unanswered"

    @classmethod
    def coerce(cls, value: Union["CheckStatus", str, None]) -> "CheckStatus":
        """Normalize a status map entry. None and missing entries are unanswered."""
        if value is None:
            return cls.UNANSWERED
        return cls(value)

    @property
    def label(self) -> str:
        return "Not Answered" if self is CheckStatus.UNANSWERED else self.value.capitalize()


@dataclass(frozen=True)
class Rating:
    """Qualitative rating for a score.

    The color roles are semantic tokens for the presentation layer,
    not literal colors.
    """
    label: str
    color_role: str
    background_role: str


@dataclass
class CategoryBreakdown:
    """Score and progress for a single category."""
    id: str
    name: str
    weight: float
    score: Optional[int]
    rating: Optional[Rating]
    total_checks: int
    answered: int
    passed: int
    failed: int


@dataclass
class AuditScores:
    """Complete scoring result for a status map."""
    overall: Optional[int]
    rating: Optional[Rating]
    categories: List[CategoryBreakdown] = field(default_factory=list)
    passed: int = 0
    failed: int = 0
    answered: int = 0
    total_checks: int = 0
    failed_by_priority: Dict[str, int] = field(default_factory=dict)
    scoring_version: str = ""
