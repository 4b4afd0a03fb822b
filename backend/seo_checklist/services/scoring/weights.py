"""
Scoring Weights Configuration.

Importance multipliers, status values, and rating thresholds are constants
of the domain and are not configurable per registry.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from seo_checklist.services.registry.models import Importance
from seo_checklist.services.scoring.models import CheckStatus, Rating


# Importance multipliers for weighted scoring
IMPORTANCE_MULTIPLIERS: Mapping[Importance, int] = MappingProxyType({
    Importance.CRITICAL: 4,
    Importance.HIGH: 3,
    Importance.MEDIUM: 2,
    Importance.LOW: 1,
})

# Points earned per answered status
STATUS_SCORES: Mapping[CheckStatus, int] = MappingProxyType({
    CheckStatus.PASS: 1,
    CheckStatus.FAIL: 0,
})

# Inclusive lower bounds, highest first
RATING_THRESHOLDS: Tuple[Tuple[int, Rating], ...] = (
    (80, Rating("Excellent", "success", "success-light")),
    (60, Rating("Good", "success", "success-light")),
    (40, Rating("Needs Improvement", "warning", "warning-light")),
    (0, Rating("Poor", "error", "error-light")),
)

# Scoring version
SCORING_VERSION = "1.0"

# --- Validation (Prevent Drift) ---
def _validate_weights():
    """Ensure every tier has a positive multiplier and thresholds descend to zero."""
    missing = set(Importance) - set(IMPORTANCE_MULTIPLIERS)
    if missing:
        raise ValueError(f"CRITICAL: No multiplier for tiers {sorted(m.value for m in missing)}")
    if any(m <= 0 for m in IMPORTANCE_MULTIPLIERS.values()):
        raise ValueError("CRITICAL: Importance multipliers must be positive")

    bounds = [bound for bound, _ in RATING_THRESHOLDS]
    if bounds != sorted(bounds, reverse=True) or bounds[-1] != 0:
        raise ValueError(f"CRITICAL: Rating thresholds {bounds} must descend to 0")

_validate_weights()
