"""
Registry models - Checks, categories, and the tiers that describe them.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Importance(str, Enum):
    """Importance tier of a check (ordered from most to least important)."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class BrandType(str, Enum):
    """Registry variant selected for an audit."""
    GENERAL = "general"
    ECOMMERCE = "ecommerce"
    LOCAL = "local"
    INTERNATIONAL = "international"

    @classmethod
    def parse(cls, value: Union["BrandType", str, None]) -> "BrandType":
        """Resolve a brand type, falling back to GENERAL for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.GENERAL


@dataclass(frozen=True)
class Check:
    """A single yes/no audit item."""
    id: str
    name: str
    description: str
    importance: Importance

    def __post_init__(self):
        # Accept plain strings, reject unknown tiers
        object.__setattr__(self, "importance", Importance(self.importance))


@dataclass(frozen=True)
class Category:
    """A weighted grouping of checks."""
    id: str
    name: str
    description: str
    weight: float
    checks: Tuple[Check, ...] = ()

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Category {self.id!r} has negative weight {self.weight}")
        object.__setattr__(self, "checks", tuple(self.checks))
