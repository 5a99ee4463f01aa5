"""Body metrics and energy expenditure models."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ActivityLevel(str, Enum):
    """Supported activity levels."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"

    @property
    def multiplier(self) -> float:
        """Return the TDEE multiplier for this level."""
        return ACTIVITY_MULTIPLIERS[self]


ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHT: 1.375,
        ActivityLevel.MODERATE: 1.55,
        ActivityLevel.ACTIVE: 1.725,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
)


@dataclass(frozen=True)
class BodyMetrics:
    """Body measurements as captured for a client.

    Numeric values may arrive as strings from stored profile fields.
    """

    weight: float | str | None
    height: float | str | None
    age: float | str | None
    gender: str | None
    activity_level: str | None = None


@dataclass(frozen=True)
class TdeeResult:
    """Basal and total daily energy expenditure in kcal."""

    bmr: int
    tdee: int
    activity_level: str


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories per macro, expressed as fractions of one."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MacroDistribution:
    """Macro targets in grams."""

    protein: int
    carbs: int
    fat: int
