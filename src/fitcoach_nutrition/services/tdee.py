"""Energy expenditure and macro planning using the Mifflin-St Jeor equation."""

import math
from types import MappingProxyType

from fitcoach_nutrition.domain.metrics import (
    ActivityLevel,
    BodyMetrics,
    MacroDistribution,
    MacroPercentages,
    TdeeResult,
)
from fitcoach_nutrition.services.scaling import round_whole

_ACTIVITY_ALIASES = MappingProxyType(
    {
        "sedentary": ActivityLevel.SEDENTARY,
        "light": ActivityLevel.LIGHT,
        "lightlyactive": ActivityLevel.LIGHT,
        "moderate": ActivityLevel.MODERATE,
        "moderatelyactive": ActivityLevel.MODERATE,
        "active": ActivityLevel.ACTIVE,
        "veryactive": ActivityLevel.VERY_ACTIVE,
        "extremelyactive": ActivityLevel.VERY_ACTIVE,
        "extraactive": ActivityLevel.VERY_ACTIVE,
    }
)
_LABEL_SEPARATORS = str.maketrans("", "", "-_")

_KCAL_PER_GRAM_PROTEIN = 4
_KCAL_PER_GRAM_CARBS = 4
_KCAL_PER_GRAM_FAT = 9

_MACRO_DISTRIBUTIONS = MappingProxyType(
    {
        "weight_loss": MacroPercentages(protein=0.35, carbs=0.30, fat=0.35),
        "muscle_gain": MacroPercentages(protein=0.30, carbs=0.45, fat=0.25),
        "maintenance": MacroPercentages(protein=0.30, carbs=0.40, fat=0.30),
        "endurance": MacroPercentages(protein=0.25, carbs=0.50, fat=0.25),
        "strength": MacroPercentages(protein=0.35, carbs=0.35, fat=0.30),
    }
)
DEFAULT_MACRO_DISTRIBUTION = _MACRO_DISTRIBUTIONS["maintenance"]

_CALORIC_ADJUSTMENTS = MappingProxyType(
    {
        "loss": {"slow": -250, "moderate": -500, "fast": -750},
        "gain": {"slow": 250, "moderate": 500, "fast": 750},
        "maintain": {"slow": 0, "moderate": 0, "fast": 0},
    }
)

_REQUIRED_METRICS = ("weight", "height", "age", "gender")


def calculate_bmr(
    weight: float, height: float, age: float, gender: str
) -> int | float:
    """Return basal metabolic rate in kcal.

    ``weight`` is in kg, ``height`` in cm and ``age`` in years. Any gender
    other than ``"male"`` uses the female constant.
    """
    gender_constant = 5 if gender == "male" else -161
    bmr = 10 * weight + 6.25 * height - 5 * age + gender_constant
    return round_whole(bmr)


def normalize_activity_level(label: str | None) -> ActivityLevel:
    """Map a free-text activity label to a level, defaulting to moderate."""
    if not label:
        return ActivityLevel.MODERATE
    key = "".join(label.split()).translate(_LABEL_SEPARATORS).lower()
    return _ACTIVITY_ALIASES.get(key, ActivityLevel.MODERATE)


def calculate_tdee(bmr: float, activity_level: str | None) -> int | float:
    """Scale BMR by the multiplier of the given activity label."""
    level = normalize_activity_level(activity_level)
    return round_whole(bmr * level.multiplier)


def _parse_positive(value: float | str | None) -> float | None:
    try:
        parsed = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed) or parsed <= 0:
        return None
    return parsed


def missing_metric_fields(metrics: BodyMetrics) -> list[str]:
    """Return required metric names that are empty."""
    return [name for name in _REQUIRED_METRICS if not getattr(metrics, name)]


def calculate_tdee_from_metrics(metrics: BodyMetrics) -> TdeeResult | None:
    """Compute BMR and TDEE, or None when the metrics are insufficient."""
    if missing_metric_fields(metrics):
        return None
    weight = _parse_positive(metrics.weight)
    height = _parse_positive(metrics.height)
    age = _parse_positive(metrics.age)
    if weight is None or height is None or age is None:
        return None

    activity_level = metrics.activity_level or ActivityLevel.MODERATE.value
    bmr = calculate_bmr(weight, height, age, str(metrics.gender))
    tdee = calculate_tdee(bmr, activity_level)
    # Huge finite inputs can still overflow to infinity.
    if not math.isfinite(tdee):
        return None
    return TdeeResult(bmr=bmr, tdee=tdee, activity_level=activity_level)


def apply_adjustment(base_calories: float, adjustment_percentage: float) -> int:
    """Raise or lower calories by a percentage."""
    adjustment = base_calories * adjustment_percentage / 100
    return round_whole(base_calories + adjustment)


def recommended_macro_distribution(goal: str | None) -> MacroPercentages:
    """Return the macro split for a fitness goal, maintenance if unknown."""
    if goal is None:
        return DEFAULT_MACRO_DISTRIBUTION
    return _MACRO_DISTRIBUTIONS.get(goal, DEFAULT_MACRO_DISTRIBUTION)


def calculate_macros(
    calories: float, distribution: MacroPercentages | None = None
) -> MacroDistribution:
    """Split calories into grams of protein, carbs and fat."""
    if calories <= 0:
        raise ValueError("Calories must be greater than 0")
    split = distribution or DEFAULT_MACRO_DISTRIBUTION
    if abs(split.protein + split.carbs + split.fat - 1) > 0.01:
        raise ValueError("Macro percentages must sum to 1 (100%)")

    return MacroDistribution(
        protein=round_whole(calories * split.protein / _KCAL_PER_GRAM_PROTEIN),
        carbs=round_whole(calories * split.carbs / _KCAL_PER_GRAM_CARBS),
        fat=round_whole(calories * split.fat / _KCAL_PER_GRAM_FAT),
    )


def calculate_caloric_adjustment(
    tdee: float, weight_goal: str, rate: str = "moderate"
) -> int:
    """Apply a fixed daily deficit or surplus for a weight goal.

    Unknown goals raise ``ValueError``; an unknown rate leaves ``tdee`` as is.
    """
    try:
        deltas = _CALORIC_ADJUSTMENTS[weight_goal]
    except KeyError as exc:
        raise ValueError(f"Unsupported weight goal: {weight_goal}") from exc
    return round_whole(tdee + deltas.get(rate, 0))
