"""Scale per-100 g nutrition profiles to a quantity in grams."""

import math
from collections.abc import Iterable
from dataclasses import replace

from fitcoach_nutrition.domain.nutrition import NutritionProfile, NutritionTotals

_REFERENCE_GRAMS = 100


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties toward positive infinity (247.5 -> 248, -2.5 -> -2).

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_whole(value: float) -> int | float:
    """Round half up to an int, leaving non-finite values as floats."""
    rounded = round_half_up(value)
    return int(rounded) if math.isfinite(rounded) else rounded


def _scale_int(value: float | None, factor: float) -> int | float | None:
    if value is None:
        return None
    return round_whole(value * factor)


def _scale_2dp(value: float | None, factor: float) -> float | None:
    if value is None:
        return None
    return round_half_up(value * factor * 100) / 100


def scale_profile(profile: NutritionProfile, grams: float) -> NutritionProfile:
    """Scale a per-100 g profile to ``grams``.

    Calories and sodium round to whole numbers, other nutrients to two
    decimals. Unknown nutrients stay unknown. Non-positive grams are not
    rejected here: zero yields zeros and negatives pass through.
    """
    factor = grams / _REFERENCE_GRAMS
    return replace(
        profile,
        calories=_scale_int(profile.calories, factor),
        protein=_scale_2dp(profile.protein, factor),
        carbs=_scale_2dp(profile.carbs, factor),
        total_fat=_scale_2dp(profile.total_fat, factor),
        fiber=_scale_2dp(profile.fiber, factor),
        sugar=_scale_2dp(profile.sugar, factor),
        sodium=_scale_int(profile.sodium, factor),
        serving_size=grams,
        serving_unit="g",
    )


def calories_for_quantity(
    calories_per_100g: float | None, grams: float
) -> int | float:
    """Return whole calories for ``grams`` of a food, unknown counting as zero."""
    return round_whole((calories_per_100g or 0) / _REFERENCE_GRAMS * grams)


def calculate_day_totals(
    items: Iterable[tuple[NutritionProfile, float]],
) -> NutritionTotals:
    """Sum macros for (per-100 g profile, grams) pairs."""
    calories = protein = carbs = fat = 0.0
    for profile, grams in items:
        factor = grams / _REFERENCE_GRAMS
        calories += (profile.calories or 0) * factor
        protein += (profile.protein or 0) * factor
        carbs += (profile.carbs or 0) * factor
        fat += (profile.total_fat or 0) * factor
    return NutritionTotals(
        calories=round_whole(calories),
        protein=round_whole(protein),
        carbs=round_whole(carbs),
        fat=round_whole(fat),
    )
