"""Tests for nutrition scaling."""

import math

import pytest

from fitcoach_nutrition.domain.nutrition import NutritionProfile
from fitcoach_nutrition.services.scaling import (
    calculate_day_totals,
    calories_for_quantity,
    round_half_up,
    scale_profile,
)

CHICKEN_BREAST = NutritionProfile(
    fdc_id=171077,
    name="Chicken breast",
    calories=165,
    protein=31,
    carbs=0,
    total_fat=3.6,
)


def test_scale_chicken_breast_to_150_grams() -> None:
    scaled = scale_profile(CHICKEN_BREAST, 150)

    assert scaled.calories == 248
    assert scaled.protein == 46.5
    assert scaled.carbs == 0
    assert scaled.total_fat == 5.4
    assert scaled.serving_size == 150
    assert scaled.serving_unit == "g"
    assert scaled.name == "Chicken breast"


def test_unknown_nutrients_stay_unknown() -> None:
    scaled = scale_profile(CHICKEN_BREAST, 250)

    assert scaled.fiber is None
    assert scaled.sugar is None
    assert scaled.sodium is None
    assert scaled.carbs == 0


def test_scaling_by_100_grams_is_identity() -> None:
    profile = NutritionProfile(
        fdc_id=1,
        name="Oats",
        calories=379,
        protein=13.15,
        carbs=67.7,
        total_fat=6.52,
        fiber=10.1,
        sugar=0.99,
        sodium=6,
    )

    assert scale_profile(scale_profile(profile, 100), 100) == profile


def test_sodium_rounds_to_whole_milligrams_and_macros_to_two_decimals() -> None:
    profile = NutritionProfile(fdc_id=1, name="Bread", fiber=2.4, sodium=491)

    scaled = scale_profile(profile, 33)

    assert scaled.fiber == 0.79
    assert scaled.sodium == 162


def test_ties_round_up() -> None:
    assert scale_profile(CHICKEN_BREAST, 50).calories == 83
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.125, 2) == 0.13


@pytest.mark.parametrize("grams", [10, 37.5, 120, 333])
def test_calories_scale_linearly(grams: float) -> None:
    doubled = scale_profile(CHICKEN_BREAST, 2 * grams).calories
    expected = 2 * CHICKEN_BREAST.calories * (grams / 100)

    assert abs(doubled - expected) <= 0.5


def test_zero_and_negative_grams_pass_through() -> None:
    zero = scale_profile(CHICKEN_BREAST, 0)
    negative = scale_profile(CHICKEN_BREAST, -100)

    assert zero.calories == 0
    assert zero.protein == 0
    assert negative.calories == -165
    assert negative.total_fat == -3.6


def test_non_finite_grams_propagate_instead_of_raising() -> None:
    not_a_number = scale_profile(CHICKEN_BREAST, float("nan"))
    infinite = scale_profile(CHICKEN_BREAST, float("inf"))

    assert math.isnan(not_a_number.calories)
    assert math.isnan(not_a_number.protein)
    assert not_a_number.fiber is None
    assert infinite.calories == float("inf")
    assert math.isnan(calories_for_quantity(165, float("nan")))


def test_round_half_up_returns_non_finite_values_unchanged() -> None:
    assert round_half_up(float("inf")) == float("inf")
    assert round_half_up(float("-inf"), 2) == float("-inf")
    assert math.isnan(round_half_up(float("nan")))


def test_calories_for_quantity_treats_unknown_as_zero() -> None:
    assert calories_for_quantity(165, 150) == 248
    assert calories_for_quantity(None, 150) == 0


def test_day_totals_sum_scaled_items() -> None:
    rice = NutritionProfile(
        fdc_id=2, name="Rice", calories=130, protein=2.7, carbs=28, total_fat=0.3
    )

    totals = calculate_day_totals([(CHICKEN_BREAST, 150), (rice, 200)])

    assert totals.calories == 508
    assert totals.protein == 52
    assert totals.carbs == 56
    assert totals.fat == 6
