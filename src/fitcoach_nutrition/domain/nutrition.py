"""Nutrition domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FoodSearchResult:
    """A single food returned by a FoodData Central search."""

    fdc_id: int
    description: str
    data_type: str | None
    brand_owner: str | None = None
    food_category: str | None = None


@dataclass(frozen=True)
class FoodSearchPage:
    """One page of FoodData Central search results."""

    total_hits: int
    current_page: int
    total_pages: int
    foods: list[FoodSearchResult] = field(default_factory=list)


@dataclass(frozen=True)
class NutritionProfile:
    """Nutrients for a serving of food, per 100 g unless rescaled.

    A nutrient set to ``None`` is unknown, which is not the same as zero.
    Sodium is in milligrams, the other macros in grams.
    """

    fdc_id: int
    name: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    total_fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    serving_size: float = 100
    serving_unit: str = "g"
    brand_owner: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class NutritionTotals:
    """Rounded macro totals for a group of food items."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class AutoCalorieResult:
    """Outcome of matching a free-text food and scaling it to a quantity."""

    status: str
    search_term: str
    match: FoodSearchResult | None = None
    profile: NutritionProfile | None = None
    calories: int | None = None
    candidates: list[FoodSearchResult] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceHealth:
    """Health status of the upstream nutrition database."""

    healthy: bool
    message: str
