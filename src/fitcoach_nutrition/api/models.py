"""Pydantic request models for the nutrition API.

Field aliases follow the camelCase names used by FoodData Central and the
coaching frontend; snake_case names are accepted as well.
"""

from pydantic import BaseModel, ConfigDict, Field

from fitcoach_nutrition.domain.metrics import BodyMetrics
from fitcoach_nutrition.domain.nutrition import FoodSearchResult, NutritionProfile


class _AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FoodCandidate(_AliasedModel):
    """Food search result supplied by the caller."""

    fdc_id: int = Field(alias="fdcId")
    description: str
    data_type: str | None = Field(default=None, alias="dataType")
    brand_owner: str | None = Field(default=None, alias="brandOwner")

    def to_domain(self) -> FoodSearchResult:
        return FoodSearchResult(
            fdc_id=self.fdc_id,
            description=self.description,
            data_type=self.data_type,
            brand_owner=self.brand_owner,
        )


class MatchRequest(BaseModel):
    """Free-text query and the candidates to pick from."""

    query: str
    candidates: list[FoodCandidate]


class NutritionProfileBody(_AliasedModel):
    """Per-100 g nutrient profile."""

    fdc_id: int = Field(alias="fdcId")
    name: str = ""
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    total_fat: float | None = Field(default=None, alias="totalFat")
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    def to_domain(self) -> NutritionProfile:
        return NutritionProfile(
            fdc_id=self.fdc_id,
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            total_fat=self.total_fat,
            fiber=self.fiber,
            sugar=self.sugar,
            sodium=self.sodium,
        )


class ScaleRequest(BaseModel):
    """Profile to scale and the target quantity."""

    profile: NutritionProfileBody
    grams: float = Field(gt=0)


class AutoCaloriesRequest(BaseModel):
    """Food description and quantity for automatic calorie lookup."""

    description: str = Field(min_length=1)
    grams: float = Field(gt=0)


class BodyMetricsBody(_AliasedModel):
    """Client body metrics; values may be numeric strings."""

    weight: float | str | None = None
    height: float | str | None = None
    age: float | str | None = None
    gender: str | None = None
    activity_level: str | None = Field(default=None, alias="activityLevel")

    def to_domain(self) -> BodyMetrics:
        return BodyMetrics(
            weight=self.weight,
            height=self.height,
            age=self.age,
            gender=self.gender,
            activity_level=self.activity_level,
        )


class MacrosRequest(BaseModel):
    """Calorie target and optional fitness goal."""

    calories: float = Field(gt=0)
    goal: str | None = None
