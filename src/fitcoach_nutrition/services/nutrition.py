"""Nutrition service integrating USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import httpx

from fitcoach_nutrition.adapters.fdc_client import FdcClient
from fitcoach_nutrition.domain.curated import search_curated_foods
from fitcoach_nutrition.domain.nutrition import (
    AutoCalorieResult,
    FoodSearchPage,
    FoodSearchResult,
    NutritionProfile,
    ServiceHealth,
)
from fitcoach_nutrition.services.cache import Cache
from fitcoach_nutrition.services.matching import map_search_term, select_best_match
from fitcoach_nutrition.services.scaling import (
    calories_for_quantity,
    round_half_up,
    round_whole,
    scale_profile,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fitcoach_nutrition.domain.curated import CuratedFood

# (nutrient number, nutrient id) per field; search results and the abridged
# format carry numbers, the full format nests ids under "nutrient".
_NUTRIENTS = {
    "calories": ("208", 1008),
    "protein": ("203", 1003),
    "carbs": ("205", 1005),
    "total_fat": ("204", 1004),
    "fiber": ("291", 1079),
    "sugar": ("269", 2000),
    "sodium": ("307", 1093),
}
_WHOLE_NUMBER_FIELDS = {"calories", "sodium"}
_MAX_CANDIDATES = 5

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service for nutrition lookups with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    api_key_configured: bool = True

    async def search(
        self, query: str, page_size: int = 10, page_number: int = 1
    ) -> FoodSearchPage:
        """Search FDC foods with caching."""
        if not query.strip():
            raise ValueError("Search query is required")
        cache_key = f"fdc:search:{query.lower()}:{page_size}:{page_number}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodSearchPage):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(
                query, page_size=page_size, page_number=page_number
            ),
            action="search",
        )
        page = FoodSearchPage(
            total_hits=int(payload.get("totalHits") or 0),
            current_page=int(payload.get("currentPage") or 1),
            total_pages=int(payload.get("totalPages") or 1),
            foods=[_parse_search_result(food) for food in payload.get("foods") or []],
        )
        self.cache.set(cache_key, page, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info(
                "Nutrition search FDC: query=%s results=%s", query, len(page.foods)
            )
        return page

    async def get_nutrition(self, fdc_id: int) -> NutritionProfile:
        """Retrieve the per-100 g nutrition profile of a food."""
        if fdc_id <= 0:
            raise ValueError("Valid FDC ID is required")
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionProfile):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        profile = parse_nutrition_data(payload)
        self.cache.set(cache_key, profile, ttl_seconds=self.food_ttl_seconds)
        if self.debug:
            _logger.info("Nutrition food FDC: fdc_id=%s", fdc_id)
        return profile

    async def auto_calculate(self, description: str, grams: float) -> AutoCalorieResult:
        """Match a described food and compute its nutrition for ``grams``."""
        if grams <= 0:
            raise ValueError("Quantity in grams must be greater than 0")
        search_term = map_search_term(description)
        page = await self.search(search_term)
        foods = page.foods
        if not foods:
            return AutoCalorieResult(status="not_found", search_term=search_term)

        match = select_best_match(foods, description)
        if match is None and len(foods) > 1:
            return AutoCalorieResult(
                status="multiple",
                search_term=search_term,
                candidates=foods[:_MAX_CANDIDATES],
            )
        match = match or foods[0]

        per_100g = await self.get_nutrition(match.fdc_id)
        return AutoCalorieResult(
            status="found",
            search_term=search_term,
            match=match,
            profile=scale_profile(per_100g, grams),
            calories=calories_for_quantity(per_100g.calories, grams),
            candidates=[match],
        )

    async def get_curated_foods(
        self, query: str | None = None
    ) -> list[NutritionProfile]:
        """Fetch profiles for curated foods, skipping ones that fail."""
        foods = search_curated_foods(query)
        profiles = await asyncio.gather(
            *(self._curated_profile(food) for food in foods)
        )
        return [profile for profile in profiles if profile is not None]

    async def check_health(self) -> ServiceHealth:
        """Report whether FDC is reachable with the configured key."""
        if not self.api_key_configured:
            return ServiceHealth(
                healthy=False, message="USDA API key is not configured"
            )
        try:
            await self.fdc_client.search_foods("apple", page_size=1)
        except Exception as exc:
            _logger.warning("USDA health check failed: %s", exc)
            return ServiceHealth(
                healthy=False, message=f"USDA API service error: {exc}"
            )
        return ServiceHealth(healthy=True, message="USDA API service is healthy")

    async def _curated_profile(self, food: "CuratedFood") -> NutritionProfile | None:
        try:
            profile = await self.get_nutrition(food.fdc_id)
        except httpx.HTTPError as exc:
            _logger.warning(
                "Failed to get nutrition for %s (%s): %s", food.name, food.fdc_id, exc
            )
            return None
        return replace(profile, name=food.name, category=food.category)

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry on HTTP failures."""
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_search_result(food: dict[str, object]) -> FoodSearchResult:
    return FoodSearchResult(
        fdc_id=int(food["fdcId"]),
        description=str(food.get("description") or ""),
        data_type=food.get("dataType"),
        brand_owner=food.get("brandOwner"),
        food_category=_category_name(food.get("foodCategory")),
    )


def _category_name(category: object) -> str | None:
    # The full food format nests the category as {"description": ...}.
    if isinstance(category, dict):
        return category.get("description")
    return category if isinstance(category, str) else None


def _nutrient_amount(
    food_nutrients: list[dict[str, object]], number: str, nutrient_id: int
) -> float | None:
    for nutrient in food_nutrients:
        info = nutrient.get("nutrient") or {}
        found_number = (
            nutrient.get("nutrientNumber")
            or nutrient.get("number")
            or info.get("number")
        )
        found_id = nutrient.get("nutrientId") or info.get("id")
        if str(found_number) != number and found_id != nutrient_id:
            continue
        amount = nutrient.get("value", nutrient.get("amount"))
        if amount is not None:
            return float(amount)
    return None


def parse_nutrition_data(payload: dict[str, object]) -> NutritionProfile:
    """Build a per-100 g profile from an FDC food payload."""
    food_nutrients = payload.get("foodNutrients") or []
    values: dict[str, float | None] = {}
    for field_name, (number, nutrient_id) in _NUTRIENTS.items():
        amount = _nutrient_amount(food_nutrients, number, nutrient_id)
        if amount is None:
            values[field_name] = None
        elif field_name in _WHOLE_NUMBER_FIELDS:
            values[field_name] = round_whole(amount)
        else:
            values[field_name] = round_half_up(amount, 2)

    return NutritionProfile(
        fdc_id=int(payload["fdcId"]),
        name=str(payload.get("description") or ""),
        brand_owner=payload.get("brandOwner"),
        category=_category_name(payload.get("foodCategory")),
        **values,
    )
