"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitcoach_nutrition.adapters.fdc_client import FdcClient
from fitcoach_nutrition.config import Settings
from fitcoach_nutrition.containers import AppContainer
from fitcoach_nutrition.services.cache import InMemoryCache
from fitcoach_nutrition.services.nutrition import NutritionService


def chicken_breast_payload(fdc_id: int = 171077) -> dict[str, object]:
    """Full-format FDC payload for raw chicken breast."""
    return {
        "fdcId": fdc_id,
        "description": "Chicken, broiler or fryers, breast, skinless, boneless, raw",
        "dataType": "SR Legacy",
        "foodCategory": {"description": "Poultry Products"},
        "foodNutrients": [
            {"nutrient": {"id": 1008, "number": "208"}, "amount": 165},
            {"nutrient": {"id": 1003, "number": "203"}, "amount": 31},
            {"nutrient": {"id": 1005, "number": "205"}, "amount": 0},
            {"nutrient": {"id": 1004, "number": "204"}, "amount": 3.6},
            {"nutrient": {"id": 1093, "number": "307"}, "amount": 74},
        ],
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "totalHits": 3,
            "currentPage": 1,
            "totalPages": 1,
            "foods": [
                {
                    "fdcId": 2646170,
                    "description": "Roasted chicken breast, cooked",
                    "dataType": "Foundation",
                },
                {
                    "fdcId": 171077,
                    "description": "Broiler chicken, breast, skinless, raw",
                    "dataType": "SR Legacy",
                },
                {
                    "fdcId": 2094700,
                    "description": "Breaded chicken breast tenders",
                    "dataType": "Survey (FNDDS)",
                    "brandOwner": None,
                },
            ],
        }
    )
    foods: dict[int, dict[str, object]] = field(
        default_factory=lambda: {171077: chicken_breast_payload()}
    )
    search_calls: list[tuple[str, int, int]] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(
        self, query: str, page_size: int = 10, page_number: int = 1
    ) -> dict[str, object]:
        self.search_calls.append((query, page_size, page_number))
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        return self.foods.get(fdc_id, chicken_breast_payload(fdc_id))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fdc_base_url="https://api.test/fdc/v1",
        fdc_min_interval_seconds=0,
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def nutrition_service(fdc_client: FakeFdcClient) -> NutritionService:
    return NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        retry_delay_seconds=0,
    )


@pytest.fixture
def container(
    settings: Settings, nutrition_service: NutritionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
