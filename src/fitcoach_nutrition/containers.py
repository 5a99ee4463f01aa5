"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fitcoach_nutrition.adapters.fdc_client import HttpxFdcClient
from fitcoach_nutrition.config import Settings
from fitcoach_nutrition.services.cache import InMemoryCache
from fitcoach_nutrition.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        min_interval_seconds=resolved_settings.fdc_min_interval_seconds,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        search_ttl_seconds=resolved_settings.search_ttl_seconds,
        food_ttl_seconds=resolved_settings.food_ttl_seconds,
        debug=resolved_settings.nutrition_debug,
        api_key_configured=bool(resolved_settings.fdc_api_key),
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
