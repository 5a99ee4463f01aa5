"""Tests for container wiring."""

import asyncio

from fitcoach_nutrition.config import Settings
from fitcoach_nutrition.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.nutrition_service.api_key_configured is True
    assert container.nutrition_service.fdc_client.base_url == settings.fdc_base_url
    asyncio.run(container.close_resources())


def test_build_container_without_api_key() -> None:
    container = build_container(Settings(fdc_api_key=None))

    assert container.nutrition_service.api_key_configured is False
    health = asyncio.run(container.nutrition_service.check_health())
    assert health.healthy is False
    asyncio.run(container.close_resources())
