"""USDA FoodData Central lookup endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from fitcoach_nutrition.domain.curated import search_curated_foods

if TYPE_CHECKING:
    from fitcoach_nutrition.containers import AppContainer
    from fitcoach_nutrition.services.nutrition import NutritionService

router = APIRouter(prefix="/usda", tags=["usda"])

_logger = logging.getLogger(__name__)


def _nutrition_service(request: Request) -> NutritionService:
    container: AppContainer = request.app.state.container
    return container.nutrition_service


def upstream_error(exc: Exception) -> HTTPException:
    """Translate a lookup failure into an HTTP error."""
    if isinstance(exc, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, RuntimeError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        )
    _logger.warning("USDA request failed: %s", exc)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Failed to fetch data from USDA API: {exc}",
    )


@router.get("/health")
async def usda_health(request: Request) -> dict[str, object]:
    """Report upstream availability."""
    health = await _nutrition_service(request).check_health()
    return {"healthy": health.healthy, "message": health.message}


@router.get("/search")
async def search_foods(
    request: Request, query: str = "", page_size: int = 10, page_number: int = 1
) -> dict[str, object]:
    """Search FoodData Central."""
    try:
        page = await _nutrition_service(request).search(
            query, page_size=page_size, page_number=page_number
        )
    except (ValueError, RuntimeError, httpx.HTTPError) as exc:
        raise upstream_error(exc) from exc
    return {
        "total_hits": page.total_hits,
        "current_page": page.current_page,
        "total_pages": page.total_pages,
        "foods": page.foods,
    }


@router.get("/nutrients/{fdc_id}")
async def food_nutrients(fdc_id: int, request: Request) -> dict[str, object]:
    """Return the per-100 g profile of a food."""
    try:
        profile = await _nutrition_service(request).get_nutrition(fdc_id)
    except (ValueError, RuntimeError, httpx.HTTPError) as exc:
        raise upstream_error(exc) from exc
    return {"data": profile}


@router.get("/curated")
async def curated_foods(query: str | None = None) -> dict[str, object]:
    """List curated foods matching a query without calling upstream."""
    return {"foods": search_curated_foods(query)}


@router.get("/curated/nutrition")
async def curated_nutrition(
    request: Request, query: str | None = None
) -> dict[str, object]:
    """Return curated foods with their nutrition profiles."""
    try:
        profiles = await _nutrition_service(request).get_curated_foods(query)
    except RuntimeError as exc:
        raise upstream_error(exc) from exc
    return {"foods": profiles}
