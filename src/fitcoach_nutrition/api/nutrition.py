"""Calculation endpoints: matching, scaling, TDEE and macros."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from fitcoach_nutrition.api.models import (
    AutoCaloriesRequest,
    BodyMetricsBody,
    MacrosRequest,
    MatchRequest,
    ScaleRequest,
)
from fitcoach_nutrition.api.usda import upstream_error
from fitcoach_nutrition.services.matching import select_best_match
from fitcoach_nutrition.services.scaling import scale_profile
from fitcoach_nutrition.services.tdee import (
    calculate_macros,
    calculate_tdee_from_metrics,
    missing_metric_fields,
    recommended_macro_distribution,
)

if TYPE_CHECKING:
    from fitcoach_nutrition.containers import AppContainer

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.post("/match")
async def match_food(body: MatchRequest) -> dict[str, object]:
    """Pick the best candidate for a query; null when ambiguous."""
    candidates = [candidate.to_domain() for candidate in body.candidates]
    return {"match": select_best_match(candidates, body.query)}


@router.post("/scale")
async def scale_food(body: ScaleRequest) -> dict[str, object]:
    """Scale a per-100 g profile to the requested grams."""
    return {"data": scale_profile(body.profile.to_domain(), body.grams)}


@router.post("/auto-calories")
async def auto_calories(
    body: AutoCaloriesRequest, request: Request
) -> dict[str, object]:
    """Match a described food in USDA and compute its calories."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.nutrition_service.auto_calculate(
            body.description, body.grams
        )
    except (ValueError, RuntimeError, httpx.HTTPError) as exc:
        raise upstream_error(exc) from exc
    return {"data": result}


@router.post("/calculate-tdee")
async def calculate_tdee(body: BodyMetricsBody) -> dict[str, object]:
    """Compute BMR and TDEE from body metrics."""
    metrics = body.to_domain()
    result = calculate_tdee_from_metrics(metrics)
    if result is None:
        missing = missing_metric_fields(metrics)
        detail = (
            f"Missing required fields: {', '.join(missing)}"
            if missing
            else "Invalid values for weight, height or age"
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return {
        "bmr": result.bmr,
        "tdee": result.tdee,
        "activity_level": result.activity_level,
    }


@router.post("/macros")
async def macros(body: MacrosRequest) -> dict[str, object]:
    """Split a calorie target into macro grams for a goal."""
    distribution = recommended_macro_distribution(body.goal)
    grams = calculate_macros(body.calories, distribution)
    return {"distribution": distribution, "grams": grams}
