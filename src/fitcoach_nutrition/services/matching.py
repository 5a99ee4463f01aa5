"""Pick the best FoodData Central result for a free-text food description."""

import re
from collections.abc import Callable, Sequence
from types import MappingProxyType

from fitcoach_nutrition.domain.nutrition import FoodSearchResult

MatchStrategy = Callable[[Sequence[FoodSearchResult], str], FoodSearchResult | None]

_MEAT_KEYWORDS = frozenset({"chicken", "pollo"})
_UNPROCESSED_MARKERS = ("raw", "fresh", "broiler")

# Spanish names and everyday word orders mapped to USDA naming.
FOOD_NAME_MAPPINGS = MappingProxyType(
    {
        "pollo": "chicken",
        "res": "beef",
        "cerdo": "pork",
        "pescado": "fish",
        "arroz": "rice",
        "pasta": "pasta",
        "pan": "bread",
        "huevo": "egg",
        "leche": "milk",
        "queso": "cheese",
        "tomate": "tomato",
        "cebolla": "onion",
        "papa": "potato",
        "patata": "potato",
        "manzana": "apple",
        "platano": "banana",
        "naranja": "orange",
        "chicken breast": "chicken, breast",
        "chicken thigh": "chicken, thigh",
        "ground beef": "beef, ground",
        "white rice": "rice, white",
        "brown rice": "rice, brown",
        "whole wheat bread": "bread, whole wheat",
        "skim milk": "milk, skim",
        "whole milk": "milk, whole",
    }
)


# Aliases only match whole words, so "res" leaves "fresas" alone.
_ALIAS_PATTERNS = tuple(
    (re.compile(rf"\b{re.escape(key)}\b"), value)
    for key, value in FOOD_NAME_MAPPINGS.items()
)


def map_search_term(description: str) -> str:
    """Translate a food description into a term USDA search understands."""
    normalized = description.lower().strip()
    if normalized in FOOD_NAME_MAPPINGS:
        return FOOD_NAME_MAPPINGS[normalized]
    for pattern, value in _ALIAS_PATTERNS:
        if pattern.search(normalized):
            return pattern.sub(value, normalized, count=1)
    return description


def _contains(
    candidates: Sequence[FoodSearchResult], term: str
) -> list[FoodSearchResult]:
    return [food for food in candidates if term in food.description.lower()]


def exact_match(
    candidates: Sequence[FoodSearchResult], term: str
) -> FoodSearchResult | None:
    """Return the first candidate whose description equals the term."""
    for food in candidates:
        if food.description.lower() == term:
            return food
    return None


def prefix_match(
    candidates: Sequence[FoodSearchResult], term: str
) -> FoodSearchResult | None:
    """Return the first candidate whose description starts with the term."""
    for food in candidates:
        if food.description.lower().startswith(term):
            return food
    return None


def single_substring_match(
    candidates: Sequence[FoodSearchResult], term: str
) -> FoodSearchResult | None:
    """Return the only candidate containing the term, if exactly one does."""
    matches = _contains(candidates, term)
    if len(matches) == 1:
        return matches[0]
    return None


def unprocessed_meat_match(
    candidates: Sequence[FoodSearchResult], term: str
) -> FoodSearchResult | None:
    """Prefer raw or fresh cuts when the term names a meat."""
    if not any(keyword in term for keyword in _MEAT_KEYWORDS):
        return None
    for food in _contains(candidates, term):
        description = food.description.lower()
        if any(marker in description for marker in _UNPROCESSED_MARKERS):
            return food
    return None


def first_substring_match(
    candidates: Sequence[FoodSearchResult], term: str
) -> FoodSearchResult | None:
    """Return the first candidate containing the term."""
    matches = _contains(candidates, term)
    return matches[0] if matches else None


DEFAULT_STRATEGIES: tuple[MatchStrategy, ...] = (
    exact_match,
    prefix_match,
    single_substring_match,
    unprocessed_meat_match,
    first_substring_match,
)


def select_best_match(
    candidates: Sequence[FoodSearchResult],
    query: str,
    strategies: Sequence[MatchStrategy] = DEFAULT_STRATEGIES,
) -> FoodSearchResult | None:
    """Select the best candidate for a query, or None when nothing fits.

    Strategies run in order and the first one returning a candidate wins.
    ``None`` means the caller should let the user disambiguate.
    """
    term = query.lower()
    if not candidates or not term.strip():
        return None
    for strategy in strategies:
        match = strategy(candidates, term)
        if match is not None:
            return match
    return None
