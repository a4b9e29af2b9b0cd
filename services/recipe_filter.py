"""
Recipe search and filtering.

A pure, stable, single-pass filter over an in-memory recipe snapshot. Works
on ORM ``Recipe`` rows as well as any object exposing the same attributes.
"""

from typing import Iterable, List, TypeVar

from domain.enums import ALL_CATEGORIES, PriceRange
from domain.schemas.recipe_schemas import RecipeFilter

TOP_RATED_THRESHOLD = 4.5

R = TypeVar("R")


def _matches_query(recipe, query: str) -> bool:
    needle = query.lower()
    if needle in (recipe.title or "").lower():
        return True
    if needle in (recipe.description or "").lower():
        return True
    return any(needle in (ing or "").lower() for ing in recipe.ingredients or [])


def matches(recipe, criteria: RecipeFilter) -> bool:
    """True when the recipe satisfies every active constraint of ``criteria``."""
    # empty string means no text constraint
    if criteria.query and not _matches_query(recipe, criteria.query):
        return False

    if criteria.category and criteria.category != ALL_CATEGORIES:
        if recipe.category != criteria.category:
            return False

    if criteria.price_range != PriceRange.ALL:
        if not criteria.price_range.contains(recipe.price):
            return False

    if criteria.vegetarian and not recipe.is_vegetarian:
        return False
    if criteria.trending and not recipe.is_trending:
        return False
    if criteria.recommended and not recipe.is_recommended:
        return False
    if criteria.top_rated and (recipe.rating or 0) < TOP_RATED_THRESHOLD:
        return False

    return True


def filter_recipes(recipes: Iterable[R], criteria: RecipeFilter) -> List[R]:
    """Matching recipes in their original relative order."""
    return [r for r in recipes if matches(r, criteria)]
