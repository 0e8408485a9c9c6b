"""Ingredient closure: raw ingredients plus whatever can be made from them."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pantrymatch.catalog.models import Recipe
from pantrymatch.resolver.graph import check_acyclic

logger = logging.getLogger(__name__)


def resolve_closure(
    raw_ingredients: Iterable[str],
    derivable: Optional[Recipe],
) -> frozenset[str]:
    """Add a single composite ingredient to the raw set if it can be made.

    Args:
        raw_ingredients: Ingredients on hand
        derivable: Recipe whose output other recipes use (pasta). None
            means nothing can be derived.

    Returns:
        The raw set, plus ``derivable.name`` when all of its required
        ingredients are present.
    """
    available = frozenset(raw_ingredients)
    if derivable is not None and derivable.is_satisfied_by(available):
        logger.debug("Can make %s from raw ingredients", derivable.name)
        return available | {derivable.name}
    return available


def resolve_full_closure(
    raw_ingredients: Iterable[str],
    recipes: list[Recipe],
) -> frozenset[str]:
    """Add every recipe that can be made, directly or via other recipes.

    Repeats passes over the catalog until a pass adds nothing new.

    Args:
        raw_ingredients: Ingredients on hand
        recipes: Full recipe catalog

    Returns:
        Raw ingredients plus the names of all makeable recipes

    Raises:
        CyclicDependencyError: If recipes depend on each other in a loop
    """
    check_acyclic(recipes)

    available = set(raw_ingredients)
    passes = 0
    while True:
        passes += 1
        added = [
            recipe.name
            for recipe in recipes
            if recipe.name not in available and recipe.is_satisfied_by(available)
        ]
        if not added:
            break
        logger.debug("Closure pass %d added %s", passes, added)
        available.update(added)

    return frozenset(available)
