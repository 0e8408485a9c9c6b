"""Recipe matching against a closed ingredient set."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from pantrymatch.catalog.models import Preference, Recipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """What we can make and who that leaves unsatisfied.

    Attributes:
        possible_recipes: Names of recipes whose requirements are all met
        unsatisfied: Preferences whose recipe can't be made, in input order
    """

    possible_recipes: frozenset[str]
    unsatisfied: tuple[Preference, ...]

    def sorted_recipes(self) -> list[str]:
        return sorted(self.possible_recipes)

    def sorted_unsatisfied(self) -> list[Preference]:
        """Unsatisfied preferences ordered by person name (stable)."""
        return sorted(self.unsatisfied, key=lambda preference: preference.name)


def find_possible_recipes(
    recipes: Iterable[Recipe],
    closed_ingredients: frozenset[str] | set[str],
) -> frozenset[str]:
    """Names of recipes whose required ingredients are all available.

    A recipe with no required ingredients is always possible.
    """
    possible = frozenset(
        recipe.name for recipe in recipes if recipe.is_satisfied_by(closed_ingredients)
    )
    logger.debug("Possible recipes: %s", sorted(possible))
    return possible


def find_unsatisfied(
    preferences: Iterable[Preference],
    possible_recipes: frozenset[str] | set[str],
) -> tuple[Preference, ...]:
    """Preferences whose recipe isn't possible, keeping input order."""
    return tuple(
        preference
        for preference in preferences
        if preference.prefers not in possible_recipes
    )


def match(
    recipes: Iterable[Recipe],
    closed_ingredients: frozenset[str] | set[str],
    preferences: Iterable[Preference],
) -> MatchResult:
    """Work out which recipes are possible and who is left unsatisfied.

    Args:
        recipes: Recipe catalog
        closed_ingredients: Ingredient closure (raw plus derived)
        preferences: Guests and their desired recipes, in order

    Returns:
        MatchResult for this run
    """
    possible = find_possible_recipes(recipes, closed_ingredients)
    return MatchResult(
        possible_recipes=possible,
        unsatisfied=find_unsatisfied(preferences, possible),
    )


def missing_ingredients(
    recipe_name: str,
    recipes: Iterable[Recipe],
    available: frozenset[str] | set[str],
) -> list[str]:
    """Raw ingredients that would have to be bought to make a recipe.

    Composite ingredients that aren't available are expanded into their
    own requirements.

    Args:
        recipe_name: Recipe to make
        recipes: Recipe catalog (must be acyclic)
        available: Ingredient closure

    Returns:
        Sorted, de-duplicated list of missing raw ingredient names. Empty
        when the catalog has no recipe called ``recipe_name``.
    """
    by_name = {recipe.name: recipe for recipe in recipes}
    missing: set[str] = set()
    to_visit = [recipe_name]
    visited: set[str] = set()

    while to_visit:
        name = to_visit.pop()
        # Unknown recipes have no known requirements to list
        if name in visited or name not in by_name:
            continue
        visited.add(name)
        for ingredient in by_name[name].ingredients:
            if ingredient in available:
                continue
            if ingredient in by_name:
                to_visit.append(ingredient)
            else:
                missing.add(ingredient)

    return sorted(missing)
