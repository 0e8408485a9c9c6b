"""Data models for ingredients, recipes and party preferences.

Ingredient and recipe names are plain strings throughout the matching
code. A recipe's name can itself appear in another recipe's ingredient
list, which is how composite ingredients such as pasta are modelled.
The enums below name the built-in catalog; their ``.value`` is what
flows through the resolver and matcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Ingredient(Enum):
    """Raw ingredients of the built-in catalog."""

    SALT = "salt"
    BUTTER = "butter"
    WATER = "water"
    FLOUR = "flour"
    EGG = "egg"
    CHEESE = "cheese"
    TOMATO = "tomato"


class RecipeName(Enum):
    """Recipes of the built-in catalog."""

    RED_PASTA = "red_pasta"
    CHEESE_PASTA = "cheese_pasta"
    BUTTER_PASTA = "butter_pasta"
    PASTA = "pasta"


@dataclass(frozen=True)
class Recipe:
    """A named recipe and the ingredients it requires.

    Attributes:
        name: Recipe name, unique within a catalog
        ingredients: Required raw ingredients or recipe names, in order
        optional: Nice-to-have ingredients. Never consulted when matching.
    """

    name: str
    ingredients: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    def is_satisfied_by(self, available: frozenset[str] | set[str]) -> bool:
        """True when every required ingredient is in ``available``."""
        return all(ingredient in available for ingredient in self.ingredients)


@dataclass(frozen=True)
class Preference:
    """A party guest and the recipe they want."""

    name: str
    prefers: str


@dataclass
class Catalog:
    """Everything needed for one evaluation run.

    Attributes:
        ingredients: Known raw ingredient names
        recipes: Recipes in declaration order
        derivable: Recipe whose output is used as an ingredient by others
        pantry: Raw ingredients on hand
        preferences: Guests and the recipe each prefers
    """

    ingredients: list[str] = field(default_factory=list)
    recipes: list[Recipe] = field(default_factory=list)
    derivable: Optional[str] = None
    pantry: list[str] = field(default_factory=list)
    preferences: list[Preference] = field(default_factory=list)

    @property
    def recipe_names(self) -> list[str]:
        return [recipe.name for recipe in self.recipes]

    def get_recipe(self, name: str) -> Optional[Recipe]:
        """Get a recipe by name, or None if the catalog doesn't have it."""
        for recipe in self.recipes:
            if recipe.name == name:
                return recipe
        return None

    def get_derivable(self) -> Optional[Recipe]:
        """Get the derivable recipe definition, if one is declared."""
        if self.derivable is None:
            return None
        return self.get_recipe(self.derivable)
