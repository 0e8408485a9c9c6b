"""Built-in pasta party catalog.

Pasta is the one composite ingredient: it can be made from flour, egg
and water, and red_pasta and cheese_pasta both need it.
"""

from __future__ import annotations

from pantrymatch.catalog.models import (
    Catalog,
    Ingredient,
    Preference,
    Recipe,
    RecipeName,
)


def _recipe(name: RecipeName, *ingredients: Ingredient | RecipeName) -> Recipe:
    return Recipe(
        name=name.value,
        ingredients=tuple(ingredient.value for ingredient in ingredients),
    )


RECIPES: list[Recipe] = [
    _recipe(RecipeName.RED_PASTA, RecipeName.PASTA, Ingredient.TOMATO, Ingredient.SALT),
    _recipe(RecipeName.CHEESE_PASTA, RecipeName.PASTA, Ingredient.CHEESE, Ingredient.BUTTER),
    _recipe(RecipeName.BUTTER_PASTA, Ingredient.BUTTER),
    _recipe(RecipeName.PASTA, Ingredient.FLOUR, Ingredient.EGG, Ingredient.WATER),
]

# What we have on hand (no tomato)
PANTRY: list[str] = [
    Ingredient.SALT.value,
    Ingredient.BUTTER.value,
    Ingredient.WATER.value,
    Ingredient.FLOUR.value,
    Ingredient.EGG.value,
    Ingredient.CHEESE.value,
]

PREFERENCES: list[Preference] = [
    Preference("Sally", RecipeName.CHEESE_PASTA.value),
    Preference("Boron", RecipeName.BUTTER_PASTA.value),
    Preference("Fati", RecipeName.PASTA.value),
    Preference("Chang", RecipeName.RED_PASTA.value),
    Preference("James", RecipeName.RED_PASTA.value),
    Preference("Martin", RecipeName.RED_PASTA.value),
]


def get_default_catalog() -> Catalog:
    """Get a fresh copy of the built-in catalog."""
    return Catalog(
        ingredients=[ingredient.value for ingredient in Ingredient],
        recipes=list(RECIPES),
        derivable=RecipeName.PASTA.value,
        pantry=list(PANTRY),
        preferences=list(PREFERENCES),
    )
