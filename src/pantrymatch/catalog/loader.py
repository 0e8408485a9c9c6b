"""Load and validate recipe catalogs from YAML files.

A catalog file looks like::

    ingredients: [salt, butter, water, flour, egg, cheese, tomato]
    recipes:
      - name: pasta
        ingredients: [flour, egg, water]
      - name: red_pasta
        ingredients: [pasta, tomato, salt]
    derivable: pasta
    pantry: [salt, butter, water]
    preferences:
      - {name: Chang, prefers: red_pasta}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from pantrymatch.catalog.models import Catalog, Preference, Recipe
from pantrymatch.exceptions import (
    CatalogFormatError,
    UnknownIngredientError,
    UnknownRecipeError,
)
from pantrymatch.resolver.graph import check_acyclic

logger = logging.getLogger(__name__)


def _as_name_list(value: Any, path: object, what: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogFormatError(path, f"{what} must be a list")
    return [str(item).strip() for item in value]


def _parse_recipe(item: Any, path: object) -> Recipe:
    if not isinstance(item, dict) or not item.get("name"):
        raise CatalogFormatError(path, f"recipe entry {item!r} has no name")
    name = str(item["name"]).strip()
    return Recipe(
        name=name,
        ingredients=tuple(
            _as_name_list(item.get("ingredients"), path, f"ingredients of {name}")
        ),
        optional=tuple(_as_name_list(item.get("optional"), path, f"optional of {name}")),
    )


def _parse_preference(item: Any, path: object) -> Preference:
    if not isinstance(item, dict) or "name" not in item or "prefers" not in item:
        raise CatalogFormatError(
            path, f"preference {item!r} needs 'name' and 'prefers'"
        )
    return Preference(name=str(item["name"]), prefers=str(item["prefers"]).strip())


def _infer_derivable(recipes: list[Recipe]) -> Optional[str]:
    """First recipe (in declaration order) that another recipe consumes."""
    consumed = {ingredient for recipe in recipes for ingredient in recipe.ingredients}
    for recipe in recipes:
        if recipe.name in consumed:
            return recipe.name
    return None


def validate_catalog(catalog: Catalog) -> None:
    """Check that a catalog is internally consistent.

    Args:
        catalog: Catalog to check

    Raises:
        UnknownIngredientError: If a recipe or the pantry names something
            that is neither a declared ingredient nor a recipe
        UnknownRecipeError: If a preference or the derivable names an
            unknown recipe
        CyclicDependencyError: If recipes depend on each other in a loop
    """
    known_ingredients = set(catalog.ingredients)
    recipe_names = set(catalog.recipe_names)

    for recipe in catalog.recipes:
        for ingredient in recipe.ingredients:
            if ingredient not in known_ingredients and ingredient not in recipe_names:
                raise UnknownIngredientError(ingredient, recipe.name)

    for item in catalog.pantry:
        if item not in known_ingredients:
            raise UnknownIngredientError(item)

    if catalog.derivable is not None and catalog.derivable not in recipe_names:
        raise UnknownRecipeError(catalog.derivable)

    for preference in catalog.preferences:
        if preference.prefers not in recipe_names:
            raise UnknownRecipeError(preference.prefers, preference.name)

    check_acyclic(catalog.recipes)


def load_catalog_from_yaml(yaml_path: Path) -> Catalog:
    """Parse a YAML catalog file into a validated Catalog.

    Args:
        yaml_path: Path to the YAML catalog

    Returns:
        Catalog with recipes in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        CatalogFormatError: If the file is not valid YAML or the document
            is structurally wrong
        UnknownIngredientError, UnknownRecipeError, CyclicDependencyError:
            See validate_catalog
    """
    with open(yaml_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogFormatError(yaml_path, f"not valid YAML ({e})") from e

    if data is None:
        logger.warning("Catalog file %s is empty", yaml_path)
        data = {}
    if not isinstance(data, dict):
        raise CatalogFormatError(yaml_path, "top level must be a mapping")
    if "recipes" not in data:
        raise CatalogFormatError(yaml_path, "missing 'recipes'")

    raw_recipes = data["recipes"] or []
    if not isinstance(raw_recipes, list):
        raise CatalogFormatError(yaml_path, "'recipes' must be a list")

    recipes = [_parse_recipe(item, yaml_path) for item in raw_recipes]
    seen: set[str] = set()
    for recipe in recipes:
        if recipe.name in seen:
            raise CatalogFormatError(yaml_path, f"duplicate recipe '{recipe.name}'")
        seen.add(recipe.name)

    raw_preferences = data.get("preferences") or []
    if not isinstance(raw_preferences, list):
        raise CatalogFormatError(yaml_path, "'preferences' must be a list")

    derivable = data.get("derivable")
    catalog = Catalog(
        ingredients=_as_name_list(data.get("ingredients"), yaml_path, "'ingredients'"),
        recipes=recipes,
        derivable=str(derivable).strip() if derivable else _infer_derivable(recipes),
        pantry=_as_name_list(data.get("pantry"), yaml_path, "'pantry'"),
        preferences=[_parse_preference(item, yaml_path) for item in raw_preferences],
    )

    if not catalog.recipes:
        logger.warning("No recipes loaded from %s", yaml_path)

    validate_catalog(catalog)
    logger.debug(
        "Loaded %d recipes and %d preferences from %s",
        len(catalog.recipes),
        len(catalog.preferences),
        yaml_path,
    )
    return catalog
