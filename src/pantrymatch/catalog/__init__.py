"""Recipe catalogs: models, built-in data and YAML loading."""

from __future__ import annotations

from pantrymatch.catalog.definitions import get_default_catalog
from pantrymatch.catalog.loader import load_catalog_from_yaml, validate_catalog
from pantrymatch.catalog.models import (
    Catalog,
    Ingredient,
    Preference,
    Recipe,
    RecipeName,
)

__all__ = [
    "Catalog",
    "Ingredient",
    "Preference",
    "Recipe",
    "RecipeName",
    "get_default_catalog",
    "load_catalog_from_yaml",
    "validate_catalog",
]
