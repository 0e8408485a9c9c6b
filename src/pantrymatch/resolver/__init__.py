"""Ingredient closure resolution."""

from __future__ import annotations

from pantrymatch.resolver.closure import resolve_closure, resolve_full_closure
from pantrymatch.resolver.graph import check_acyclic, recipe_dependencies

__all__ = [
    "check_acyclic",
    "recipe_dependencies",
    "resolve_closure",
    "resolve_full_closure",
]
