"""Evaluation pipeline.

Each stage takes the previous Evaluation and returns a new one with one
more field filled in:

    pantry -> closure -> possible recipes -> unsatisfied -> missing

Stages must run in that order because each reads what the previous one
computed. ``evaluate`` runs them all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional

from pantrymatch.catalog.models import Catalog, Preference
from pantrymatch.matcher.match import (
    MatchResult,
    find_possible_recipes,
    find_unsatisfied,
    missing_ingredients,
)
from pantrymatch.resolver.closure import resolve_closure, resolve_full_closure

logger = logging.getLogger(__name__)

CLOSURE_MODES = ("single", "full")


@dataclass(frozen=True)
class Evaluation:
    """Result record threaded through the pipeline stages.

    Attributes:
        pantry: Raw ingredients on hand
        closure: Pantry plus derived ingredients (None until resolved)
        derived: Whether the derivable recipe could be made (single mode)
        possible_recipes: Names of makeable recipes
        unsatisfied: Preferences that can't be met, in input order
        missing: Read-only map of person name -> raw ingredients they'd
            need bought
    """

    pantry: frozenset[str]
    closure: Optional[frozenset[str]] = None
    derived: Optional[bool] = None
    possible_recipes: frozenset[str] = frozenset()
    unsatisfied: tuple[Preference, ...] = ()
    missing: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_match_result(self) -> MatchResult:
        return MatchResult(
            possible_recipes=self.possible_recipes,
            unsatisfied=self.unsatisfied,
        )


def start(pantry: list[str] | set[str] | frozenset[str]) -> Evaluation:
    return Evaluation(pantry=frozenset(pantry))


def with_closure(evaluation: Evaluation, catalog: Catalog, mode: str = "single") -> Evaluation:
    """Resolve the ingredient closure.

    Args:
        evaluation: Evaluation with pantry set
        catalog: Catalog holding the recipes and derivable recipe
        mode: "single" resolves only the derivable recipe, "full" resolves
            every recipe until nothing new can be made

    Raises:
        ValueError: On an unknown mode
    """
    if mode == "single":
        derivable = catalog.get_derivable()
        closure = resolve_closure(evaluation.pantry, derivable)
        derived = derivable is not None and derivable.name in closure
    elif mode == "full":
        closure = resolve_full_closure(evaluation.pantry, catalog.recipes)
        derived = None
    else:
        raise ValueError(f"Unknown closure mode: {mode}")
    return replace(evaluation, closure=closure, derived=derived)


def with_possible_recipes(evaluation: Evaluation, catalog: Catalog) -> Evaluation:
    if evaluation.closure is None:
        raise ValueError("Closure must be resolved before matching recipes")
    possible = find_possible_recipes(catalog.recipes, evaluation.closure)
    return replace(evaluation, possible_recipes=possible)


def with_unsatisfied(evaluation: Evaluation, catalog: Catalog) -> Evaluation:
    unsatisfied = find_unsatisfied(catalog.preferences, evaluation.possible_recipes)
    return replace(evaluation, unsatisfied=unsatisfied)


def with_missing(evaluation: Evaluation, catalog: Catalog) -> Evaluation:
    """Work out what each unsatisfied guest's recipe is missing."""
    available = evaluation.closure or evaluation.pantry
    missing: dict[str, tuple[str, ...]] = {}
    for preference in evaluation.unsatisfied:
        needed = missing_ingredients(preference.prefers, catalog.recipes, available)
        # Same person may appear twice with different wishes
        missing[preference.name] = tuple(
            sorted(set(missing.get(preference.name, ())) | set(needed))
        )
    return replace(evaluation, missing=MappingProxyType(missing))


def evaluate(
    catalog: Catalog,
    pantry: Optional[list[str] | set[str] | frozenset[str]] = None,
    mode: str = "single",
) -> Evaluation:
    """Run every stage of the pipeline.

    Args:
        catalog: Recipes, derivable recipe and preferences
        pantry: Ingredients on hand. Defaults to ``catalog.pantry``.
        mode: Closure mode, see with_closure

    Returns:
        Fully populated Evaluation
    """
    evaluation = start(catalog.pantry if pantry is None else pantry)
    evaluation = with_closure(evaluation, catalog, mode)
    evaluation = with_possible_recipes(evaluation, catalog)
    evaluation = with_unsatisfied(evaluation, catalog)
    evaluation = with_missing(evaluation, catalog)
    logger.debug(
        "Evaluated %d recipes: %d possible, %d guests unsatisfied",
        len(catalog.recipes),
        len(evaluation.possible_recipes),
        len(evaluation.unsatisfied),
    )
    return evaluation
