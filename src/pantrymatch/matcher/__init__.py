"""Recipe matching and the evaluation pipeline."""

from __future__ import annotations

from pantrymatch.matcher.match import (
    MatchResult,
    find_possible_recipes,
    find_unsatisfied,
    match,
    missing_ingredients,
)
from pantrymatch.matcher.pipeline import Evaluation, evaluate

__all__ = [
    "Evaluation",
    "MatchResult",
    "evaluate",
    "find_possible_recipes",
    "find_unsatisfied",
    "match",
    "missing_ingredients",
]
