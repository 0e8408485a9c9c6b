"""Dependency graph checks for recipes that consume other recipes."""

from __future__ import annotations

from pantrymatch.catalog.models import Recipe
from pantrymatch.exceptions import CyclicDependencyError


def recipe_dependencies(recipes: list[Recipe]) -> dict[str, list[str]]:
    """Map each recipe name to the recipe names it requires.

    Raw ingredients are left out, so recipes with no composite ingredients
    map to an empty list.
    """
    names = {recipe.name for recipe in recipes}
    return {
        recipe.name: [ingredient for ingredient in recipe.ingredients if ingredient in names]
        for recipe in recipes
    }


def check_acyclic(recipes: list[Recipe]) -> None:
    """Raise if any recipe (indirectly) requires itself.

    Args:
        recipes: Recipes to check

    Raises:
        CyclicDependencyError: With the cycle as a list of names, first
            name repeated at the end
    """
    graph = recipe_dependencies(recipes)
    done: set[str] = set()

    for start in graph:
        if start in done:
            continue
        # Iterative DFS; path holds the current chain of recipe names
        path: list[str] = [start]
        on_path = {start}
        stack = [iter(graph[start])]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                finished = path.pop()
                on_path.discard(finished)
                done.add(finished)
                continue
            if child in on_path:
                cycle_start = path.index(child)
                raise CyclicDependencyError(path[cycle_start:] + [child])
            if child in done:
                continue
            path.append(child)
            on_path.add(child)
            stack.append(iter(graph[child]))
