"""Exception classes for catalog loading and closure resolution."""

from __future__ import annotations

from typing import Optional


class PantryMatchError(Exception):
    """Base exception for pantrymatch."""


class UnknownIngredientError(PantryMatchError):
    """Raised when a name is neither a known ingredient nor a recipe."""

    def __init__(self, name: str, recipe: Optional[str] = None):
        self.name = name
        self.recipe = recipe
        if recipe:
            message = f"Recipe '{recipe}' requires unknown ingredient '{name}'"
        else:
            message = f"Unknown ingredient '{name}'"
        super().__init__(message)


class UnknownRecipeError(PantryMatchError):
    """Raised when a preference names a recipe the catalog doesn't have."""

    def __init__(self, name: str, person: Optional[str] = None):
        self.name = name
        self.person = person
        if person:
            message = f"{person} prefers unknown recipe '{name}'"
        else:
            message = f"Unknown recipe '{name}'"
        super().__init__(message)


class CyclicDependencyError(PantryMatchError):
    """Raised when recipes depend on each other in a loop."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Cyclic recipe dependency: {' -> '.join(cycle)}")


class CatalogFormatError(PantryMatchError):
    """Raised when a catalog file is structurally invalid."""

    def __init__(self, path: object, message: str):
        self.path = path
        super().__init__(f"Invalid catalog {path}: {message}")
