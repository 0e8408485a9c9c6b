"""Tests for recipe matching."""

from __future__ import annotations

from pantrymatch.catalog.models import Preference, Recipe
from pantrymatch.matcher import (
    find_possible_recipes,
    find_unsatisfied,
    match,
    missing_ingredients,
)
from pantrymatch.resolver import resolve_closure


def _closure(catalog, pantry=None):
    return resolve_closure(
        catalog.pantry if pantry is None else pantry, catalog.get_derivable()
    )


class TestMatch:
    """Tests for the match function on the built-in catalog."""

    def test_possible_recipes(self, catalog):
        """Pasta, butter and cheese pasta are possible; red pasta needs tomato."""
        result = match(catalog.recipes, _closure(catalog), catalog.preferences)
        assert result.possible_recipes == {"pasta", "butter_pasta", "cheese_pasta"}
        assert "red_pasta" not in result.possible_recipes

    def test_unsatisfied_people(self, catalog):
        """Only the red pasta fans go without."""
        result = match(catalog.recipes, _closure(catalog), catalog.preferences)
        names = [p.name for p in result.unsatisfied]
        assert sorted(names) == ["Chang", "James", "Martin"]
        assert len(names) == len(set(names))

    def test_unsatisfied_keeps_input_order(self, catalog):
        preferences = [
            Preference("Zed", "red_pasta"),
            Preference("Amy", "red_pasta"),
        ]
        result = match(catalog.recipes, _closure(catalog), preferences)
        assert [p.name for p in result.unsatisfied] == ["Zed", "Amy"]
        assert [p.name for p in result.sorted_unsatisfied()] == ["Amy", "Zed"]

    def test_idempotent(self, catalog):
        first = match(catalog.recipes, _closure(catalog), catalog.preferences)
        second = match(catalog.recipes, _closure(catalog), catalog.preferences)
        assert first == second

    def test_empty_pantry(self, catalog):
        """Nothing on hand means nothing possible and everyone unsatisfied."""
        result = match(catalog.recipes, _closure(catalog, []), catalog.preferences)
        assert result.possible_recipes == frozenset()
        assert list(result.unsatisfied) == catalog.preferences

    def test_removing_pasta_prerequisite(self, catalog):
        """Without egg, both pasta dishes go but butter pasta stays."""
        pantry = [item for item in catalog.pantry if item != "egg"]
        result = match(catalog.recipes, _closure(catalog, pantry), catalog.preferences)
        assert "red_pasta" not in result.possible_recipes
        assert "cheese_pasta" not in result.possible_recipes
        assert "butter_pasta" in result.possible_recipes

    def test_adding_ingredients_never_removes_recipes(self, catalog):
        """Possible recipes only grow as the pantry grows."""
        base = match(catalog.recipes, _closure(catalog), catalog.preferences)
        for extra in catalog.ingredients:
            pantry = set(catalog.pantry) | {extra}
            grown = match(catalog.recipes, _closure(catalog, pantry), catalog.preferences)
            assert base.possible_recipes <= grown.possible_recipes

    def test_tomato_satisfies_everyone(self, catalog):
        pantry = catalog.pantry + ["tomato"]
        result = match(catalog.recipes, _closure(catalog, pantry), catalog.preferences)
        assert "red_pasta" in result.possible_recipes
        assert result.unsatisfied == ()


class TestFindPossibleRecipes:
    """Tests for find_possible_recipes."""

    def test_empty_requirements_always_possible(self):
        recipes = [Recipe("water_glass", ())]
        assert find_possible_recipes(recipes, set()) == {"water_glass"}

    def test_no_duplicates(self):
        recipes = [Recipe("toast", ("bread",))]
        assert find_possible_recipes(recipes, {"bread"}) == frozenset({"toast"})


class TestFindUnsatisfied:
    def test_duplicate_wishes_each_reported(self):
        preferences = [Preference("A", "soup"), Preference("B", "soup")]
        assert len(find_unsatisfied(preferences, {"toast"})) == 2


class TestMissingIngredients:
    """Tests for the shopping list of a recipe."""

    def test_red_pasta_needs_tomato(self, catalog):
        assert missing_ingredients("red_pasta", catalog.recipes, _closure(catalog)) == [
            "tomato"
        ]

    def test_expands_composite_ingredients(self, catalog):
        """Without pasta in the closure, its own missing inputs are listed."""
        pantry = ["salt", "butter", "cheese"]
        result = missing_ingredients("red_pasta", catalog.recipes, _closure(catalog, pantry))
        assert result == ["egg", "flour", "tomato", "water"]

    def test_nothing_missing(self, catalog):
        assert missing_ingredients("butter_pasta", catalog.recipes, _closure(catalog)) == []

    def test_unknown_recipe_has_nothing_to_list(self, catalog):
        assert missing_ingredients("ramen", catalog.recipes, _closure(catalog)) == []
