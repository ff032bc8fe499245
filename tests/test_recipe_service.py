"""Tests for the recipe service."""

import pytest

from nutriscan.domain.errors import InvalidInputError, RecipeNotFoundError
from nutriscan.domain.recipes import Recipe
from nutriscan.services.recipes import DEFAULT_RECIPE_ID, RecipeService
from tests.conftest import InMemoryRecipeRepository


def _recipe(name: str = "Sayur Asem") -> Recipe:
    return Recipe(
        id=None,
        name=name,
        ingredients=["tamarind", " ", "long beans"],
        steps=["Boil water.", "", "Add everything."],
    )


def test_save_recipe_drops_blank_lines(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeService(recipe_repository)

    saved = service.save_recipe(_recipe("  Sayur Asem "))

    assert saved.id is not None
    assert saved.name == "Sayur Asem"
    assert saved.ingredients == ["tamarind", "long beans"]
    assert saved.steps == ["Boil water.", "Add everything."]


@pytest.mark.parametrize(
    "recipe",
    [
        Recipe(id=None, name=" ", ingredients=["rice"], steps=["Cook."]),
        Recipe(id=None, name="Bubur", ingredients=[" "], steps=["Cook."]),
        Recipe(id=None, name="Bubur", ingredients=["rice"], steps=[]),
    ],
)
def test_save_recipe_requires_name_ingredients_and_steps(
    recipe_repository: InMemoryRecipeRepository, recipe: Recipe
) -> None:
    service = RecipeService(recipe_repository)

    with pytest.raises(InvalidInputError):
        service.save_recipe(recipe)


def test_update_and_delete_recipe(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeService(recipe_repository)

    updated = service.update_recipe("recipe-1", _recipe("Nasi Goreng Kampung"))
    assert updated.id == "recipe-1"
    assert [recipe.name for recipe in service.list_recipes()] == [
        "Nasi Goreng Kampung"
    ]

    service.delete_recipe("recipe-1")
    assert service.list_recipes() == []


def test_missing_recipe_is_reported(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeService(recipe_repository)

    with pytest.raises(RecipeNotFoundError):
        service.update_recipe("missing", _recipe())
    with pytest.raises(RecipeNotFoundError):
        service.delete_recipe("missing")


def test_recipe_for_food_matches_by_name(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeService(recipe_repository)

    recipe = service.recipe_for_food("nasi goreng")

    assert recipe.id == "recipe-1"


def test_recipe_for_unknown_food_is_generic(
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    service = RecipeService(recipe_repository)

    recipe = service.recipe_for_food("Rendang")

    assert recipe.id == DEFAULT_RECIPE_ID
    assert recipe.name == "Healthy Rendang"
    assert recipe.ingredients
    assert recipe.steps
