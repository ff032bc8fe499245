"""Recipe management and recipe suggestions for scanned foods."""

from dataclasses import dataclass, replace
from typing import Protocol

from nutriscan.domain.errors import InvalidInputError, RecipeNotFoundError
from nutriscan.domain.recipes import Recipe

DEFAULT_RECIPE_ID = "default"

_DEFAULT_INGREDIENTS = [
    "2 portions of the main ingredient",
    "Seasoning to taste",
    "Vegetables of your choice",
    "Olive oil for sauteing",
    "Himalayan salt to taste",
    "Black pepper to taste",
]

_DEFAULT_STEPS = [
    "Prepare all ingredients in the right amounts.",
    "Use a healthy oil such as olive oil for sauteing.",
    "Add seasoning to taste.",
    "Cook over medium heat until done.",
    "Add vegetables to raise the nutritional value.",
    "Serve warm.",
]


class RecipeRepository(Protocol):
    """Persistence interface for shared recipes."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by name."""

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""

    def upsert_recipe(self, recipe: Recipe) -> Recipe:
        """Create the recipe, or update it when it has an id."""

    def delete_recipe(self, recipe_id: str) -> None:
        """Remove a recipe."""


@dataclass
class RecipeService:
    """Service for maintaining recipes and matching them to foods."""

    repository: RecipeRepository

    def list_recipes(self) -> list[Recipe]:
        return self.repository.list_recipes()

    def save_recipe(self, recipe: Recipe) -> Recipe:
        """Drop blank lines, validate and persist a recipe."""
        cleaned = _clean(recipe)
        if not cleaned.name:
            raise InvalidInputError("Recipe name is required")
        if not cleaned.ingredients:
            raise InvalidInputError("At least one ingredient is required")
        if not cleaned.steps:
            raise InvalidInputError("At least one step is required")
        return self.repository.upsert_recipe(cleaned)

    def update_recipe(self, recipe_id: str, recipe: Recipe) -> Recipe:
        self._require(recipe_id)
        return self.save_recipe(replace(recipe, id=recipe_id))

    def delete_recipe(self, recipe_id: str) -> None:
        self._require(recipe_id)
        self.repository.delete_recipe(recipe_id)

    def recipe_for_food(self, food_name: str) -> Recipe:
        """Return the first recipe whose name contains the food name.

        Falls back to a generic healthy recipe when nothing matches.
        """
        needle = food_name.strip().lower()
        if needle:
            for recipe in self.repository.list_recipes():
                if needle in recipe.name.lower():
                    return recipe
        return default_recipe(food_name)

    def _require(self, recipe_id: str) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(f"No recipe with id {recipe_id}")
        return recipe


def default_recipe(food_name: str) -> Recipe:
    return Recipe(
        id=DEFAULT_RECIPE_ID,
        name=f"Healthy {food_name.strip()}",
        ingredients=list(_DEFAULT_INGREDIENTS),
        steps=list(_DEFAULT_STEPS),
    )


def _clean(recipe: Recipe) -> Recipe:
    return Recipe(
        id=recipe.id,
        name=recipe.name.strip(),
        ingredients=[item.strip() for item in recipe.ingredients if item.strip()],
        steps=[step.strip() for step in recipe.steps if step.strip()],
    )
