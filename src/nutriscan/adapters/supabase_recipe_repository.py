"""Supabase implementation for shared recipes."""

import re
from dataclasses import dataclass

from supabase import Client

from nutriscan.domain.recipes import Recipe
from nutriscan.services.recipes import RecipeRepository

_TABLE = "food_recipes"

# Legacy rows store lists as "1. a 2. b" or "a, b" text.
_LIST_SEPARATOR = re.compile(r"\d+\)|\d+\.|\s*,\s*")


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for ``food_recipes`` rows."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        response = self.client.table(_TABLE).select("*").order("name").execute()
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def upsert_recipe(self, recipe: Recipe) -> Recipe:
        """Insert a new recipe or update an existing one by id."""
        payload = {
            "name": recipe.name,
            "ingredients": recipe.ingredients,
            "steps": recipe.steps,
        }
        if recipe.id is None:
            response = self.client.table(_TABLE).insert(payload).execute()
        else:
            response = (
                self.client.table(_TABLE)
                .update(payload)
                .eq("id", recipe.id)
                .execute()
            )
        if not response.data:
            raise RuntimeError("Failed to save recipe")
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: str) -> None:
        self.client.table(_TABLE).delete().eq("id", recipe_id).execute()


def _parse_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=str(row["id"]) if row.get("id") is not None else None,
        name=str(row.get("name") or row.get("title") or ""),
        ingredients=_as_list(row.get("ingredients")),
        steps=_as_list(row.get("steps")),
    )


def _as_list(value: object) -> list[str]:
    if isinstance(value, str):
        parts = _LIST_SEPARATOR.split(value)
        return [part.strip() for part in parts if part.strip()]
    if isinstance(value, list):
        return [str(item) for item in value]
    return []
