"""Supabase implementation for the shared food database."""

from dataclasses import dataclass

from supabase import Client

from nutriscan.domain.nutrition import FoodRecord, NutritionValues
from nutriscan.services.foods import FoodRepository

_TABLE = "food_nutrition"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for ``food_nutrition`` rows."""

    client: Client

    def search_foods(self, query: str, limit: int) -> list[FoodRecord]:
        """Search foods by a case-insensitive name substring."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .ilike("name", f"%{query}%")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: str) -> FoodRecord | None:
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_foods(self) -> list[FoodRecord]:
        response = self.client.table(_TABLE).select("*").order("name").execute()
        return [_parse_food(row) for row in response.data or []]

    def upsert_food(self, food: FoodRecord) -> FoodRecord:
        """Insert a new food or update an existing one by id."""
        payload = _food_row(food)
        if food.id is None:
            response = self.client.table(_TABLE).insert(payload).execute()
        else:
            response = (
                self.client.table(_TABLE).update(payload).eq("id", food.id).execute()
            )
        if not response.data:
            raise RuntimeError("Failed to save food entry")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: str) -> None:
        self.client.table(_TABLE).delete().eq("id", food_id).execute()


def _food_row(food: FoodRecord) -> dict[str, object]:
    values = food.per_100g
    return {
        "name": food.name,
        "serving_size": food.serving_size_g,
        "calories": values.calories,
        "protein": values.protein,
        "carbohydrates": values.carbohydrates,
        "fat": values.fat,
        "fibre": values.fibre,
        "nat": values.sodium,
    }


def _parse_food(row: dict[str, object]) -> FoodRecord:
    return FoodRecord(
        id=str(row["id"]) if row.get("id") is not None else None,
        name=str(row.get("name", "")),
        serving_size_g=float(row.get("serving_size") or 100),
        per_100g=NutritionValues(
            calories=float(row.get("calories") or 0),
            protein=float(row.get("protein") or 0),
            carbohydrates=float(row.get("carbohydrates") or 0),
            fat=float(row.get("fat") or 0),
            fibre=float(row.get("fibre") or 0),
            sodium=float(row.get("nat") or 0),
        ),
    )
