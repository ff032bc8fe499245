"""Food database lookups."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from nutriscan.domain.errors import FoodNotFoundError, InvalidInputError
from nutriscan.domain.nutrition import FoodRecord, PortionOption
from nutriscan.services.portions import portion_suggestions

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the shared food database."""

    def search_foods(self, query: str, limit: int) -> list[FoodRecord]:
        """Return foods whose name contains the query, case-insensitive."""

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a food by id, if present."""

    def list_foods(self) -> list[FoodRecord]:
        """Return all foods ordered by name."""

    def upsert_food(self, food: FoodRecord) -> FoodRecord:
        """Create the food, or update it when it has an id."""

    def delete_food(self, food_id: str) -> None:
        """Remove a food entry."""


@dataclass
class FoodService:
    """Service for food database lookups and maintenance."""

    repository: FoodRepository

    def search(self, query: str, limit: int = 10) -> list[FoodRecord]:
        cleaned = query.strip()
        if not cleaned:
            return []
        return self.repository.search_foods(cleaned, limit)

    def find_by_name(self, name: str) -> FoodRecord | None:
        """Return the first food matching a classifier label or typed name."""
        matches = self.search(name, limit=1)
        if not matches:
            _logger.info("Food not found in database: %s", name)
            return None
        return matches[0]

    def list_foods(self) -> list[FoodRecord]:
        return self.repository.list_foods()

    def save_food(self, food: FoodRecord) -> FoodRecord:
        """Validate and persist a food entry."""
        if not food.name.strip():
            raise InvalidInputError("Food name is required")
        if food.serving_size_g <= 0:
            raise InvalidInputError("Serving size must be positive")
        return self.repository.upsert_food(food)

    def update_food(self, food_id: str, food: FoodRecord) -> FoodRecord:
        """Replace an existing food entry."""
        self._require(food_id)
        return self.save_food(replace(food, id=food_id))

    def delete_food(self, food_id: str) -> None:
        self._require(food_id)
        self.repository.delete_food(food_id)

    def _require(self, food_id: str) -> FoodRecord:
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(f"No food with id {food_id}")
        return food

    def portions_for(self, food_id: str) -> list[PortionOption] | None:
        """Return portion suggestions for a food, or None if it is unknown."""
        food = self.repository.get_food(food_id)
        if food is None:
            return None
        return portion_suggestions(food.serving_size_g)
