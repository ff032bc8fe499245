"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionValues:
    """Nutrient quantities for one serving.

    Energy is in kcal, sodium in mg and everything else in grams.
    """

    calories: float
    protein: float
    carbohydrates: float
    fat: float
    fibre: float
    sodium: float


@dataclass(frozen=True)
class FoodRecord:
    """Food database entry with nutrition per 100 g."""

    id: str | None
    name: str
    serving_size_g: float
    per_100g: NutritionValues


@dataclass(frozen=True)
class PortionOption:
    """Quick-pick portion for a food."""

    label: str
    grams: float
