"""Portion scaling for per-100 g nutrition data."""

from nutriscan.domain.errors import InvalidInputError
from nutriscan.domain.nutrition import NutritionValues, PortionOption
from nutriscan.services.energy import round_half_up

REFERENCE_GRAMS = 100

# Used when neither the classifier nor the food database provides values.
DEFAULT_PER_100G = NutritionValues(
    calories=250,
    protein=15,
    carbohydrates=40,
    fat=10,
    fibre=5,
    sodium=300,
)


def scale_to_portion(per_100g: NutritionValues, grams: float) -> NutritionValues:
    """Scale per-100 g values to a portion weight.

    Calories are rounded to whole kcal, other nutrients to one decimal.
    """
    if grams <= 0:
        raise InvalidInputError(f"Portion weight must be positive, got {grams}")
    ratio = grams / REFERENCE_GRAMS
    return NutritionValues(
        calories=round_half_up(per_100g.calories * ratio),
        protein=_one_decimal(per_100g.protein * ratio),
        carbohydrates=_one_decimal(per_100g.carbohydrates * ratio),
        fat=_one_decimal(per_100g.fat * ratio),
        fibre=_one_decimal(per_100g.fibre * ratio),
        sodium=_one_decimal(per_100g.sodium * ratio),
    )


def portion_suggestions(serving_size_g: float) -> list[PortionOption]:
    """Return quick-pick portions around a standard serving."""
    return [
        PortionOption("1/2 serving", round_half_up(serving_size_g * 0.5)),
        PortionOption("1 serving", serving_size_g),
        PortionOption("1.5 servings", round_half_up(serving_size_g * 1.5)),
        PortionOption("2 servings", serving_size_g * 2),
    ]


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10
