"""Personalized Nutri-Score calculation and presentation."""

from nutriscan.domain.nutrition import NutritionValues
from nutriscan.domain.scoring import Grade, NutritionScore, ScoreTier
from nutriscan.services.energy import round_half_up

# Penalty divisors, carbohydrates stand in for sugar load.
_CALORIE_DIVISOR = 100
_CARBOHYDRATE_DIVISOR = 10
_FAT_DIVISOR = 3
_SODIUM_DIVISOR = 100
# Bonus divisors.
_FIBRE_DIVISOR = 2
_PROTEIN_DIVISOR = 5

# Exclusive upper bounds, checked in order.
_GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (-1, Grade.A),
    (2, Grade.B),
    (10, Grade.C),
    (18, Grade.D),
)

_TIERS = {
    Grade.A: ScoreTier.BEST,
    Grade.B: ScoreTier.GOOD,
    Grade.C: ScoreTier.MODERATE,
    Grade.D: ScoreTier.POOR,
    Grade.E: ScoreTier.WORST,
}

_RECOMMENDATIONS = {
    ScoreTier.BEST: "This food is a good choice for your diet.",
    ScoreTier.GOOD: "This food is a good choice for your diet.",
    ScoreTier.MODERATE: "This food is fairly balanced, but watch the portion.",
    ScoreTier.POOR: "Limit this food, it does not fit your nutritional needs well.",
    ScoreTier.WORST: "Limit this food, it does not fit your nutritional needs well.",
    ScoreTier.UNKNOWN: "No recommendation available.",
}


def negative_points(nutrition: NutritionValues) -> float:
    return (
        nutrition.calories / _CALORIE_DIVISOR
        + nutrition.carbohydrates / _CARBOHYDRATE_DIVISOR
        + nutrition.fat / _FAT_DIVISOR
        + nutrition.sodium / _SODIUM_DIVISOR
    )


def positive_points(nutrition: NutritionValues) -> float:
    return nutrition.fibre / _FIBRE_DIVISOR + nutrition.protein / _PROTEIN_DIVISOR


def adjusted_score(nutrition: NutritionValues, tdee: float) -> float:
    """Net score weighted by the share of daily energy the food covers.

    The caller guarantees ``tdee > 0``.
    """
    net = negative_points(nutrition) - positive_points(nutrition)
    calorie_percentage = nutrition.calories / tdee
    return net * (calorie_percentage * 10)


def grade_for(adjusted: float) -> Grade:
    """Map an adjusted score to its letter grade."""
    for upper_bound, grade in _GRADE_THRESHOLDS:
        if adjusted < upper_bound:
            return grade
    return Grade.E


def compute_adjusted_score(nutrition: NutritionValues, tdee: float) -> NutritionScore:
    """Score a serving against a user's total daily energy expenditure."""
    adjusted = adjusted_score(nutrition, tdee)
    return NutritionScore(
        grade=grade_for(adjusted), value=round_half_up(adjusted * 10) / 10
    )


def grade_to_tier(grade: Grade | str | None) -> ScoreTier:
    """Return the display tier for a grade, unknown grades map to UNKNOWN."""
    if not isinstance(grade, Grade):
        try:
            grade = Grade(grade)
        except ValueError:
            return ScoreTier.UNKNOWN
    return _TIERS[grade]


def recommendation_for(tier: ScoreTier) -> str:
    return _RECOMMENDATIONS[tier]


def daily_share_percent(calories: float, tdee: float) -> int:
    """Percentage of the daily energy need covered by the calories."""
    return round_half_up(calories / tdee * 100)


def score_bar_width(value: float) -> float:
    """Width of the score bar in percent, clamped to 0..100."""
    return min(max(value * 5, 0), 100)
