"""End-to-end analysis of a scanned or typed food portion."""

import logging
from dataclasses import dataclass

from nutriscan.domain.errors import NonPositiveEnergyNeedError
from nutriscan.domain.nutrition import NutritionValues
from nutriscan.domain.scoring import ScoreReport
from nutriscan.services.foods import FoodService
from nutriscan.services.portions import DEFAULT_PER_100G, scale_to_portion
from nutriscan.services.profiles import ProfileService
from nutriscan.services.scoring import (
    compute_adjusted_score,
    daily_share_percent,
    grade_to_tier,
    recommendation_for,
    score_bar_width,
)

SOURCE_DATABASE = "database"
SOURCE_PREDICTION = "prediction"
SOURCE_DEFAULT = "default"

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAnalysisService:
    """Resolve nutrition for a portion and score it for a user."""

    profile_service: ProfileService
    food_service: FoodService
    debug: bool = False

    def analyze(
        self,
        user_id: str,
        food_name: str,
        grams: float,
        predicted_per_100g: NutritionValues | None = None,
    ) -> ScoreReport:
        """Build a personalized score report for one portion.

        Database values win over a classifier prediction, which wins over
        the built-in default estimate. A database match also supplies the
        reported food name.
        """
        resolved_name, per_100g, source = self._resolve_per_100g(
            food_name, predicted_per_100g
        )
        nutrition = scale_to_portion(per_100g, grams)

        summary = self.profile_service.summary_for(user_id)
        energy = summary.energy
        if not energy.tdee > 0:
            raise NonPositiveEnergyNeedError(
                f"Daily energy need must be positive, got {energy.tdee}"
            )

        score = compute_adjusted_score(nutrition, energy.tdee)
        tier = grade_to_tier(score.grade)
        if self.debug:
            _logger.info(
                "Scored food: name=%s source=%s grade=%s value=%s",
                resolved_name,
                source,
                score.grade.value,
                score.value,
            )
        return ScoreReport(
            food_name=resolved_name,
            source=source,
            grams=grams,
            nutrition=nutrition,
            energy=energy,
            score=score,
            tier=tier,
            daily_share_percent=daily_share_percent(nutrition.calories, energy.tdee),
            bar_width_percent=score_bar_width(score.value),
            recommendation=recommendation_for(tier),
            bmi=summary.bmi,
            bmi_category=summary.bmi_category,
        )

    def _resolve_per_100g(
        self, food_name: str, predicted: NutritionValues | None
    ) -> tuple[str, NutritionValues, str]:
        food = self.food_service.find_by_name(food_name)
        if food is not None:
            return food.name, food.per_100g, SOURCE_DATABASE
        if predicted is not None and _has_values(predicted):
            return food_name, predicted, SOURCE_PREDICTION
        return food_name, DEFAULT_PER_100G, SOURCE_DEFAULT


def _has_values(prediction: NutritionValues) -> bool:
    return prediction.calories > 0 or prediction.protein > 0
