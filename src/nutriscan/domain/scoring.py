"""Models for personalized nutrition scores."""

from dataclasses import dataclass
from enum import Enum

from nutriscan.domain.nutrition import NutritionValues
from nutriscan.domain.profile import BmiCategory, EnergyEstimate


class Grade(Enum):
    """Letter grade, A is the most desirable."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class ScoreTier(Enum):
    """Ordinal severity tier used for display."""

    BEST = "best"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"
    WORST = "worst"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NutritionScore:
    """Grade plus the adjusted score rounded to one decimal."""

    grade: Grade
    value: float


@dataclass(frozen=True)
class ScoreReport:
    """Everything shown to a user after analysing one portion."""

    food_name: str
    source: str
    grams: float
    nutrition: NutritionValues
    energy: EnergyEstimate
    score: NutritionScore
    tier: ScoreTier
    daily_share_percent: int
    bar_width_percent: float
    recommendation: str
    bmi: float
    bmi_category: BmiCategory
