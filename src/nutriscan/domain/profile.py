"""User profile domain models."""

from dataclasses import dataclass
from enum import Enum


class Sex(Enum):
    """Biological sex used by the BMR offset."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Lifestyle activity level with its energy multiplier."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def factor(self) -> float:
        return ACTIVITY_FACTORS[self]

    @classmethod
    def parse(cls, raw: "ActivityLevel | str | None") -> "ActivityLevel":
        """Return the matching level, falling back to sedentary."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return cls.SEDENTARY


ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


class BmiCategory(Enum):
    """Body mass index band."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class UserProfile:
    """Physiological attributes for energy estimation."""

    weight_kg: float
    height_cm: float
    age_years: float
    sex: Sex | str
    activity_level: ActivityLevel | str
    user_id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class EnergyEstimate:
    """Basal and total daily energy expenditure in kcal/day."""

    bmr: float
    tdee: int
