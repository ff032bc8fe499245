"""Daily energy need estimation (Mifflin-St Jeor)."""

import math

from nutriscan.domain.profile import (
    ActivityLevel,
    BmiCategory,
    EnergyEstimate,
    Sex,
    UserProfile,
)

_MALE_OFFSET = 5
_FEMALE_OFFSET = -161

_BMI_THRESHOLDS: tuple[tuple[float, BmiCategory], ...] = (
    (18.5, BmiCategory.UNDERWEIGHT),
    (25, BmiCategory.NORMAL),
    (30, BmiCategory.OVERWEIGHT),
)


def compute_bmr(
    weight_kg: float, height_cm: float, age_years: float, sex: Sex | str
) -> float:
    """Return basal metabolic rate in kcal/day.

    Inputs are not validated; degenerate values give degenerate output.
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    if _is_male(sex):
        return bmr + _MALE_OFFSET
    return bmr + _FEMALE_OFFSET


def compute_tdee(bmr: float, activity_level: ActivityLevel | str | None) -> int:
    """Scale BMR by the activity factor, unknown levels count as sedentary.

    A non-finite BMR comes back unrounded.
    """
    factor = ActivityLevel.parse(activity_level).factor
    return round_half_up(bmr * factor)


def estimate_energy(profile: UserProfile) -> EnergyEstimate:
    """Compute BMR and TDEE for a profile."""
    bmr = compute_bmr(
        profile.weight_kg, profile.height_cm, profile.age_years, profile.sex
    )
    return EnergyEstimate(bmr=bmr, tdee=compute_tdee(bmr, profile.activity_level))


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index rounded to one decimal."""
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m) * 10) / 10


def bmi_category(bmi: float) -> BmiCategory:
    """Classify a BMI with the 18.5 / 25 / 30 cut-offs."""
    for upper_bound, category in _BMI_THRESHOLDS:
        if bmi < upper_bound:
            return category
    return BmiCategory.OBESE


def round_half_up(value: float) -> float:
    """Round to the nearest integer with .5 going up.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _is_male(sex: Sex | str) -> bool:
    if isinstance(sex, Sex):
        return sex is Sex.MALE
    return sex == Sex.MALE.value
