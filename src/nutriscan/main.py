"""Command-line demo of the personalized Nutri-Score."""

from nutriscan.domain.nutrition import NutritionValues
from nutriscan.domain.profile import ActivityLevel, Sex, UserProfile
from nutriscan.services.energy import estimate_energy
from nutriscan.services.scoring import compute_adjusted_score, grade_to_tier


def main() -> None:
    """Print a worked example score."""
    profile = UserProfile(
        weight_kg=70,
        height_cm=170,
        age_years=25,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATE,
    )
    nutrition = NutritionValues(
        calories=250, protein=15, carbohydrates=40, fat=10, fibre=5, sodium=300
    )
    energy = estimate_energy(profile)
    score = compute_adjusted_score(nutrition, energy.tdee)
    print("NutriScan personalized Nutri-Score")
    print(f"BMR {energy.bmr} kcal, TDEE {energy.tdee} kcal")
    print(
        f"Grade {score.grade.value} ({grade_to_tier(score.grade).value}), "
        f"score {score.value}"
    )


if __name__ == "__main__":
    main()
