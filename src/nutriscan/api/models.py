"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from nutriscan.domain.nutrition import FoodRecord, NutritionValues, PortionOption
from nutriscan.domain.profile import ActivityLevel, EnergyEstimate, Sex, UserProfile
from nutriscan.domain.recipes import Recipe
from nutriscan.domain.scoring import ScoreReport
from nutriscan.services.profiles import ProfileSummary


class NutritionPayload(BaseModel):
    """Nutrient quantities, energy in kcal and sodium in mg."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbohydrates: float = Field(ge=0)
    fat: float = Field(ge=0)
    fibre: float = Field(ge=0)
    sodium: float = Field(ge=0)

    def to_domain(self) -> NutritionValues:
        return NutritionValues(**self.model_dump())

    @classmethod
    def from_domain(cls, values: NutritionValues) -> "NutritionPayload":
        return cls(
            calories=values.calories,
            protein=values.protein,
            carbohydrates=values.carbohydrates,
            fat=values.fat,
            fibre=values.fibre,
            sodium=values.sodium,
        )


class ProfilePayload(BaseModel):
    """Physiological profile used for energy estimation."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age_years: float = Field(gt=0)
    sex: Sex
    activity_level: str = ActivityLevel.SEDENTARY.value
    name: str | None = None

    def to_domain(self, user_id: str | None = None) -> UserProfile:
        return UserProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age_years=self.age_years,
            sex=self.sex,
            activity_level=ActivityLevel.parse(self.activity_level),
            user_id=user_id,
            name=self.name,
        )


class EnergyResponse(BaseModel):
    bmr: float
    tdee: int

    @classmethod
    def from_domain(cls, energy: EnergyEstimate) -> "EnergyResponse":
        return cls(bmr=energy.bmr, tdee=energy.tdee)


class ScoreRequest(BaseModel):
    """Nutrition for one serving scored against a daily energy need."""

    nutrition: NutritionPayload
    tdee: int = Field(gt=0)


class ScoreResponse(BaseModel):
    grade: str
    value: float
    tier: str
    recommendation: str
    daily_share_percent: int
    bar_width_percent: float


class AnalyzeRequest(BaseModel):
    """A food portion with an optional per-100 g classifier prediction."""

    food_name: str = Field(min_length=1)
    grams: float = Field(gt=0)
    prediction: NutritionPayload | None = None


class ReportResponse(BaseModel):
    food_name: str
    source: str
    grams: float
    nutrition: NutritionPayload
    energy: EnergyResponse
    grade: str
    value: float
    tier: str
    daily_share_percent: int
    bar_width_percent: float
    recommendation: str
    bmi: float
    bmi_category: str

    @classmethod
    def from_domain(cls, report: ScoreReport) -> "ReportResponse":
        return cls(
            food_name=report.food_name,
            source=report.source,
            grams=report.grams,
            nutrition=NutritionPayload.from_domain(report.nutrition),
            energy=EnergyResponse.from_domain(report.energy),
            grade=report.score.grade.value,
            value=report.score.value,
            tier=report.tier.value,
            daily_share_percent=report.daily_share_percent,
            bar_width_percent=report.bar_width_percent,
            recommendation=report.recommendation,
            bmi=report.bmi,
            bmi_category=report.bmi_category.value,
        )


class FoodPayload(BaseModel):
    """Food database entry with nutrition per 100 g."""

    name: str
    serving_size_g: float = 100
    per_100g: NutritionPayload

    def to_domain(self, food_id: str | None = None) -> FoodRecord:
        return FoodRecord(
            id=food_id,
            name=self.name,
            serving_size_g=self.serving_size_g,
            per_100g=self.per_100g.to_domain(),
        )


class FoodResponse(BaseModel):
    id: str | None
    name: str
    serving_size_g: float
    per_100g: NutritionPayload

    @classmethod
    def from_domain(cls, food: FoodRecord) -> "FoodResponse":
        return cls(
            id=food.id,
            name=food.name,
            serving_size_g=food.serving_size_g,
            per_100g=NutritionPayload.from_domain(food.per_100g),
        )


class PortionResponse(BaseModel):
    label: str
    grams: float

    @classmethod
    def from_domain(cls, option: PortionOption) -> "PortionResponse":
        return cls(label=option.label, grams=option.grams)


class RegistrationRequest(BaseModel):
    email: str = Field(min_length=3)
    name: str = Field(min_length=1)


class CompleteRegistrationRequest(BaseModel):
    """Profile details submitted on the second sign-up step."""

    user_id: str = Field(min_length=1)
    profile: ProfilePayload


class SummaryResponse(BaseModel):
    """Energy need and body mass index of a stored profile."""

    energy: EnergyResponse
    bmi: float
    bmi_category: str

    @classmethod
    def from_domain(cls, summary: ProfileSummary) -> "SummaryResponse":
        return cls(
            energy=EnergyResponse.from_domain(summary.energy),
            bmi=summary.bmi,
            bmi_category=summary.bmi_category.value,
        )


class RecipePayload(BaseModel):
    name: str
    ingredients: list[str]
    steps: list[str]

    def to_domain(self, recipe_id: str | None = None) -> Recipe:
        return Recipe(
            id=recipe_id,
            name=self.name,
            ingredients=list(self.ingredients),
            steps=list(self.steps),
        )


class RecipeResponse(BaseModel):
    id: str | None
    name: str
    ingredients: list[str]
    steps: list[str]

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            name=recipe.name,
            ingredients=recipe.ingredients,
            steps=recipe.steps,
        )
