"""Tests for energy need estimation."""

import math

import pytest

from nutriscan.domain.profile import ActivityLevel, BmiCategory, Sex
from nutriscan.services.energy import (
    bmi_category,
    compute_bmi,
    compute_bmr,
    compute_tdee,
    estimate_energy,
    round_half_up,
)
from tests.conftest import make_profile


def test_bmr_matches_mifflin_st_jeor() -> None:
    assert compute_bmr(70, 170, 25, Sex.MALE) == pytest.approx(1642.5)
    assert compute_bmr(60, 165, 30, "female") == pytest.approx(1320.25)


@pytest.mark.parametrize(
    ("weight", "height", "age"), [(70, 170, 25), (50, 150, 60), (120, 190, 18)]
)
def test_male_female_offset_is_166(weight: float, height: float, age: float) -> None:
    male = compute_bmr(weight, height, age, Sex.MALE)
    female = compute_bmr(weight, height, age, Sex.FEMALE)
    assert male - female == pytest.approx(166)


def test_bmr_accepts_degenerate_input() -> None:
    assert compute_bmr(0, 0, 0, "female") == -161
    assert compute_bmr(1, 1, 100, "male") < 0


def test_tdee_increases_with_activity() -> None:
    levels = list(ActivityLevel)
    values = [compute_tdee(1500, level) for level in levels]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_tdee_unknown_activity_falls_back_to_sedentary() -> None:
    expected = compute_tdee(1500, "sedentary")
    assert compute_tdee(1500, "unknown") == expected
    assert compute_tdee(1500, None) == expected
    assert expected == 1800


def test_tdee_accepts_string_levels() -> None:
    assert compute_tdee(1000, "very_active") == 1900
    assert compute_tdee(1000, ActivityLevel.LIGHT) == 1375


def test_estimate_energy_end_to_end() -> None:
    energy = estimate_energy(make_profile())
    assert energy.bmr == pytest.approx(1642.5)
    assert energy.tdee == 2546


def test_round_half_up_rounds_halves_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2


def test_bmi_is_rounded_to_one_decimal() -> None:
    assert compute_bmi(70, 170) == 24.2


def test_round_half_up_passes_non_finite_values_through() -> None:
    assert math.isnan(round_half_up(math.nan))
    assert round_half_up(math.inf) == math.inf
    assert round_half_up(-math.inf) == -math.inf


def test_tdee_of_nan_bmr_stays_nan() -> None:
    assert math.isnan(compute_tdee(math.nan, "light"))


@pytest.mark.parametrize(
    ("bmi", "category"),
    [
        (17.0, BmiCategory.UNDERWEIGHT),
        (18.4, BmiCategory.UNDERWEIGHT),
        (18.5, BmiCategory.NORMAL),
        (24.9, BmiCategory.NORMAL),
        (25.0, BmiCategory.OVERWEIGHT),
        (29.9, BmiCategory.OVERWEIGHT),
        (30.0, BmiCategory.OBESE),
        (41.2, BmiCategory.OBESE),
    ],
)
def test_bmi_category_cut_offs(bmi: float, category: BmiCategory) -> None:
    assert bmi_category(bmi) is category
