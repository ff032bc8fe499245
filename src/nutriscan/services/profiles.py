"""User profile business logic."""

from dataclasses import dataclass
from typing import Protocol

from nutriscan.domain.errors import InvalidInputError, ProfileNotFoundError
from nutriscan.domain.profile import BmiCategory, EnergyEstimate, UserProfile
from nutriscan.services.energy import bmi_category, compute_bmi, estimate_energy


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or update a profile and return the stored version."""


@dataclass(frozen=True)
class ProfileSummary:
    """Energy need and body mass index of a stored profile."""

    energy: EnergyEstimate
    bmi: float
    bmi_category: BmiCategory


@dataclass
class ProfileService:
    """Application service for profiles and their energy needs."""

    repository: ProfileRepository

    def get_profile(self, user_id: str) -> UserProfile:
        """Return the user's profile or raise if it was never set up."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")
        return profile

    def get_complete_profile(self, user_id: str) -> UserProfile:
        """Return the profile, rejecting missing or non-positive measurements."""
        profile = self.get_profile(user_id)
        measurements = {
            "weight": profile.weight_kg,
            "height": profile.height_cm,
            "age": profile.age_years,
        }
        missing = [name for name, value in measurements.items() if not value > 0]
        if missing:
            raise InvalidInputError(
                f"Profile for user {user_id} needs positive {', '.join(missing)}"
            )
        return profile

    def save_profile(self, profile: UserProfile) -> UserProfile:
        return self.repository.save_profile(profile)

    def energy_for(self, user_id: str) -> EnergyEstimate:
        """Estimate the daily energy need of a stored profile."""
        return estimate_energy(self.get_profile(user_id))

    def summary_for(self, user_id: str) -> ProfileSummary:
        """Energy need plus BMI and its band for a complete profile."""
        profile = self.get_complete_profile(user_id)
        bmi = compute_bmi(profile.weight_kg, profile.height_cm)
        return ProfileSummary(
            energy=estimate_energy(profile),
            bmi=bmi,
            bmi_category=bmi_category(bmi),
        )
