"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutriscan.domain.profile import ActivityLevel, Sex, UserProfile
from nutriscan.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the ``profiles`` table."""

    client: Client

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Upsert the profile row keyed by user id."""
        if profile.user_id is None:
            raise ValueError("Profile must have a user_id to be saved")
        response = (
            self.client.table("profiles")
            .upsert(_profile_row(profile), on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile in Supabase")
        return _parse_profile(response.data[0])


def _profile_row(profile: UserProfile) -> dict[str, object]:
    sex = profile.sex.value if isinstance(profile.sex, Sex) else profile.sex
    activity = ActivityLevel.parse(profile.activity_level).value
    return {
        "user_id": profile.user_id,
        "name": profile.name,
        "age": profile.age_years,
        "gender": sex,
        "activity_level": activity,
        "height": profile.height_cm,
        "weight": profile.weight_kg,
        "updated_at": datetime.now(tz=UTC).isoformat(),
    }


def _parse_profile(row: dict[str, object]) -> UserProfile:
    gender = row.get("gender")
    return UserProfile(
        weight_kg=float(row.get("weight") or 0),
        height_cm=float(row.get("height") or 0),
        age_years=float(row.get("age") or 0),
        sex=Sex.MALE if gender == Sex.MALE.value else Sex.FEMALE,
        activity_level=ActivityLevel.parse(row.get("activity_level")),
        user_id=row.get("user_id"),
        name=row.get("name"),
    )
