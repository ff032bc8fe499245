"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutriscan.adapters.supabase_food_repository import SupabaseFoodRepository
from nutriscan.adapters.supabase_profile_repository import SupabaseProfileRepository
from nutriscan.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from nutriscan.config import Settings
from nutriscan.services.analysis import NutritionAnalysisService
from nutriscan.services.foods import FoodService
from nutriscan.services.profiles import ProfileService
from nutriscan.services.recipes import RecipeService
from nutriscan.services.registrations import (
    InMemoryRegistrationStore,
    RegistrationStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    food_service: FoodService
    recipe_service: RecipeService
    analysis_service: NutritionAnalysisService
    registration_store: RegistrationStore


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    food_service = FoodService(SupabaseFoodRepository(supabase_client))
    analysis_service = NutritionAnalysisService(
        profile_service=profile_service,
        food_service=food_service,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        food_service=food_service,
        recipe_service=RecipeService(SupabaseRecipeRepository(supabase_client)),
        analysis_service=analysis_service,
        registration_store=InMemoryRegistrationStore(
            ttl_seconds=resolved_settings.registration_ttl_seconds
        ),
    )
