"""FastAPI application factory."""

import logging
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request, status

from nutriscan.api.models import (
    AnalyzeRequest,
    CompleteRegistrationRequest,
    EnergyResponse,
    FoodPayload,
    FoodResponse,
    PortionResponse,
    ProfilePayload,
    RecipePayload,
    RecipeResponse,
    RegistrationRequest,
    ReportResponse,
    ScoreRequest,
    ScoreResponse,
    SummaryResponse,
)
from nutriscan.app_logging import configure_logging
from nutriscan.containers import AppContainer
from nutriscan.domain.errors import (
    DomainError,
    InvalidInputError,
    NonPositiveEnergyNeedError,
    NotFoundError,
)
from nutriscan.services.energy import estimate_energy
from nutriscan.services.registrations import PendingRegistration
from nutriscan.services.scoring import (
    compute_adjusted_score,
    daily_share_percent,
    grade_to_tier,
    recommendation_for,
    score_bar_width,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/energy")
    async def energy(profile: ProfilePayload) -> EnergyResponse:
        """Estimate BMR and TDEE for an ad-hoc profile."""
        return EnergyResponse.from_domain(estimate_energy(profile.to_domain()))

    @app.post("/score")
    async def score(body: ScoreRequest) -> ScoreResponse:
        """Score a serving against a known daily energy need."""
        nutrition = body.nutrition.to_domain()
        result = compute_adjusted_score(nutrition, body.tdee)
        tier = grade_to_tier(result.grade)
        return ScoreResponse(
            grade=result.grade.value,
            value=result.value,
            tier=tier.value,
            recommendation=recommendation_for(tier),
            daily_share_percent=daily_share_percent(nutrition.calories, body.tdee),
            bar_width_percent=score_bar_width(result.value),
        )

    @app.get("/users/{user_id}/energy")
    async def user_energy(user_id: str, request: Request) -> EnergyResponse:
        """Estimate the energy need of a stored profile."""
        state_container: AppContainer = request.app.state.container
        try:
            estimate = state_container.profile_service.energy_for(user_id)
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return EnergyResponse.from_domain(estimate)

    @app.get("/users/{user_id}/summary")
    async def user_summary(user_id: str, request: Request) -> SummaryResponse:
        """Return energy need, BMI and BMI band of a stored profile."""
        state_container: AppContainer = request.app.state.container
        try:
            summary = state_container.profile_service.summary_for(user_id)
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return SummaryResponse.from_domain(summary)

    @app.put("/users/{user_id}/profile")
    async def save_profile(
        user_id: str, profile: ProfilePayload, request: Request
    ) -> dict[str, str]:
        """Create or update a user's profile."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.save_profile(profile.to_domain(user_id))
        return {"status": "ok"}

    @app.post("/users/{user_id}/analyze")
    async def analyze(
        user_id: str, body: AnalyzeRequest, request: Request
    ) -> ReportResponse:
        """Resolve nutrition for a portion and score it for the user."""
        state_container: AppContainer = request.app.state.container
        prediction = body.prediction.to_domain() if body.prediction else None
        try:
            report = state_container.analysis_service.analyze(
                user_id=user_id,
                food_name=body.food_name,
                grams=body.grams,
                predicted_per_100g=prediction,
            )
        except DomainError as exc:
            logger.warning("Analysis rejected for user %s: %s", user_id, exc)
            raise _to_http_error(exc) from exc
        return ReportResponse.from_domain(report)

    @app.get("/foods")
    async def search_foods(
        request: Request, query: str = "", limit: int = 10
    ) -> dict[str, list[FoodResponse]]:
        """Search the food database by name, or list it when no query is set."""
        state_container: AppContainer = request.app.state.container
        if query.strip():
            foods = state_container.food_service.search(query, limit=limit)
        else:
            foods = state_container.food_service.list_foods()
        return {"foods": [FoodResponse.from_domain(food) for food in foods]}

    @app.get("/foods/{food_id}/portions")
    async def food_portions(
        food_id: str, request: Request
    ) -> dict[str, list[PortionResponse]]:
        """Return quick-pick portions for a food."""
        state_container: AppContainer = request.app.state.container
        options = state_container.food_service.portions_for(food_id)
        if options is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"portions": [PortionResponse.from_domain(item) for item in options]}

    @app.post("/foods")
    async def create_food(body: FoodPayload, request: Request) -> FoodResponse:
        """Add a food to the database."""
        state_container: AppContainer = request.app.state.container
        try:
            food = state_container.food_service.save_food(body.to_domain())
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return FoodResponse.from_domain(food)

    @app.put("/foods/{food_id}")
    async def update_food(
        food_id: str, body: FoodPayload, request: Request
    ) -> FoodResponse:
        """Replace an existing food entry."""
        state_container: AppContainer = request.app.state.container
        try:
            food = state_container.food_service.update_food(
                food_id, body.to_domain(food_id)
            )
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return FoodResponse.from_domain(food)

    @app.delete("/foods/{food_id}")
    async def delete_food(food_id: str, request: Request) -> dict[str, str]:
        """Remove a food entry."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.food_service.delete_food(food_id)
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return {"status": "ok"}

    @app.get("/recipes")
    async def list_recipes(request: Request) -> dict[str, list[RecipeResponse]]:
        """Return all recipes ordered by name."""
        state_container: AppContainer = request.app.state.container
        recipes = state_container.recipe_service.list_recipes()
        return {"recipes": [RecipeResponse.from_domain(item) for item in recipes]}

    @app.get("/recipes/match")
    async def match_recipe(food_name: str, request: Request) -> RecipeResponse:
        """Return a recipe for a food, or a generic healthy one."""
        state_container: AppContainer = request.app.state.container
        recipe = state_container.recipe_service.recipe_for_food(food_name)
        return RecipeResponse.from_domain(recipe)

    @app.post("/recipes")
    async def create_recipe(body: RecipePayload, request: Request) -> RecipeResponse:
        """Add a recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            recipe = state_container.recipe_service.save_recipe(body.to_domain())
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return RecipeResponse.from_domain(recipe)

    @app.put("/recipes/{recipe_id}")
    async def update_recipe(
        recipe_id: str, body: RecipePayload, request: Request
    ) -> RecipeResponse:
        """Replace an existing recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            recipe = state_container.recipe_service.update_recipe(
                recipe_id, body.to_domain(recipe_id)
            )
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return RecipeResponse.from_domain(recipe)

    @app.delete("/recipes/{recipe_id}")
    async def delete_recipe(recipe_id: str, request: Request) -> dict[str, str]:
        """Remove a recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.recipe_service.delete_recipe(recipe_id)
        except DomainError as exc:
            raise _to_http_error(exc) from exc
        return {"status": "ok"}

    @app.post("/registrations")
    async def start_registration(
        body: RegistrationRequest, request: Request
    ) -> dict[str, str]:
        """Keep sign-up details until the profile step completes."""
        state_container: AppContainer = request.app.state.container
        token = uuid4().hex
        state_container.registration_store.stash(
            token, PendingRegistration(email=body.email, name=body.name)
        )
        return {"token": token}

    @app.post("/registrations/{token}/complete")
    async def complete_registration(
        token: str, body: CompleteRegistrationRequest, request: Request
    ) -> dict[str, str]:
        """Save the profile for a pending registration."""
        state_container: AppContainer = request.app.state.container
        pending = state_container.registration_store.pop(token)
        if pending is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        profile = body.profile.model_copy(
            update={"name": body.profile.name or pending.name}
        )
        state_container.profile_service.save_profile(profile.to_domain(body.user_id))
        logger.info("Completed registration for %s", pending.email)
        return {"status": "ok", "user_id": body.user_id}

    return app


def _to_http_error(exc: DomainError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, InvalidInputError | NonPositiveEnergyNeedError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
