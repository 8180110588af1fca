"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse

from meal_vault.api.admin import router as admin_router
from meal_vault.api.schemas import (
    IngredientInput,
    MealCreate,
    PreppedMealRequest,
    QuickAddRequest,
    RecipeCreate,
    ServingRequest,
    SettingsUpdate,
)
from meal_vault.app_logging import configure_logging
from meal_vault.containers import AppContainer
from meal_vault.domain.history import history_entry_to_record
from meal_vault.domain.meals import (
    DailyProgress,
    Ingredient,
    daily_log_to_record,
    meal_to_record,
)
from meal_vault.domain.nutrition import FoodItem, MacroProfile
from meal_vault.domain.recipes import recipe_to_record
from meal_vault.domain.user_settings import UserSettings, settings_to_record
from meal_vault.errors import PersistenceWriteError
from meal_vault.services import food_database
from meal_vault.services.meals import (
    build_custom_meal,
    build_ingredient,
    build_prepped_meal,
    build_quick_add_meal,
    build_recipe,
)
from meal_vault.services.scaling import (
    logged_amount,
    parse_number,
    per_serving,
    scale_ingredient,
)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
RETRY_MESSAGE = "Could not save your changes. Please try again."


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Meal Vault started: env=%s", container.settings.environment)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(PersistenceWriteError)
    async def persistence_write_error(
        request: Request, exc: PersistenceWriteError
    ) -> JSONResponse:
        logger.warning("Write failed for %s %s: %s", request.method, request.url, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": RETRY_MESSAGE, "retry": True},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/logs/today")
    async def today_log(request: Request) -> dict[str, object]:
        """Return today's log."""
        state_container: AppContainer = request.app.state.container
        today = state_container.clock.today()
        log = await state_container.daily_log_service.get_log(today)
        return daily_log_to_record(log)

    @app.get("/logs/{date}")
    async def date_log(
        request: Request, date: str = Path(pattern=DATE_PATTERN)
    ) -> dict[str, object]:
        """Return the log for a date."""
        state_container: AppContainer = request.app.state.container
        log = await state_container.daily_log_service.get_log(date)
        return daily_log_to_record(log)

    @app.get("/logs/{date}/progress")
    async def date_progress(
        request: Request, date: str = Path(pattern=DATE_PATTERN)
    ) -> dict[str, object]:
        """Return totals for a date against the calorie goal."""
        state_container: AppContainer = request.app.state.container
        progress = await state_container.daily_log_service.get_progress(date)
        return _serialize_progress(progress)

    @app.delete("/logs/{date}/meals/{meal_id}")
    async def delete_meal(
        request: Request, meal_id: str, date: str = Path(pattern=DATE_PATTERN)
    ) -> dict[str, object]:
        """Remove a meal from a date's log."""
        state_container: AppContainer = request.app.state.container
        log = await state_container.daily_log_service.remove_meal(date, meal_id)
        return daily_log_to_record(log)

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(payload: MealCreate, request: Request) -> dict[str, object]:
        """Log an ad-hoc meal to today's log."""
        state_container: AppContainer = request.app.state.container
        meal = build_custom_meal(
            payload.name,
            MacroProfile(
                calories=payload.calories,
                protein_g=payload.protein,
                fat_g=payload.fat,
                carbs_g=payload.carbs,
            ),
            state_container.clock,
        )
        log = await state_container.daily_log_service.add_meal(meal)
        return {"meal": meal_to_record(meal), "log": daily_log_to_record(log)}

    @app.post("/meals/quick-add", status_code=status.HTTP_201_CREATED)
    async def quick_add(
        payload: QuickAddRequest, request: Request
    ) -> dict[str, object]:
        """Log a gram amount of a food database entry."""
        state_container: AppContainer = request.app.state.container
        food = food_database.get_food(payload.food_id)
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        meal = build_quick_add_meal(food, payload.amount_g, state_container.clock)
        log = await state_container.daily_log_service.add_meal(meal)
        return {"meal": meal_to_record(meal), "log": daily_log_to_record(log)}

    @app.post("/meals/prepped", status_code=status.HTTP_201_CREATED)
    async def add_prepped(
        payload: PreppedMealRequest, request: Request
    ) -> dict[str, object]:
        """Log servings of a batch recipe."""
        state_container: AppContainer = request.app.state.container
        if payload.recipe_id:
            recipes = await state_container.recipe_service.get_recipes()
            recipe = next((r for r in recipes if r.id == payload.recipe_id), None)
            if recipe is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
            name = recipe.name
            batch = MacroProfile(
                calories=recipe.calories,
                protein_g=recipe.protein_g,
                fat_g=recipe.fat_g,
                carbs_g=recipe.carbs_g,
            )
        else:
            if not payload.name or payload.calories is None:
                raise HTTPException(
                    status_code=422,
                    detail="Name and calories are required without a recipe.",
                )
            name = payload.name
            batch = MacroProfile(
                calories=payload.calories,
                protein_g=payload.protein,
                fat_g=payload.fat,
                carbs_g=payload.carbs,
            )
        serving = per_serving(batch, payload.total_servings)
        meal = build_prepped_meal(
            name, serving, payload.servings_to_log, state_container.clock
        )
        log = await state_container.daily_log_service.add_meal(meal)
        return {"meal": meal_to_record(meal), "log": daily_log_to_record(log)}

    @app.post("/vault")
    async def vault(request: Request) -> dict[str, object]:
        """Archive today's log into history and reset it."""
        state_container: AppContainer = request.app.state.container
        entry = await state_container.daily_log_service.vault_and_reset()
        if entry is None:
            return {"vaulted": False, "entry": None}
        return {"vaulted": True, "entry": history_entry_to_record(entry)}

    @app.get("/history")
    async def history(request: Request) -> dict[str, object]:
        """Return vaulted days, newest date first."""
        state_container: AppContainer = request.app.state.container
        entries = await state_container.history_service.get_history()
        return {"entries": [history_entry_to_record(entry) for entry in entries]}

    @app.get("/recipes")
    async def list_recipes(
        request: Request, query: str | None = None
    ) -> dict[str, object]:
        """Return saved recipes, optionally filtered by name."""
        state_container: AppContainer = request.app.state.container
        recipes = await state_container.recipe_service.search_recipes(query)
        return {"recipes": [recipe_to_record(recipe) for recipe in recipes]}

    @app.post("/recipes", status_code=status.HTTP_201_CREATED)
    async def create_recipe(
        payload: RecipeCreate, request: Request
    ) -> dict[str, object]:
        """Build a recipe from ingredients and save it."""
        state_container: AppContainer = request.app.state.container
        ingredients = [_ingredient_from_input(item) for item in payload.ingredients]
        recipe = build_recipe(payload.name, ingredients, state_container.clock)
        await state_container.recipe_service.save_recipe(recipe)
        return recipe_to_record(recipe)

    @app.delete("/recipes/{recipe_id}")
    async def delete_recipe(recipe_id: str, request: Request) -> dict[str, str]:
        """Delete a recipe by id."""
        state_container: AppContainer = request.app.state.container
        await state_container.recipe_service.delete_recipe(recipe_id)
        return {"status": "ok"}

    @app.get("/settings")
    async def get_settings(request: Request) -> dict[str, object]:
        """Return user settings."""
        state_container: AppContainer = request.app.state.container
        settings = await state_container.user_settings_service.get_settings()
        return settings_to_record(settings)

    @app.put("/settings")
    async def put_settings(
        payload: SettingsUpdate, request: Request
    ) -> dict[str, object]:
        """Replace user settings."""
        state_container: AppContainer = request.app.state.container
        settings = UserSettings(daily_calorie_goal=payload.daily_calorie_goal)
        await state_container.user_settings_service.save_settings(settings)
        return settings_to_record(settings)

    @app.get("/foods")
    async def list_foods(
        query: str | None = None, category: str = food_database.ALL_CATEGORIES
    ) -> dict[str, object]:
        """Search the built-in food database."""
        foods = food_database.list_foods(query, category)
        return {"foods": [_serialize_food(food) for food in foods]}

    @app.post("/scale/ingredient")
    async def scale(payload: IngredientInput) -> dict[str, object]:
        """Scale label nutrition to the amount used."""
        scaled = scale_ingredient(
            payload.label_calories,
            payload.label_protein,
            payload.label_carbs,
            payload.label_fat,
            payload.label_weight_g,
            payload.amount_g,
        )
        return _serialize_macros(scaled)

    @app.post("/scale/serving")
    async def scale_serving(payload: ServingRequest) -> dict[str, object]:
        """Split batch totals into servings and the amount to log."""
        batch = MacroProfile(
            calories=parse_number(payload.calories),
            protein_g=parse_number(payload.protein),
            fat_g=parse_number(payload.fat),
            carbs_g=parse_number(payload.carbs),
        )
        serving = per_serving(batch, payload.total_servings)
        logged = logged_amount(serving, payload.servings_to_log)
        return {
            "per_serving": _serialize_macros(serving),
            "logged": _serialize_macros(logged),
        }

    return app


def _ingredient_from_input(item: IngredientInput) -> Ingredient:
    return build_ingredient(
        name=item.name,
        label_calories=item.label_calories,
        label_protein=item.label_protein,
        label_carbs=item.label_carbs,
        label_fat=item.label_fat,
        label_weight_g=item.label_weight_g,
        amount_used_g=item.amount_g,
        unit=item.unit,
    )


def _serialize_macros(macros: MacroProfile) -> dict[str, float]:
    return {
        "calories": macros.calories,
        "protein": macros.protein_g,
        "carbs": macros.carbs_g,
        "fat": macros.fat_g,
    }


def _serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        **_serialize_macros(food.macros),
    }


def _serialize_progress(progress: DailyProgress) -> dict[str, object]:
    return {
        "log": daily_log_to_record(progress.log),
        "goal": progress.goal,
        "remaining_calories": progress.remaining_calories,
        "progress_percent": progress.progress_percent,
    }
