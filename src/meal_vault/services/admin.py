"""Maintenance service for exporting and wiping stored data."""

import logging
from dataclasses import dataclass

from meal_vault.domain.history import history_entry_to_record
from meal_vault.domain.meals import daily_log_to_record
from meal_vault.domain.recipes import recipe_to_record
from meal_vault.domain.user_settings import settings_to_record
from meal_vault.services.daily_logs import DailyLogService
from meal_vault.services.history import HistoryService
from meal_vault.services.recipes import RecipeService
from meal_vault.services.storage import JsonRecordStore
from meal_vault.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Service for export and debug reset."""

    records: JsonRecordStore
    daily_log_service: DailyLogService
    recipe_service: RecipeService
    history_service: HistoryService
    user_settings_service: UserSettingsService

    async def export_data(self) -> dict[str, object]:
        """Return every stored record in its persisted JSON shape."""
        logs = await self.daily_log_service.list_logs()
        recipes = await self.recipe_service.get_recipes()
        history = await self.history_service.get_history()
        settings = await self.user_settings_service.get_settings()
        return {
            "daily_logs": [daily_log_to_record(log) for log in logs],
            "saved_recipes": [recipe_to_record(recipe) for recipe in recipes],
            "history_entries": [history_entry_to_record(entry) for entry in history],
            "user_settings": settings_to_record(settings),
        }

    async def clear_all_data(self) -> None:
        """Remove every stored key, history included."""
        await self.records.clear()
        _logger.info("All data cleared")
