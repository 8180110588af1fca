"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_vault.adapters.json_file_store import JsonFileKeyValueStorage
from meal_vault.config import Settings
from meal_vault.services.admin import AdminService
from meal_vault.services.clock import Clock, SystemClock
from meal_vault.services.daily_logs import DailyLogService
from meal_vault.services.history import HistoryService
from meal_vault.services.recipes import RecipeService
from meal_vault.services.storage import JsonRecordStore, KeyValueStorage
from meal_vault.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    daily_log_service: DailyLogService
    recipe_service: RecipeService
    history_service: HistoryService
    user_settings_service: UserSettingsService
    admin_service: AdminService


def build_container(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Create the default dependency container.

    Storage defaults to the JSON file named in settings and the clock to the
    system clock in the configured timezone.
    """
    resolved_settings = settings or Settings()
    resolved_storage = storage or JsonFileKeyValueStorage.create(
        resolved_settings.storage_path
    )
    resolved_clock = clock or SystemClock(resolved_settings.timezone)
    records = JsonRecordStore(resolved_storage)
    history_service = HistoryService(records)
    user_settings_service = UserSettingsService(records)
    daily_log_service = DailyLogService(
        records=records,
        clock=resolved_clock,
        history_service=history_service,
        user_settings_service=user_settings_service,
    )
    recipe_service = RecipeService(records)
    admin_service = AdminService(
        records=records,
        daily_log_service=daily_log_service,
        recipe_service=recipe_service,
        history_service=history_service,
        user_settings_service=user_settings_service,
    )
    return AppContainer(
        settings=resolved_settings,
        clock=resolved_clock,
        daily_log_service=daily_log_service,
        recipe_service=recipe_service,
        history_service=history_service,
        user_settings_service=user_settings_service,
        admin_service=admin_service,
    )
