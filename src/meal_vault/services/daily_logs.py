"""Daily log service: one log per calendar date with derived totals."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from meal_vault.domain.history import HistoryEntry
from meal_vault.domain.meals import (
    DailyLog,
    DailyProgress,
    Meal,
    daily_log_from_record,
    daily_log_to_record,
)
from meal_vault.services.clock import Clock
from meal_vault.services.history import HistoryService
from meal_vault.services.scaling import round0, round1
from meal_vault.services.storage import (
    DAILY_LOG_PREFIX,
    JsonRecordStore,
    ReadResult,
    as_record,
    daily_log_key,
)
from meal_vault.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


def recompute_totals(date: str, meals: Iterable[Meal]) -> DailyLog:
    """Build a log whose totals are the rounded sums over its meals."""
    meal_list = tuple(meals)
    return DailyLog(
        date=date,
        meals=meal_list,
        total_calories=round0(sum(meal.calories for meal in meal_list)),
        total_protein_g=round1(sum(meal.protein_g for meal in meal_list)),
        total_carbs_g=round1(sum(meal.carbs_g for meal in meal_list)),
        total_fat_g=round1(sum(meal.fat_g for meal in meal_list)),
    )


@dataclass
class DailyLogService:
    """Persists meals per date and archives finished days into history.

    Read-modify-write cycles are serialized by a lock so overlapping calls in
    one process cannot overwrite each other's meals.
    """

    records: JsonRecordStore
    clock: Clock
    history_service: HistoryService
    user_settings_service: UserSettingsService
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def read_log(self, date: str) -> ReadResult[DailyLog]:
        """Return the stored log for a date along with any read error."""
        return await self.records.read(
            daily_log_key(date),
            parse=lambda payload: _parse_log(date, payload),
            default=lambda: DailyLog(date=date),
        )

    async def get_log(self, date: str) -> DailyLog:
        """Return the log for a date; absent or unreadable logs read as empty."""
        return (await self.read_log(date)).value

    async def add_meal(self, meal: Meal) -> DailyLog:
        """Append a meal to today's log and persist it."""
        async with self._lock:
            today = self.clock.today()
            current = await self.get_log(today)
            updated = recompute_totals(today, (*current.meals, meal))
            await self.records.write(daily_log_key(today), daily_log_to_record(updated))
        _logger.info("Meal saved: date=%s meal_id=%s", today, meal.id)
        return updated

    async def remove_meal(self, date: str, meal_id: str) -> DailyLog:
        """Remove the first meal with ``meal_id``; unknown ids leave the log as is."""
        async with self._lock:
            current = await self.get_log(date)
            index = next(
                (i for i, meal in enumerate(current.meals) if meal.id == meal_id),
                None,
            )
            if index is None:
                return current
            remaining = current.meals[:index] + current.meals[index + 1 :]
            updated = recompute_totals(date, remaining)
            await self.records.write(daily_log_key(date), daily_log_to_record(updated))
        _logger.info("Meal removed: date=%s meal_id=%s", date, meal_id)
        return updated

    async def vault_and_reset(self) -> HistoryEntry | None:
        """Archive today's log into history and delete it.

        Does nothing for an empty log. The history append and the log removal
        are separate writes; a crash between them leaves the day in both places.
        """
        async with self._lock:
            today = self.clock.today()
            log = await self.get_log(today)
            if log.is_empty:
                return None
            entry = HistoryEntry.from_log(log, vaulted_at=self.clock.now_ms())
            await self.history_service.append(entry)
            await self.records.remove(daily_log_key(today))
        _logger.info("Day vaulted: date=%s meals=%s", today, len(log.meals))
        return entry

    async def get_progress(self, date: str) -> DailyProgress:
        """Return a date's totals measured against the daily calorie goal."""
        log = await self.get_log(date)
        settings = await self.user_settings_service.get_settings()
        goal = settings.daily_calorie_goal
        percent = min(log.total_calories / goal * 100, 100.0) if goal > 0 else 100.0
        return DailyProgress(
            log=log,
            goal=goal,
            remaining_calories=goal - log.total_calories,
            progress_percent=round1(percent),
        )

    async def list_logs(self) -> list[DailyLog]:
        """Return every stored daily log, newest date first."""
        keys = (await self.records.list_keys(DAILY_LOG_PREFIX)).value
        logs = []
        for key in keys:
            result = await self.read_log(key.removeprefix(DAILY_LOG_PREFIX))
            if result.ok:
                logs.append(result.value)
        return sorted(logs, key=lambda log: log.date, reverse=True)


def _parse_log(date: str, payload: object) -> DailyLog:
    stored = daily_log_from_record(as_record(payload))
    return recompute_totals(date, stored.meals)
