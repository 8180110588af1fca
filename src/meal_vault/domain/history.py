"""Domain models for vaulted days."""

from dataclasses import dataclass

from meal_vault.domain.meals import (
    DailyLog,
    Meal,
    meal_from_record,
    meal_to_record,
    number_field,
)
from meal_vault.services.scaling import round0


@dataclass(frozen=True)
class HistoryEntry:
    """Immutable snapshot of a day's log taken when it was vaulted."""

    date: str
    total_calories: int
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
    meals: tuple[Meal, ...]
    vaulted_at: int

    @classmethod
    def from_log(cls, log: DailyLog, vaulted_at: int) -> "HistoryEntry":
        return cls(
            date=log.date,
            total_calories=log.total_calories,
            total_protein_g=log.total_protein_g,
            total_carbs_g=log.total_carbs_g,
            total_fat_g=log.total_fat_g,
            meals=tuple(log.meals),
            vaulted_at=vaulted_at,
        )


def history_entry_to_record(entry: HistoryEntry) -> dict[str, object]:
    return {
        "date": entry.date,
        "totalCalories": entry.total_calories,
        "totalProtein": entry.total_protein_g,
        "totalCarbs": entry.total_carbs_g,
        "totalFat": entry.total_fat_g,
        "meals": [meal_to_record(meal) for meal in entry.meals],
        "vaultedAt": entry.vaulted_at,
    }


def history_entry_from_record(row: dict[str, object]) -> HistoryEntry:
    meals = row.get("meals") or []
    if not isinstance(meals, list):
        raise ValueError("meals must be a list")
    return HistoryEntry(
        date=str(row["date"]),
        total_calories=round0(number_field(row, "totalCalories")),
        total_protein_g=number_field(row, "totalProtein"),
        total_carbs_g=number_field(row, "totalCarbs"),
        total_fat_g=number_field(row, "totalFat"),
        meals=tuple(meal_from_record(meal) for meal in meals),
        vaulted_at=int(number_field(row, "vaultedAt")),
    )
