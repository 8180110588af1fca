"""Domain models for meal logging."""

from dataclasses import dataclass
from enum import Enum

from meal_vault.services.scaling import round0


class MealType(str, Enum):
    """How a meal was produced."""

    CUSTOM = "custom"
    PREPPED = "prepped"


@dataclass(frozen=True)
class Meal:
    """One logged intake event. Never mutated after creation."""

    id: str
    name: str
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float
    servings: float
    timestamp: int
    type: MealType


@dataclass(frozen=True)
class DailyLog:
    """All meals logged on one calendar date with derived totals."""

    date: str
    meals: tuple[Meal, ...] = ()
    total_calories: int = 0
    total_protein_g: float = 0.0
    total_carbs_g: float = 0.0
    total_fat_g: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.meals


@dataclass(frozen=True)
class Ingredient:
    """Ingredient of a recipe with nutrition already scaled to the amount used."""

    id: str
    name: str
    amount: float
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    unit: str = "g"


@dataclass(frozen=True)
class DailyProgress:
    """Today's totals measured against the calorie goal."""

    log: DailyLog
    goal: int
    remaining_calories: int
    progress_percent: float


def number_field(row: dict[str, object], key: str, default: float = 0.0) -> float:
    """Read a numeric field; absent and null values take the default."""
    value = row.get(key)
    return default if value is None else float(value)


def meal_to_record(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "carbs": meal.carbs_g,
        "fat": meal.fat_g,
        "servings": meal.servings,
        "timestamp": meal.timestamp,
        "type": meal.type.value,
    }


def meal_from_record(row: dict[str, object]) -> Meal:
    return Meal(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=round0(number_field(row, "calories")),
        protein_g=number_field(row, "protein"),
        carbs_g=number_field(row, "carbs"),
        fat_g=number_field(row, "fat"),
        servings=number_field(row, "servings", 1.0),
        timestamp=int(number_field(row, "timestamp")),
        type=MealType(row.get("type", MealType.CUSTOM.value)),
    )


def daily_log_to_record(log: DailyLog) -> dict[str, object]:
    return {
        "date": log.date,
        "meals": [meal_to_record(meal) for meal in log.meals],
        "totalCalories": log.total_calories,
        "totalProtein": log.total_protein_g,
        "totalCarbs": log.total_carbs_g,
        "totalFat": log.total_fat_g,
    }


def daily_log_from_record(row: dict[str, object]) -> DailyLog:
    meals = row.get("meals") or []
    if not isinstance(meals, list):
        raise ValueError("meals must be a list")
    return DailyLog(
        date=str(row["date"]),
        meals=tuple(meal_from_record(meal) for meal in meals),
        total_calories=round0(number_field(row, "totalCalories")),
        total_protein_g=number_field(row, "totalProtein"),
        total_carbs_g=number_field(row, "totalCarbs"),
        total_fat_g=number_field(row, "totalFat"),
    )


def ingredient_to_record(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
        "calories": ingredient.calories,
        "protein": ingredient.protein_g,
        "carbs": ingredient.carbs_g,
        "fat": ingredient.fat_g,
    }


def ingredient_from_record(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=str(row.get("id", "")),
        name=str(row.get("name", "")),
        amount=number_field(row, "amount"),
        unit=str(row.get("unit") or "g"),
        calories=number_field(row, "calories"),
        protein_g=number_field(row, "protein"),
        carbs_g=number_field(row, "carbs"),
        fat_g=number_field(row, "fat"),
    )
