"""Domain model for user settings."""

from dataclasses import dataclass

DEFAULT_DAILY_CALORIE_GOAL = 2000


@dataclass(frozen=True)
class UserSettings:
    """Singleton settings record."""

    daily_calorie_goal: int = DEFAULT_DAILY_CALORIE_GOAL


def settings_to_record(settings: UserSettings) -> dict[str, object]:
    return {"dailyCalorieGoal": settings.daily_calorie_goal}


def settings_from_record(row: dict[str, object]) -> UserSettings:
    return UserSettings(
        daily_calorie_goal=int(row.get("dailyCalorieGoal", DEFAULT_DAILY_CALORIE_GOAL)),
    )
