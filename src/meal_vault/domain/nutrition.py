"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients for a portion, batch or day."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


ZERO_MACROS = MacroProfile(calories=0.0, protein_g=0.0, fat_g=0.0, carbs_g=0.0)


@dataclass(frozen=True)
class FoodItem:
    """Built-in food database entry with nutrition per 100 g."""

    id: str
    name: str
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    category: str

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )
