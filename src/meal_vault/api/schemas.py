"""Request models for the HTTP API.

Validation of user input happens here, before anything reaches the services.
Raw numeric fields accept text as typed by the user; the scaling functions turn
invalid text into 0.
"""

from pydantic import BaseModel, ConfigDict, Field

RawNumber = float | str | None


class MealCreate(BaseModel):
    """Ad-hoc meal with realized nutrition."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)


class QuickAddRequest(BaseModel):
    """Gram amount of a food database entry."""

    model_config = ConfigDict(allow_inf_nan=False)

    food_id: str
    amount_g: float = Field(gt=0)


class PreppedMealRequest(BaseModel):
    """Servings of a saved recipe or of manually entered batch totals."""

    model_config = ConfigDict(allow_inf_nan=False)

    recipe_id: str | None = None
    name: str | None = None
    calories: float | None = Field(default=None, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    total_servings: float = Field(gt=0)
    servings_to_log: float = Field(default=1, gt=0)


class IngredientInput(BaseModel):
    """Label nutrition for a reference weight plus the amount used."""

    name: str = ""
    label_calories: RawNumber = None
    label_protein: RawNumber = None
    label_carbs: RawNumber = None
    label_fat: RawNumber = None
    label_weight_g: RawNumber = None
    amount_g: RawNumber = None
    unit: str = "g"


class RecipeCreate(BaseModel):
    """Recipe built from one or more ingredients."""

    name: str = Field(min_length=1)
    ingredients: list[IngredientInput] = Field(min_length=1)


class ServingRequest(BaseModel):
    """Batch totals to split into servings."""

    calories: RawNumber = None
    protein: RawNumber = None
    carbs: RawNumber = None
    fat: RawNumber = None
    total_servings: RawNumber = None
    servings_to_log: RawNumber = None


class SettingsUpdate(BaseModel):
    """Settings as entered by the user."""

    daily_calorie_goal: int = Field(ge=500, le=5000)
