"""Built-in food database with nutrition per 100 g."""

from meal_vault.domain.nutrition import FoodItem

ALL_CATEGORIES = "All"
CATEGORIES = (ALL_CATEGORIES, "Protein", "Carbs", "Vegetables", "Fats")

FOOD_DATABASE: tuple[FoodItem, ...] = (
    FoodItem("1", "Chicken Breast", 165, 31, 3.6, 0, "Protein"),
    FoodItem("2", "Salmon", 208, 22, 12, 0, "Protein"),
    FoodItem("3", "Eggs", 155, 13, 11, 1.1, "Protein"),
    FoodItem("4", "Greek Yogurt", 59, 10, 0.4, 3.6, "Protein"),
    FoodItem("5", "Tofu", 76, 8, 4.8, 1.9, "Protein"),
    FoodItem("6", "Brown Rice", 111, 2.6, 0.9, 23, "Carbs"),
    FoodItem("7", "Quinoa", 120, 4.4, 1.9, 22, "Carbs"),
    FoodItem("8", "Sweet Potato", 86, 1.6, 0.1, 20, "Carbs"),
    FoodItem("9", "Oats", 389, 16.9, 6.9, 66, "Carbs"),
    FoodItem("10", "Whole Wheat Bread", 247, 13, 4.2, 41, "Carbs"),
    FoodItem("11", "Broccoli", 34, 2.8, 0.4, 7, "Vegetables"),
    FoodItem("12", "Spinach", 23, 2.9, 0.4, 3.6, "Vegetables"),
    FoodItem("13", "Bell Peppers", 31, 1, 0.3, 7, "Vegetables"),
    FoodItem("14", "Carrots", 41, 0.9, 0.2, 10, "Vegetables"),
    FoodItem("15", "Tomatoes", 18, 0.9, 0.2, 3.9, "Vegetables"),
    FoodItem("16", "Avocado", 160, 2, 15, 9, "Fats"),
    FoodItem("17", "Olive Oil", 884, 0, 100, 0, "Fats"),
    FoodItem("18", "Almonds", 579, 21, 50, 22, "Fats"),
    FoodItem("19", "Peanut Butter", 588, 25, 50, 20, "Fats"),
    FoodItem("20", "Coconut Oil", 862, 0, 100, 0, "Fats"),
)


def list_foods(
    query: str | None = None, category: str = ALL_CATEGORIES
) -> list[FoodItem]:
    """Filter foods by a case-insensitive name substring and a category."""
    needle = (query or "").lower()
    return [
        food
        for food in FOOD_DATABASE
        if needle in food.name.lower()
        and (category == ALL_CATEGORIES or food.category == category)
    ]


def get_food(food_id: str) -> FoodItem | None:
    """Return a food by id."""
    return next((food for food in FOOD_DATABASE if food.id == food_id), None)
