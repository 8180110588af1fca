"""Tests for the built-in food database."""

from meal_vault.services.food_database import FOOD_DATABASE, get_food, list_foods


def test_list_all_foods() -> None:
    assert list_foods() == list(FOOD_DATABASE)


def test_search_is_case_insensitive() -> None:
    names = [food.name for food in list_foods("OIL")]

    assert names == ["Olive Oil", "Coconut Oil"]


def test_filter_by_category_and_query() -> None:
    foods = list_foods("o", "Vegetables")

    assert {food.name for food in foods} == {"Broccoli", "Carrots", "Tomatoes"}


def test_get_food_missing_returns_none() -> None:
    assert get_food("999") is None
    assert get_food("9").name == "Oats"
