"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from meal_vault.api.app import create_app


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_today_log_starts_empty(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/logs/today")

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-03-05"
    assert data["meals"] == []
    assert data["totalCalories"] == 0


def test_add_and_delete_meal(container) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/meals", json={"name": "Toast", "calories": 180.4, "protein": 6.25}
    )
    assert created.status_code == 201
    meal = created.json()["meal"]
    assert meal["calories"] == 180
    assert meal["protein"] == 6.3

    deleted = client.delete(f"/logs/2024-03-05/meals/{meal['id']}")

    assert deleted.status_code == 200
    assert deleted.json()["meals"] == []
    assert deleted.json()["totalCalories"] == 0


def test_invalid_date_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/logs/March-5")

    assert response.status_code == 422


def test_quick_add_from_food_database(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/quick-add", json={"food_id": "1", "amount_g": 200})

    assert response.status_code == 201
    data = response.json()
    assert data["meal"]["name"] == "Chicken Breast (200g)"
    assert data["log"]["totalCalories"] == 330
    assert data["log"]["totalProtein"] == 62.0


def test_quick_add_unknown_food(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/quick-add", json={"food_id": "x", "amount_g": 50})

    assert response.status_code == 404


def test_quick_add_requires_positive_amount(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/quick-add", json={"food_id": "1", "amount_g": 0})

    assert response.status_code == 422


def test_recipe_then_prepped_meal(container) -> None:
    client = TestClient(create_app(container))
    recipe = client.post(
        "/recipes",
        json={
            "name": "Chili",
            "ingredients": [
                {
                    "name": "Beef",
                    "label_calories": "250",
                    "label_protein": "26",
                    "label_carbs": "0",
                    "label_fat": "15",
                    "label_weight_g": "100",
                    "amount_g": "400",
                },
                {
                    "name": "Beans",
                    "label_calories": 100,
                    "label_protein": 7,
                    "label_carbs": 20,
                    "label_fat": 0,
                    "label_weight_g": 100,
                    "amount_g": 300,
                },
            ],
        },
    )
    assert recipe.status_code == 201
    recipe_data = recipe.json()
    assert recipe_data["calories"] == 1300
    assert len(recipe_data["ingredients"]) == 2

    logged = client.post(
        "/meals/prepped",
        json={
            "recipe_id": recipe_data["id"],
            "total_servings": 4,
            "servings_to_log": 1,
        },
    )

    assert logged.status_code == 201
    meal = logged.json()["meal"]
    assert meal["name"] == "Chili (1 serving)"
    assert meal["calories"] == 325
    assert meal["type"] == "prepped"
    listed = client.get("/recipes", params={"query": "chi"}).json()["recipes"]
    assert [item["id"] for item in listed] == [recipe_data["id"]]


def test_prepped_meal_manual_totals(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/prepped",
        json={
            "name": "Lasagna",
            "calories": 800,
            "protein": 60,
            "carbs": 80,
            "fat": 20,
            "total_servings": 4,
            "servings_to_log": 2,
        },
    )

    assert response.status_code == 201
    meal = response.json()["meal"]
    assert meal["calories"] == 400
    assert meal["protein"] == 30
    assert meal["servings"] == 2


def test_prepped_meal_without_recipe_requires_calories(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meals/prepped", json={"name": "X", "total_servings": 2})

    assert response.status_code == 422


def test_prepped_meal_unknown_recipe(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/prepped", json={"recipe_id": "missing", "total_servings": 2}
    )

    assert response.status_code == 404


def test_delete_recipe(container) -> None:
    client = TestClient(create_app(container))
    created = client.post(
        "/recipes",
        json={"name": "Soup", "ingredients": [{"name": "Water", "amount_g": 100}]},
    ).json()

    response = client.delete(f"/recipes/{created['id']}")

    assert response.status_code == 200
    assert client.get("/recipes").json()["recipes"] == []


def test_vault_flow(container) -> None:
    client = TestClient(create_app(container))

    empty = client.post("/vault")
    assert empty.json() == {"vaulted": False, "entry": None}

    client.post("/meals", json={"name": "Lunch", "calories": 600})
    vaulted = client.post("/vault")

    assert vaulted.json()["vaulted"] is True
    assert vaulted.json()["entry"]["totalCalories"] == 600
    history = client.get("/history").json()["entries"]
    assert len(history) == 1
    assert client.get("/logs/today").json()["meals"] == []


def test_settings_validation(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/settings").json() == {"dailyCalorieGoal": 2000}
    assert client.put("/settings", json={"daily_calorie_goal": 400}).status_code == 422
    assert client.put("/settings", json={"daily_calorie_goal": 5001}).status_code == 422

    response = client.put("/settings", json={"daily_calorie_goal": 2500})

    assert response.status_code == 200
    assert client.get("/settings").json() == {"dailyCalorieGoal": 2500}


def test_progress_endpoint(container) -> None:
    client = TestClient(create_app(container))
    client.put("/settings", json={"daily_calorie_goal": 1000})
    client.post("/meals", json={"name": "Lunch", "calories": 250})

    data = client.get("/logs/2024-03-05/progress").json()

    assert data["goal"] == 1000
    assert data["remaining_calories"] == 750
    assert data["progress_percent"] == 25.0


def test_write_failure_returns_retry_prompt(container, storage) -> None:
    client = TestClient(create_app(container))
    storage.fail_writes = True

    response = client.post("/meals", json={"name": "Lunch", "calories": 250})

    assert response.status_code == 503
    assert response.json()["retry"] is True


def test_read_failure_is_invisible(container, storage) -> None:
    client = TestClient(create_app(container))
    storage.fail_reads = True

    assert client.get("/logs/today").status_code == 200
    assert client.get("/history").json() == {"entries": []}
    assert client.get("/settings").json() == {"dailyCalorieGoal": 2000}


def test_foods_endpoint(container) -> None:
    client = TestClient(create_app(container))

    foods = client.get("/foods", params={"category": "Fats"}).json()["foods"]

    assert len(foods) == 5
    assert foods[0]["name"] == "Avocado"


def test_scale_endpoints(container) -> None:
    client = TestClient(create_app(container))

    scaled = client.post(
        "/scale/ingredient",
        json={
            "label_calories": "200",
            "label_protein": "20",
            "label_carbs": "10",
            "label_fat": "5",
            "label_weight_g": "50",
            "amount_g": "75",
        },
    ).json()
    serving = client.post(
        "/scale/serving",
        json={
            "calories": 800,
            "protein": 60,
            "carbs": 80,
            "fat": 20,
            "total_servings": "4",
            "servings_to_log": "2",
        },
    ).json()

    assert scaled == {"calories": 300, "protein": 30.0, "carbs": 15.0, "fat": 7.5}
    assert serving["per_serving"] == {
        "calories": 200.0,
        "protein": 15.0,
        "carbs": 20.0,
        "fat": 5.0,
    }
    assert serving["logged"]["calories"] == 400.0


def test_non_finite_numbers_rejected(container, storage) -> None:
    client = TestClient(create_app(container))

    meal = client.post("/meals", json={"name": "x", "calories": "inf"})
    prepped = client.post(
        "/meals/prepped",
        json={
            "name": "Stew",
            "calories": 800,
            "protein": "Infinity",
            "total_servings": 4,
        },
    )
    quick = client.post("/meals/quick-add", json={"food_id": "1", "amount_g": "NaN"})

    assert meal.status_code == 422
    assert prepped.status_code == 422
    assert quick.status_code == 422
    assert storage.writes == []
