import pytest


@pytest.fixture
def profile() -> dict:
    return {"bmr": 1800, "weightKg": 80, "defaultActivityFactor": 1.2, "dailyKcalTarget": 2200}


@pytest.fixture
def walk() -> dict:
    return {"id": "a1", "type": "walk", "distance_km": 2, "duration_min": 30, "intensity": 50}


@pytest.fixture
def advanced_day(walk: dict) -> dict:
    return {
        "date": "2024-03-01",
        "activityMode": "advanced_full",
        "activities": [walk],
        "steps": 3000,
        "survey": {"subjective": 60},
        "meals": [
            {"mealType": "lunch", "totalKcal": 500},
            {"mealType": "extra", "totalKcal": 120},
        ],
    }
