"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from main import app
from models import NutritionResult, UserProfile


@pytest.fixture
def base_profile() -> UserProfile:
    return UserProfile(
        sex="male",
        age=30,
        weight=75,
        height=175,
        activity=1.55,
        goal="maintain",
    )


@pytest.fixture
def sample_nutrition() -> NutritionResult:
    return NutritionResult(
        target_kcal=2500,
        protein_grams=150,
        fat_grams=70,
        carb_grams=300,
        saturated_fat_grams=28,
    )


@pytest.fixture
def form_data() -> dict:
    return {
        "sex": "male",
        "age": "30",
        "weight": "75",
        "height": "175",
        "activity": "1.55",
        "goal": "maintain",
    }


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
