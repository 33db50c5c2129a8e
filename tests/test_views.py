"""Tests for result page helpers."""

import pytest

from calculator import compute_bmi
from models import PortionResult
from views import bmi_display, build_food_guide


def test_bmi_display_normal() -> None:
    display = bmi_display(compute_bmi(70, 175))

    assert display["color"] == "var(--secondary)"
    assert display["scale_percent"] == pytest.approx(31.6)


@pytest.mark.parametrize(
    "weight,color,percent",
    [
        (45, "var(--accent)", 0.0),
        (85, "var(--accent)", 51.2),
        (160, "var(--error)", 100.0),
    ],
)
def test_bmi_display_colours_and_clamping(weight, color, percent) -> None:
    display = bmi_display(compute_bmi(weight, 175))

    assert display["color"] == color
    assert display["scale_percent"] == pytest.approx(percent)


def test_food_guide_sections() -> None:
    portions = PortionResult(protein_portions=7, carb_portions=8, fat_portions=6, water_cups=10)

    guide = build_food_guide(portions)

    assert [section["title"] for section in guide] == ["Proteins", "Carbs", "Fats"]
    assert [section["target"] for section in guide] == [7, 8, 6]
    assert [section["portion_size"] for section in guide] == [25, 40, 12]
    assert guide[2]["target_label"] == "Limit"
    assert guide[0]["foods"][0].name == "Chicken Breast"
    assert all(len(section["foods"]) == 7 for section in guide)
