from typing import List

import constants as c
from models import BmiResult, FoodItem, PortionResult

BMI_COLORS = {
    "Underweight": "var(--accent)",
    "Normal weight": "var(--secondary)",
    "Overweight": "var(--accent)",
    "Obese": "var(--error)",
}

# the BMI bar spans BMI 15 to 40
BMI_SCALE_MIN = 15
BMI_SCALE_SPAN = 25
BMI_SCALE_LABELS = (15, 18.5, 25, 30, 40)


def bmi_display(bmi: BmiResult) -> dict:
    """Colour and bar position for the BMI card."""
    percent = (bmi.value - BMI_SCALE_MIN) / BMI_SCALE_SPAN * 100
    return {
        "color": BMI_COLORS.get(bmi.category, "var(--accent)"),
        "scale_percent": round(min(100.0, max(0.0, percent)), 1),
        "scale_labels": BMI_SCALE_LABELS,
    }


def build_food_guide(portions: PortionResult) -> List[dict]:
    """
    Food guide sections: how many portions of each macro to eat (or, for
    fats, not exceed), the grams in one portion, and foods that make one.
    """
    return [
        {
            "title": "Proteins",
            "target_label": "Target",
            "target": portions.protein_portions,
            "portion_size": c.PROTEIN_PER_PALM,
            "portion_unit": "protein",
            "foods": [FoodItem(*food) for food in c.PROTEIN_FOODS],
        },
        {
            "title": "Carbs",
            "target_label": "Target",
            "target": portions.carb_portions,
            "portion_size": c.CARBS_PER_FIST,
            "portion_unit": "carbs",
            "foods": [FoodItem(*food) for food in c.CARB_FOODS],
        },
        {
            "title": "Fats",
            "target_label": "Limit",
            "target": portions.fat_portions,
            "portion_size": c.FAT_PER_THUMB,
            "portion_unit": "fat",
            "foods": [FoodItem(*food) for food in c.FAT_FOODS],
        },
    ]
