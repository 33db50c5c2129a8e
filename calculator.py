import logging
import math
from typing import List

import constants as c
from models import (
    BmiResult,
    BmiThresholds,
    GoalInfo,
    IdealWeightRange,
    Mission,
    NutritionResult,
    PlanResult,
    PortionResult,
    UserProfile,
)

logger = logging.getLogger("nutrition_calculator.calculator")


def round_half_up(value: float) -> int:
    # same as Math.round: 7.5 -> 8, -2.5 -> -2, 0.49999999999999994 -> 0
    whole = math.floor(value)
    if value - whole >= 0.5:
        return int(whole) + 1
    return int(whole)


def round1(value: float) -> float:
    return round_half_up(value * 10) / 10


def compute_bmr(sex: str, weight: float, height: float, age: int) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day, unrounded."""
    base = (
        c.BMR_WEIGHT_COEFFICIENT * weight
        + c.BMR_HEIGHT_COEFFICIENT * height
        - c.BMR_AGE_COEFFICIENT * age
    )
    if sex == "male":
        return base + c.BMR_MALE_OFFSET
    return base + c.BMR_FEMALE_OFFSET


def compute_tdee(bmr: float, activity_multiplier: float) -> float:
    return bmr * activity_multiplier


def compute_nutrition(profile: UserProfile) -> NutritionResult:
    """
    Daily calorie target and macro grams for a profile.

    Grams are derived from the unrounded target so that each integer in the
    result is rounded exactly once.
    """
    bmr = compute_bmr(profile.sex, profile.weight, profile.height, profile.age)
    tdee = compute_tdee(bmr, profile.activity)

    adjustment = c.CALORIE_ADJUSTMENTS.get(
        profile.goal, c.CALORIE_ADJUSTMENTS[c.DEFAULT_GOAL]
    )
    ratios = c.MACRO_RATIOS.get(profile.goal, c.MACRO_RATIOS[c.DEFAULT_GOAL])
    target_kcal = tdee + adjustment

    def grams(macro: str, kcal_per_gram: int) -> int:
        return round_half_up(target_kcal * ratios[macro] / kcal_per_gram)

    return NutritionResult(
        target_kcal=round_half_up(target_kcal),
        protein_grams=grams("protein", c.KCAL_PER_GRAM["protein"]),
        fat_grams=grams("fat", c.KCAL_PER_GRAM["fat"]),
        carb_grams=grams("carbs", c.KCAL_PER_GRAM["carbs"]),
        saturated_fat_grams=grams("saturated_fat", c.KCAL_PER_GRAM["fat"]),
    )


def compute_portions(nutrition: NutritionResult, weight_kg: float) -> PortionResult:
    """Hand portions (palms, fists, thumbs) and glasses of water per day."""
    water_ml = weight_kg * c.WATER_L_PER_KG * 1000
    return PortionResult(
        protein_portions=round_half_up(nutrition.protein_grams / c.PROTEIN_PER_PALM),
        carb_portions=round_half_up(nutrition.carb_grams / c.CARBS_PER_FIST),
        fat_portions=round_half_up(nutrition.fat_grams / c.FAT_PER_THUMB),
        water_cups=max(c.WATER_MINIMUM_CUPS, round_half_up(water_ml / c.WATER_ML_PER_CUP)),
    )


def _bmi_category(value: float) -> str:
    if value < c.BMI_UNDERWEIGHT_BELOW:
        return "Underweight"
    if value < c.BMI_OVERWEIGHT_FROM:
        return "Normal weight"
    if value < c.BMI_OBESE_FROM:
        return "Overweight"
    return "Obese"


def compute_bmi(weight_kg: float, height_cm: float) -> BmiResult:
    """
    BMI rounded to one decimal, classified on the rounded value, plus the
    body weight at each band boundary for this height.
    """
    height_m_sq = (height_cm / 100) ** 2
    value = round1(weight_kg / height_m_sq)

    thresholds = BmiThresholds(
        underweight=round1(c.BMI_UNDERWEIGHT_BELOW * height_m_sq),
        normal_end=round1(c.BMI_OVERWEIGHT_FROM * height_m_sq),
        obese_start=round1(c.BMI_OBESE_FROM * height_m_sq),
    )
    return BmiResult(
        value=value,
        category=_bmi_category(value),
        thresholds=thresholds,
        ideal_range=IdealWeightRange(
            min=thresholds.underweight,
            max=thresholds.normal_end,
        ),
    )


def get_goal_info(goal: str) -> GoalInfo:
    label, text = c.GOAL_INFO.get(goal, c.GOAL_INFO[c.DEFAULT_GOAL])
    return GoalInfo(label=label, text=text)


def get_goal_extra_missions(goal: str) -> List[Mission]:
    return [Mission(*mission) for mission in c.GOAL_EXTRA_MISSIONS.get(goal, ())]


def build_daily_missions(portions: PortionResult, goal: str) -> List[Mission]:
    """The five base missions followed by any goal-specific bonus mission."""
    base = [
        Mission(
            icon="🥩",
            aria_label="Protein",
            title=f"Eat {portions.protein_portions} Palms of Protein",
            description=f"~{c.PROTEIN_PER_PALM}g each (Chicken breast, Tofu block)",
        ),
        Mission(
            icon="🍚",
            aria_label="Carbs",
            title=f"Eat {portions.carb_portions} Fists of Carbs",
            description=f"~{c.CARBS_PER_FIST}g each (Rice, Potato, Oats)",
        ),
        Mission(
            icon="🥑",
            aria_label="Fats",
            title=f"Limit to {portions.fat_portions} Thumbs of Fat",
            description=f"~{c.FAT_PER_THUMB}g each (Oils, Nuts, Butter)",
        ),
        Mission(
            icon="🥬",
            aria_label="Vegetables",
            title="Eat 5+ Vegetable Servings",
            description="80g is one serving (1 handful)",
        ),
        Mission(
            icon="💧",
            aria_label="Water",
            title=f"Drink {portions.water_cups} Glasses",
            description=f"~{c.WATER_ML_PER_CUP}ml per glass. Stay hydrated!",
        ),
    ]
    return base + get_goal_extra_missions(goal)


class NutritionCalculator:
    """
    Core logic:
    - Compute BMR (Mifflin-St Jeor)
    - Apply activity factor -> TDEE
    - Apply the goal's calorie adjustment -> daily target
    - Split the target into macros by the goal's ratios
    - Convert macros to hand portions and water glasses
    - Classify BMI and collect the goal's advice and daily missions
    """

    def calculate_plan(self, profile: UserProfile) -> PlanResult:
        nutrition = compute_nutrition(profile)
        portions = compute_portions(nutrition, profile.weight)
        bmi = compute_bmi(profile.weight, profile.height)

        logger.info(
            "Calculated plan: goal=%s target_kcal=%s bmi=%s",
            profile.goal,
            nutrition.target_kcal,
            bmi.value,
        )
        return PlanResult(
            profile=profile,
            nutrition=nutrition,
            portions=portions,
            bmi=bmi,
            goal_info=get_goal_info(profile.goal),
            missions=tuple(build_daily_missions(portions, profile.goal)),
        )
