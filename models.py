from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class UserProfile:
    sex: str                   # male, female
    age: int                   # years
    weight: float              # kg
    height: float              # cm
    activity: float            # 1.2, 1.375, 1.55, 1.725, 1.9
    goal: str                  # maintain, lose, gain, sugar, cholesterol, pressure


@dataclass(frozen=True)
class NutritionResult:
    target_kcal: int
    protein_grams: int
    fat_grams: int
    carb_grams: int
    saturated_fat_grams: int


@dataclass(frozen=True)
class PortionResult:
    protein_portions: int      # palms
    carb_portions: int         # fists
    fat_portions: int          # thumbs
    water_cups: int


@dataclass(frozen=True)
class BmiThresholds:
    """Body weight in kg at each BMI band boundary for a given height."""

    underweight: float         # BMI 18.5
    normal_end: float          # BMI 25
    obese_start: float         # BMI 30


@dataclass(frozen=True)
class IdealWeightRange:
    min: float
    max: float


@dataclass(frozen=True)
class BmiResult:
    value: float
    category: str
    thresholds: BmiThresholds
    ideal_range: IdealWeightRange


@dataclass(frozen=True)
class GoalInfo:
    label: str
    text: str


@dataclass(frozen=True)
class Mission:
    icon: str
    aria_label: str
    title: str
    description: str


@dataclass(frozen=True)
class FoodItem:
    name: str
    amount: str


@dataclass(frozen=True)
class PlanResult:
    profile: UserProfile
    nutrition: NutritionResult
    portions: PortionResult
    bmi: BmiResult
    goal_info: GoalInfo
    missions: Tuple[Mission, ...]
