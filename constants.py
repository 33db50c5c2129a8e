from types import MappingProxyType

# Mifflin-St Jeor coefficients
BMR_WEIGHT_COEFFICIENT = 10
BMR_HEIGHT_COEFFICIENT = 6.25
BMR_AGE_COEFFICIENT = 5
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

KCAL_PER_GRAM = MappingProxyType({
    "protein": 4,
    "carbs": 4,
    "fat": 9,
})

# grams of macro per hand portion
PROTEIN_PER_PALM = 25
CARBS_PER_FIST = 40
FAT_PER_THUMB = 12

WATER_L_PER_KG = 0.033
WATER_ML_PER_CUP = 250
WATER_MINIMUM_CUPS = 8

# WHO bands
BMI_UNDERWEIGHT_BELOW = 18.5
BMI_OVERWEIGHT_FROM = 25.0
BMI_OBESE_FROM = 30.0

SEXES = ("male", "female")

DEFAULT_GOAL = "maintain"
GOALS = MappingProxyType({
    "maintain": "Maintain Weight",
    "lose": "Weight Loss",
    "gain": "Weight Gain",
    "sugar": "Lower Sugar / Pre-diabetic",
    "cholesterol": "Lower LDL Cholesterol",
    "pressure": "Lower Blood Pressure",
})

ACTIVITY_LEVELS = MappingProxyType({
    1.2: "Sedentary (Little/no exercise)",
    1.375: "Lightly Active (1-3 days/week)",
    1.55: "Moderately Active (3-5 days/week)",
    1.725: "Very Active (6-7 days/week)",
    1.9: "Extra Active (Athletic/Physical job)",
})

CALORIE_ADJUSTMENTS = MappingProxyType({
    "maintain": 0,
    "lose": -500,
    "gain": 500,
    "sugar": -200,
    "cholesterol": -200,
    "pressure": -200,
})

# protein / fat / carbs sum to 1.0; saturated fat is a share of total kcal
# carved out of the fat budget
MACRO_RATIOS = MappingProxyType({
    "maintain": MappingProxyType({"protein": 0.25, "fat": 0.25, "carbs": 0.5, "saturated_fat": 0.1}),
    "lose": MappingProxyType({"protein": 0.25, "fat": 0.25, "carbs": 0.5, "saturated_fat": 0.1}),
    "gain": MappingProxyType({"protein": 0.25, "fat": 0.25, "carbs": 0.5, "saturated_fat": 0.1}),
    "sugar": MappingProxyType({"protein": 0.3, "fat": 0.35, "carbs": 0.35, "saturated_fat": 0.08}),
    "cholesterol": MappingProxyType({"protein": 0.25, "fat": 0.25, "carbs": 0.5, "saturated_fat": 0.06}),
    "pressure": MappingProxyType({"protein": 0.2, "fat": 0.3, "carbs": 0.5, "saturated_fat": 0.07}),
})

_WELLNESS = (
    "Wellness Recommendation",
    "Drink at least 2L of water daily and aim for 5 servings of vegetables "
    "as per UK NHS guidelines.",
)

# (label, text)
GOAL_INFO = MappingProxyType({
    "maintain": _WELLNESS,
    "lose": _WELLNESS,
    "gain": _WELLNESS,
    "sugar": (
        "Health Tip",
        "Focus on Low Glycemic Index (GI) carbs like legumes, oats, and leafy "
        "greens. Avoid simple sugars and refined white flour.",
    ),
    "cholesterol": (
        "Heart Health",
        "Limit saturated fats (butter, fatty meats) to <6% of total kcal. "
        "Increase soluble fiber (beans, apples) to lower LDL.",
    ),
    "pressure": (
        "DASH Principle",
        "Prioritize high-potassium foods (bananas, potatoes, spinach) and "
        "magnesium. Keep sodium below 1,500mg daily.",
    ),
})

# (icon, aria label, title, description)
GOAL_EXTRA_MISSIONS = MappingProxyType({
    "sugar": (
        ("🚫", "No sugary drinks", "No sugary drinks", "0g added sugar from beverages."),
    ),
    "cholesterol": (
        ("🐟", "Oily fish", "Eat Oily Fish x2/week", "Salmon/Mackerel for Omega-3."),
    ),
})

# (name, amount)
PROTEIN_FOODS = (
    ("Chicken Breast", "100g raw / 1 small breast"),
    ("Tofu / Tempeh", "150g block"),
    ("White Fish", "120g raw fillet"),
    ("Eggs", "2 large eggs (whole)"),
    ("Greek Yogurt", "200g (small tub)"),
    ("Lean Beef", "100g raw mince"),
    ("Protein Powder", "1 scoop (30g)"),
)

CARB_FOODS = (
    ("Rice (White/Brown)", "40g dry / 120g cooked"),
    ("Pasta", "50g dry / 1 cup cooked"),
    ("Rolled Oats", "40g dry"),
    ("Potato", "1 med. (150g)"),
    ("Sweet Potato", "1 med. (150g)"),
    ("Bread (Wholegrain)", "2 slices"),
    ("Banana", "1 large"),
)

FAT_FOODS = (
    ("Avocado", "1/2 medium"),
    ("Nuts (Original)", "20g (small handful)"),
    ("Olive Oil", "1 tbsp"),
    ("Butter", "10g (pat)"),
    ("Chia Seeds", "2 tbsp"),
    ("Cheese", "30g (matchbox)"),
    ("Peanut Butter", "1 heaped tsp"),
)
