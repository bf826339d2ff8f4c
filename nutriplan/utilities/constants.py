from types import MappingProxyType
from typing import Final, Mapping, Tuple

# Slot order of every generated plan
BREAKFAST: Final[str] = "Breakfast"
LUNCH: Final[str] = "Lunch"
DINNER: Final[str] = "Dinner"
SNACK: Final[str] = "Snack"
MEAL_SLOTS: Final[Tuple[str, ...]] = (BREAKFAST, LUNCH, DINNER, SNACK)

# Share of the daily budget for each main meal; the snack takes what is left
MAIN_MEAL_SHARE: Final[float] = 0.3
# Fraction of workout calories added back to the daily budget
WORKOUT_CALORIES_FACTOR: Final[float] = 0.8

DEFAULT_PREFERENCE: Final[str] = "balanced"

# Empty tag means no diet restriction is sent to the menu provider
MENU_DIET_TAGS: Final[Mapping[str, str]] = MappingProxyType({
    "balanced": "",
    "high_protein": "high-protein",
    "keto": "ketogenic",
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "paleo": "paleo",
})

WORKOUT_GOALS: Final[Mapping[str, str]] = MappingProxyType({
    "balanced": "maintenance",
    "high_protein": "muscle_gain",
    "keto": "weight_loss",
    "vegetarian": "maintenance",
    "vegan": "maintenance",
    "paleo": "weight_loss",
})

# Menu provider slot number -> plan slot
MENU_PROVIDER_SLOTS: Final[Mapping[int, str]] = MappingProxyType({1: BREAKFAST, 2: LUNCH, 3: DINNER})

# Titles used when the provider answered but left a slot empty
CANNED_MEAL_TITLES: Final[Mapping[str, str]] = MappingProxyType({
    BREAKFAST: "Balanced Breakfast",
    LUNCH: "Healthy Lunch",
    DINNER: "Nutritious Dinner",
})

# Titles used when the menu provider could not be reached at all
FALLBACK_MEAL_TITLES: Final[Mapping[str, str]] = MappingProxyType({
    BREAKFAST: "Oatmeal",
    LUNCH: "Salad",
    DINNER: "Pasta",
})

SNACK_OPTIONS: Final[Tuple[str, ...]] = ("Fruit", "Nuts", "Yogurt")

FALLBACK_WORKOUTS: Final[Tuple[Mapping[str, object], ...]] = (
    MappingProxyType({
        "workoutType": "cardio",
        "durationMinutes": 30,
        "intensity": "moderate",
        "estimatedCaloriesBurned": 300,
        "description": "Cardio workout to complement your meal plan.",
    }),
    MappingProxyType({
        "workoutType": "strength",
        "durationMinutes": 25,
        "intensity": "moderate",
        "estimatedCaloriesBurned": 200,
        "description": "Strength training focusing on major muscle groups.",
    }),
)

INGREDIENTS_UNAVAILABLE: Final[str] = "Could not fetch ingredients"

# Local ingredient guesses for meals the provider did not identify.
# Keyed by meal group, then preference; "default" covers everything else.
HEURISTIC_INGREDIENTS: Final[Mapping[str, Mapping[str, Tuple[str, ...]]]] = MappingProxyType({
    "breakfast": MappingProxyType({
        "vegetarian": ("oats", "almond milk", "banana", "chia seeds", "berries"),
        "vegan": ("oats", "almond milk", "banana", "chia seeds", "berries"),
        "keto": ("eggs", "avocado", "spinach", "feta cheese"),
        "default": ("eggs", "whole grain bread", "avocado", "tomatoes"),
    }),
    "main": MappingProxyType({
        "vegetarian": ("quinoa", "bell peppers", "chickpeas", "feta", "olive oil"),
        "vegan": ("brown rice", "tofu", "broccoli", "carrots", "soy sauce"),
        "keto": ("chicken breast", "cauliflower rice", "broccoli", "cheese"),
        "default": ("chicken breast", "brown rice", "broccoli", "olive oil"),
    }),
})
