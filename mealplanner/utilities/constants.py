from typing import Final

DATE_KEY_FORMAT: Final[str] = "%Y-%m-%d"

# Display order of the four slots in every day
SLOT_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner", "snack")

MIN_SERVINGS: Final[float] = 0.5

# Summed shopping-list quantities are shown with one decimal place
INGREDIENT_QUANTITY_DECIMALS: Final[int] = 1

DAYS_IN_WEEK: Final[int] = 7

PLAN_TYPES: Final[tuple[str, ...]] = ("daily", "weekly", "monthly")
DIFFICULTIES: Final[tuple[str, ...]] = ("easy", "medium", "hard")

# Daily-average calorie bands used by the plan catalog: (lower, upper, lower_inclusive, upper_inclusive)
CALORIE_RANGES: Final[dict[str, tuple[float, float, bool, bool]]] = {
    "under1500": (float("-inf"), 1500, False, False),
    "1500to2000": (1500, 2000, True, True),
    "2000to2500": (2000, 2500, True, True),
    "over2500": (2500, float("inf"), False, False),
}
