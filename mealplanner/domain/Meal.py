"""MealEntry domain entity: a meal placed in one planner slot."""
from enum import Enum
from typing import Any, Dict, Optional

from mealplanner.domain.Nutrition import NutritionProfile


class MealOrigin(str, Enum):
    RECIPE = "recipe"
    MEAL_PREP = "meal-prep"  # imported from a plan
    CUSTOM = "custom"


class MealEntry:
    def __init__(self, id: str, name: str = "", nutrition: Optional[NutritionProfile] = None,
                 servings: float = 1, origin: MealOrigin = MealOrigin.CUSTOM,
                 recipe_id: Optional[str] = None, plan_id: Optional[str] = None):
        self.id = id
        self.name = name
        self.nutrition = nutrition if nutrition is not None else NutritionProfile.zero()
        # Display-only: nutrition is stored for the whole entry and never scaled by servings
        self.servings = servings
        self.origin = MealOrigin(origin)
        self.recipe_id = recipe_id
        self.plan_id = plan_id

    def __str__(self) -> str:
        return f"{self.name} ({self.origin.value}, x{self.servings}) - {self.nutrition}"

    __repr__ = __str__

    def copy(self) -> "MealEntry":
        return MealEntry(self.id, self.name, self.nutrition, self.servings,
                         self.origin, self.recipe_id, self.plan_id)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return MealEntry(
            id=d.get("id", ""),
            name=d.get("name", ""),
            nutrition=NutritionProfile.from_dict(d.get("nutrition", {})),
            servings=d.get("servings", 1) or 1,
            origin=d.get("source", d.get("origin", MealOrigin.CUSTOM)),
            recipe_id=d.get("recipeId", d.get("recipe_id")),
            plan_id=d.get("mealPrepId", d.get("plan_id")),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "nutrition": self.nutrition.to_dict(),
            "servings": self.servings,
            "source": self.origin.value,
        }
        if self.recipe_id is not None:
            data["recipeId"] = self.recipe_id
        if self.plan_id is not None:
            data["mealPrepId"] = self.plan_id
        return data
