"""Nutrition value type: calories, protein, carbs and fat for one entry (already per serving as stored)."""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like display code expects (2.5 -> 3, 0.25 -> 0.3), not banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


@dataclass(frozen=True)
class NutritionProfile:
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0

    @classmethod
    def zero(cls) -> "NutritionProfile":
        return cls()

    def __add__(self, other: "NutritionProfile") -> "NutritionProfile":
        if not isinstance(other, NutritionProfile):
            return NotImplemented
        return NutritionProfile(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )

    def divide(self, divisor: float) -> "NutritionProfile":
        '''Field-wise division, only used for averages.'''
        return NutritionProfile(
            calories=self.calories / divisor,
            protein=self.protein / divisor,
            carbs=self.carbs / divisor,
            fat=self.fat / divisor,
        )

    def rounded(self) -> "NutritionProfile":
        return NutritionProfile(
            calories=round_half_up(self.calories),
            protein=round_half_up(self.protein),
            carbs=round_half_up(self.carbs),
            fat=round_half_up(self.fat),
        )

    def __str__(self) -> str:
        return f"{self.calories} kcal - Protein: {self.protein}g, Carbs: {self.carbs}g, Fat: {self.fat}g"

    def to_dict(self) -> Dict[str, float]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }

    @staticmethod
    def from_dict(data: Any) -> "NutritionProfile":
        '''Builds a profile from a dict, accepting the carbohydrates/fats key synonyms.'''
        m = data if isinstance(data, dict) else {}
        return NutritionProfile(
            calories=m.get('calories', m.get('kcal', 0)) or 0,
            protein=m.get('protein', 0) or 0,
            carbs=m.get('carbs', m.get('carbohydrates', 0)) or 0,
            fat=m.get('fat', m.get('fats', 0)) or 0,
        )


def add(a: NutritionProfile, b: NutritionProfile) -> NutritionProfile:
    return a + b


def sum_profiles(profiles: Iterable[NutritionProfile]) -> NutritionProfile:
    """Left fold of add starting at zero; an empty iterable gives zero."""
    total = NutritionProfile.zero()
    for profile in profiles:
        total = total + profile
    return total


__all__ = ["NutritionProfile", "add", "sum_profiles", "round_half_up"]
