"""Nutrition aggregation over planner weeks and meal-prep plans.

Totals are plain sums of the stored per-entry profiles. The servings value of
an entry is display metadata and is not multiplied in. Rounding, when asked
for, happens once on the final figure.
"""
from typing import Any, Dict

from mealplanner.domain.Nutrition import NutritionProfile, sum_profiles
from mealplanner.domain.Plan import Plan, PlanDay, PlanSlot
from mealplanner.domain.Week import Day, Slot, Week


def slot_nutrition(slot: Slot) -> NutritionProfile:
    return sum_profiles(m.nutrition for m in slot.meals)


def day_nutrition(day: Day) -> NutritionProfile:
    return sum_profiles(slot_nutrition(s) for s in day.slots)


def week_nutrition(week: Week) -> NutritionProfile:
    return sum_profiles(day_nutrition(d) for d in week.days)


def days_with_meals(week: Week) -> int:
    return sum(1 for d in week.days if d.has_meals())


def week_daily_average(week: Week, rounded: bool = True) -> NutritionProfile:
    """Week total divided by the number of days that hold at least one meal.

    Empty days do not drag the average down; an all-empty week averages to zero.
    """
    average = week_nutrition(week).divide(max(1, days_with_meals(week)))
    return average.rounded() if rounded else average


def plan_slot_nutrition(slot: PlanSlot) -> NutritionProfile:
    return sum_profiles(i.nutrition for i in slot.items)


def plan_day_nutrition(day: PlanDay) -> NutritionProfile:
    return sum_profiles(plan_slot_nutrition(s) for s in day.slots)


def plan_nutrition(plan: Plan) -> NutritionProfile:
    return sum_profiles(plan_day_nutrition(d) for d in plan.days)


def plan_daily_average(plan: Plan, rounded: bool = True) -> NutritionProfile:
    """Plan total divided by every authored day, populated or not."""
    average = plan_nutrition(plan).divide(max(1, len(plan.days)))
    return average.rounded() if rounded else average


def count_plan_meals(plan: Plan) -> int:
    return sum(len(s.items) for d in plan.days for s in d.slots)


def compute_week_nutrition(week: Week) -> Dict[str, Any]:
    """Aggregate nutrition stats for a planner week.

    Returns structure:
    {
      'days': {
         '2024-06-03': {'calories': .., 'protein': .., 'carbs': .., 'fat': .., 'meals': int,
                        'slots': {'breakfast': {'calories': .., ...}, ...}},
         ...
      },
      'week_totals': {'calories': .., 'protein': .., 'carbs': .., 'fat': ..},
      'daily_average': {...rounded...},
      'days_with_meals': int
    }
    """
    days_result = {}
    for day in week.days:
        entry = day_nutrition(day).to_dict()
        entry['meals'] = day.meal_count()
        entry['slots'] = {s.slot_type: slot_nutrition(s).to_dict() for s in day.slots}
        days_result[day.date] = entry

    return {
        'days': days_result,
        'week_totals': week_nutrition(week).to_dict(),
        'daily_average': week_daily_average(week).to_dict(),
        'days_with_meals': days_with_meals(week),
    }


__all__ = [
    "slot_nutrition", "day_nutrition", "week_nutrition", "days_with_meals", "week_daily_average",
    "plan_slot_nutrition", "plan_day_nutrition", "plan_nutrition", "plan_daily_average",
    "count_plan_meals", "compute_week_nutrition",
]
