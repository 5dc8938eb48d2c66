"""Plan catalog filtering (search, plan type, difficulty, dietary tags, calorie band)."""
from __future__ import annotations
from typing import Iterable, List, Optional

from mealplanner.domain.Plan import Plan
from mealplanner.logic.reporting.nutrition import plan_daily_average
from mealplanner.utilities.constants import CALORIE_RANGES

__all__ = ["in_calorie_range", "filter_plans"]


def in_calorie_range(plan: Plan, calorie_range: str) -> bool:
    """Check the plan's rounded daily-average calories against a named band."""
    if calorie_range not in CALORIE_RANGES:
        raise ValueError(f"Unknown calorie range: {calorie_range!r}")
    low, high, low_inclusive, high_inclusive = CALORIE_RANGES[calorie_range]
    kcal = plan_daily_average(plan).calories
    above = kcal >= low if low_inclusive else kcal > low
    below = kcal <= high if high_inclusive else kcal < high
    return above and below


def filter_plans(plans: Iterable[Plan], *, search: str = "", plan_type: Optional[str] = None,
                 difficulty: Optional[str] = None, dietary: Optional[List[str]] = None,
                 calorie_range: Optional[str] = None) -> List[Plan]:
    """Return plans matching every given criterion, in input order.

    Args:
        search: case-insensitive substring of title or description.
        plan_type / difficulty: exact match when given.
        dietary: the plan must carry ALL of these tags.
        calorie_range: one of CALORIE_RANGES keys.
    """
    needle = (search or "").lower()
    result: List[Plan] = []
    for plan in plans:
        if needle and needle not in plan.title.lower() and needle not in plan.description.lower():
            continue
        if plan_type and plan.plan_type != plan_type:
            continue
        if difficulty and plan.difficulty != difficulty:
            continue
        if dietary and not all(tag in plan.dietary_tags for tag in dietary):
            continue
        if calorie_range and not in_calorie_range(plan, calorie_range):
            continue
        result.append(plan)
    return result
