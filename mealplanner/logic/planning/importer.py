"""Import of meal-prep plans into planner weeks.

import_plan_to_week maps plan day i onto anchor + i days. Merging appends the
imported meals behind whatever the week already holds, so importing the same
plan twice doubles the entries; that is intended.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from mealplanner.domain.Meal import MealEntry, MealOrigin
from mealplanner.domain.Plan import Plan, PlanItem
from mealplanner.domain.Week import Day, Slot, Week
from mealplanner.logic.calendar.week_math import add_days, parse_date_key
from mealplanner.utilities.constants import SLOT_TYPES
from mealplanner.utilities.ids import DEFAULT_ID_GENERATOR, IdFactory

logger = logging.getLogger(__name__)

__all__ = ["meal_from_plan_item", "import_plan_to_week", "merge_days_into_week", "import_and_merge",
           "add_meal", "remove_meal"]


def meal_from_plan_item(item: PlanItem, plan: Plan, new_id: str) -> MealEntry:
    # Plan item ids are scoped to the plan, so the calendar entry always gets a new one
    return MealEntry(
        id=new_id,
        name=item.name,
        nutrition=item.nutrition,
        servings=item.servings,
        origin=MealOrigin.MEAL_PREP,
        recipe_id=item.recipe_id,
        plan_id=plan.id,
    )


def import_plan_to_week(plan: Plan, anchor_date_key: str, id_factory: Optional[IdFactory] = None) -> List[Day]:
    """Turn every plan day into a calendar Day starting at the anchor date.

    Days are taken in authored order (position i -> anchor + i). Slot types the
    plan day does not mention come back empty.
    """
    parse_date_key(anchor_date_key)
    next_id = id_factory or DEFAULT_ID_GENERATOR
    days: List[Day] = []
    for i, plan_day in enumerate(plan.days):
        slots = []
        for slot_type in SLOT_TYPES:
            plan_slot = plan_day.slot(slot_type)
            items = plan_slot.items if plan_slot else []
            slots.append(Slot(slot_type, [meal_from_plan_item(it, plan, next_id()) for it in items]))
        days.append(Day(add_days(anchor_date_key, i), slots))
    return days


def merge_days_into_week(week: Week, days: Iterable[Day]) -> Week:
    """Append imported meals into a copy of ``week``.

    Existing meals keep their position; empty imported slots change nothing and
    days outside the week's seven dates are dropped.
    """
    merged = week.copy()
    for imported in days:
        target = merged.day(imported.date)
        if target is None:
            logger.debug("Dropping imported day %s outside week %s", imported.date, week.start_date)
            continue
        for imported_slot in imported.slots:
            if not imported_slot.meals:
                continue
            target.slot(imported_slot.slot_type).meals.extend(m.copy() for m in imported_slot.meals)
    return merged


def import_and_merge(week: Week, plan: Plan, anchor_date_key: str, id_factory: Optional[IdFactory] = None) -> Week:
    return merge_days_into_week(week, import_plan_to_week(plan, anchor_date_key, id_factory))


def add_meal(week: Week, key: str, slot_type: str, meal: MealEntry) -> Week:
    """Copy of ``week`` with ``meal`` appended at (date, slot type); unknown dates leave it as is."""
    updated = week.copy()
    updated.add_meal(key, slot_type, meal)
    return updated


def remove_meal(week: Week, key: str, slot_type: str, meal_id: str) -> Week:
    """Copy of ``week`` without the entry ``meal_id`` at (date, slot type)."""
    updated = week.copy()
    updated.remove_meal(key, slot_type, meal_id)
    return updated
