"""Event helper utilities.

Helpers for publishing planner events on a bus (the global one by default).

Quick import:
    from mealplanner.events.event_helpers import (
        publish_meal_added, publish_meal_removed, publish_plan_imported
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    PLANNER_MEAL_ADDED, PLANNER_MEAL_REMOVED, PLANNER_PLAN_IMPORTED
)

__all__ = [
    'publish_meal_added', 'publish_meal_removed', 'publish_plan_imported',
    'PLANNER_MEAL_ADDED', 'PLANNER_MEAL_REMOVED', 'PLANNER_PLAN_IMPORTED'
]


def publish_meal_added(date: str, slot_type: str, meal: Any, week: str, bus: Optional[EventBus] = None):
    """Publish a planner.meal_added event."""
    (bus or GLOBAL_EVENT_BUS).publish(PLANNER_MEAL_ADDED, {
        'date': date,
        'slot_type': slot_type,
        'meal': meal,
        'week': week
    })


def publish_meal_removed(date: str, slot_type: str, meal: Any, week: str, bus: Optional[EventBus] = None):
    """Publish a planner.meal_removed event."""
    (bus or GLOBAL_EVENT_BUS).publish(PLANNER_MEAL_REMOVED, {
        'date': date,
        'slot_type': slot_type,
        'meal': meal,
        'week': week
    })


def publish_plan_imported(plan_id: str, anchor: str, week: str, meals: int,
                          dropped_days: Iterable[str] = (), bus: Optional[EventBus] = None):
    """Publish a planner.plan_imported event.

    Payload structure:
        {
          'plan_id': <str>, 'anchor': 'YYYY-MM-DD', 'week': 'YYYY-MM-DD',
          'meals': <int appended>, 'dropped_days': ['YYYY-MM-DD', ...]
        }
    """
    (bus or GLOBAL_EVENT_BUS).publish(PLANNER_PLAN_IMPORTED, {
        'plan_id': plan_id,
        'anchor': anchor,
        'week': week,
        'meals': meals,
        'dropped_days': list(dropped_days)
    })
