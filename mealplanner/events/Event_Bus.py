"""Observer bus for planner changes.

Event payloads:
  planner.meal_added    -> {"date": str, "slot_type": str, "meal": MealEntry, "week": str}
  planner.meal_removed  -> {"date": str, "slot_type": str, "meal": MealEntry, "week": str}
  planner.plan_imported -> {"plan_id": str, "anchor": str, "week": str, "meals": int, "dropped_days": [str]}

Listeners are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]

# --- Event name constants (used across modules) ---
PLANNER_MEAL_ADDED = "planner.meal_added"
PLANNER_MEAL_REMOVED = "planner.meal_removed"
PLANNER_PLAN_IMPORTED = "planner.plan_imported"
PLANNER_EVENTS = (PLANNER_MEAL_ADDED, PLANNER_MEAL_REMOVED, PLANNER_PLAN_IMPORTED)


class EventBus:
	"""Delivers planner events to listeners in subscription order."""

	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = {}

	def subscribe(self, event_name: str, listener: Listener) -> Listener:
		listeners = self._listeners.setdefault(event_name, [])
		if listener not in listeners:
			listeners.append(listener)
		return listener

	def unsubscribe(self, event_name: str, listener: Listener) -> bool:
		listeners = self._listeners.get(event_name, [])
		if listener not in listeners:
			return False
		listeners.remove(listener)
		return True

	def listener_count(self, event_name: str) -> int:
		return len(self._listeners.get(event_name, []))

	def publish(self, event_name: str, payload: Any) -> int:
		"""Call every listener of event_name; returns how many completed without raising.

		A raising listener is logged and skipped, the planner change that
		triggered the event stays applied.
		"""
		delivered = 0
		for listener in tuple(self._listeners.get(event_name, ())):
			try:
				listener(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, listener)
			else:
				delivered += 1
		return delivered


GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'Listener', 'PLANNER_EVENTS',
	'PLANNER_MEAL_ADDED', 'PLANNER_MEAL_REMOVED', 'PLANNER_PLAN_IMPORTED'
]
