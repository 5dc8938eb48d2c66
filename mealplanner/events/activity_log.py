"""Recent-activity observer for planner events.

Subscribes to the event bus for:
  - planner.meal_added
  - planner.meal_removed
  - planner.plan_imported

and keeps a small in-memory ring buffer the UI layer can poll to show what
changed in the calendar.

Design:
  * Each event gets an auto-increment integer id (cursor); clients ask only
    for newer events with since=<last_id_seen>.
  * A Lock guards the buffer, the id counter is the only other shared state.
  * ACTIVITY_LOG_MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from mealplanner.utilities.config import ACTIVITY_LOG_MAX_EVENTS
from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, PLANNER_EVENTS


class ActivityLog:
    def __init__(self, max_events: int = ACTIVITY_LOG_MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._buses: List[EventBus] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                meal = payload.get('meal')
                if meal is not None and hasattr(meal, 'name'):
                    evt['name'] = meal.name
                    evt['meal_id'] = getattr(meal, 'id', '')
                for k in ('date', 'slot_type', 'week', 'plan_id', 'anchor', 'meals'):
                    if k in payload:
                        evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def start(self, bus: Optional[EventBus] = None) -> "ActivityLog":
        """Idempotent start: subscribe to a bus once."""
        bus = bus or GLOBAL_EVENT_BUS
        if bus in self._buses:
            return self
        for name in PLANNER_EVENTS:
            bus.subscribe(name, self.record)
        self._buses.append(bus)
        return self

    def stop(self):
        for bus in self._buses:
            for name in PLANNER_EVENTS:
                bus.unsubscribe(name, self.record)
        self._buses = []

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns everything still buffered.
        Response includes next_cursor (largest id) so a client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['ActivityLog']
