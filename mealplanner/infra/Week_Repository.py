import logging
from datetime import date
from typing import Dict, List, Optional, Union

from mealplanner.domain.Meal import MealEntry
from mealplanner.domain.Plan import Plan
from mealplanner.domain.Week import Week
from mealplanner.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from mealplanner.events.event_helpers import publish_meal_added, publish_meal_removed, publish_plan_imported
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.calendar.week_math import date_key, week_start
from mealplanner.logic.planning import importer
from mealplanner.utilities.ids import DEFAULT_ID_GENERATOR, IdFactory
from mealplanner.utilities.validators import AddMealInput, ImportPlanInput, RemoveMealInput

logger = logging.getLogger(__name__)


def _week_key(value: Union[date, str]) -> str:
    return date_key(week_start(value))


class WeekRepository:
    """Lookup table of planner weeks keyed by their Monday (YYYY-MM-DD).

    Weeks never fail to resolve: an unknown start date yields a fresh empty week.
    Every mutation stores a new Week and publishes a planner event.
    """

    def __init__(self, id_factory: Optional[IdFactory] = None, event_bus: Optional[EventBus] = None):
        self._weeks: Dict[str, Week] = {}
        self._next_id = id_factory or DEFAULT_ID_GENERATOR
        self._bus = event_bus or GLOBAL_EVENT_BUS

    def get_week(self, start: Union[date, str]) -> Week:
        key = _week_key(start)
        week = self._weeks.get(key)
        if week is None:
            return Week.empty(key)
        return week

    def save_week(self, week: Week) -> None:
        self._weeks[week.start_date] = week

    def weeks(self) -> List[Week]:
        return [self._weeks[k] for k in sorted(self._weeks)]

    def __contains__(self, start: Union[date, str]) -> bool:
        return _week_key(start) in self._weeks

    def new_id(self) -> str:
        return self._next_id()

    def add_meal(self, key: str, slot_type: str, meal: MealEntry) -> Week:
        week = importer.add_meal(self.get_week(key), key, slot_type, meal)
        self.save_week(week)
        logger.info("Added meal '%s' to %s %s", meal.name, key, slot_type)
        publish_meal_added(key, slot_type, meal, week.start_date, bus=self._bus)
        return week

    def remove_meal(self, key: str, slot_type: str, meal_id: str) -> Week:
        current = self.get_week(key)
        day = current.day(key)
        removed = next((m for m in day.slot(slot_type).meals if m.id == meal_id), None)
        if removed is None:
            logger.debug("No meal %s at %s %s; nothing removed", meal_id, key, slot_type)
            return current
        week = importer.remove_meal(current, key, slot_type, meal_id)
        self.save_week(week)
        logger.info("Removed meal '%s' from %s %s", removed.name, key, slot_type)
        publish_meal_removed(key, slot_type, removed, week.start_date, bus=self._bus)
        return week

    def import_plan(self, plan: Plan, anchor_date_key: str, week_start_key: Optional[Union[date, str]] = None) -> Week:
        """Merge a plan into the week shown to the user.

        The target week defaults to the week containing the anchor date; imported
        days that fall outside it are dropped.
        """
        current = self.get_week(week_start_key if week_start_key is not None else anchor_date_key)
        days = importer.import_plan_to_week(plan, anchor_date_key, self._next_id)
        week = importer.merge_days_into_week(current, days)
        self.save_week(week)
        kept = [d for d in days if d.date in week]
        dropped = [d.date for d in days if d.date not in week]
        meals = sum(d.meal_count() for d in kept)
        if dropped:
            logger.warning("Plan %s: %d day(s) outside week %s were not imported", plan.id, len(dropped), week.start_date)
        logger.info("Imported plan %s at %s into week %s (%d meals)", plan.id, anchor_date_key, week.start_date, meals)
        publish_plan_imported(plan.id, anchor_date_key, week.start_date, meals, dropped, bus=self._bus)
        return week

    # --- Raw requests from the UI layer -----------------------------------
    def apply_add_request(self, payload: dict) -> Week:
        req = AddMealInput.model_validate(payload)
        return self.add_meal(req.date, req.slot_type, req.meal.to_meal(self.new_id()))

    def apply_remove_request(self, payload: dict) -> Week:
        req = RemoveMealInput.model_validate(payload)
        return self.remove_meal(req.date, req.slot_type, req.meal_id)

    def apply_import_request(self, payload: dict, plans: PlanRepository,
                             week_start_key: Optional[Union[date, str]] = None) -> Optional[Week]:
        """Import a catalog plan by id; returns None and changes nothing when the plan is unknown."""
        req = ImportPlanInput.model_validate(payload)
        plan = plans.get_plan(req.plan_id)
        if plan is None:
            logger.warning("Plan %s not found; import skipped", req.plan_id)
            return None
        return self.import_plan(plan, req.start_date, week_start_key)
