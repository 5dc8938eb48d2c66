import logging
from typing import Dict, Iterable, List, Optional

from mealplanner.domain.Plan import Plan
from mealplanner.utilities.validators import PlanInput

logger = logging.getLogger(__name__)


class PlanRepository:
    """In-memory catalog of authored meal-prep plans, keyed by plan id."""

    def __init__(self, plans: Optional[Iterable[Plan]] = None):
        self._plans: Dict[str, Plan] = {}
        for plan in plans or []:
            self.add(plan)

    def add(self, plan: Plan) -> Plan:
        if plan.id in self._plans:
            logger.info("Replacing plan %s in catalog", plan.id)
        self._plans[plan.id] = plan
        return plan

    def add_from_payload(self, payload: dict) -> Plan:
        """Validate an authored plan payload (raises pydantic.ValidationError) and store it."""
        plan = PlanInput.model_validate(payload).to_plan()
        return self.add(plan)

    def get_plan(self, plan_id: str) -> Optional[Plan]:
        '''Returns the plan or None ("no plan found"); callers skip the import in that case.'''
        return self._plans.get(plan_id)

    def all(self) -> List[Plan]:
        return list(self._plans.values())

    def published(self) -> List[Plan]:
        return [p for p in self._plans.values() if p.is_published]

    def favorites(self) -> List[Plan]:
        return [p for p in self._plans.values() if p.is_favorite]

    def owned(self) -> List[Plan]:
        return [p for p in self._plans.values() if p.is_owned]

    def __len__(self) -> int:
        return len(self._plans)

    def __contains__(self, plan_id: str) -> bool:
        return plan_id in self._plans
