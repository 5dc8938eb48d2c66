"""Planner calendar entities: Slot (one meal category), Day (date + four slots), Week (Monday..Sunday)."""
from datetime import date
from typing import Any, Dict, List, Optional, Union

from mealplanner.domain.Meal import MealEntry
from mealplanner.logic.calendar.week_math import date_key, week_days, week_start
from mealplanner.utilities.constants import SLOT_TYPES


class Slot:
    def __init__(self, slot_type: str, meals: Optional[List[MealEntry]] = None):
        if slot_type not in SLOT_TYPES:
            raise ValueError(f"Unknown slot type: {slot_type!r}")
        self.slot_type = slot_type
        self.meals = meals[:] if meals else []

    def __str__(self) -> str:
        return f"{self.slot_type}: {', '.join(m.name for m in self.meals) or '-'}"

    __repr__ = __str__

    def copy(self) -> "Slot":
        return Slot(self.slot_type, [m.copy() for m in self.meals])

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.slot_type, "meals": [m.to_dict() for m in self.meals]}


class Day:
    def __init__(self, date: str, slots: Optional[List[Slot]] = None):
        self.date = date
        by_type = {s.slot_type: s for s in (slots or [])}
        # Always exactly one slot per slot type, in display order
        self.slots = [by_type.get(t) or Slot(t) for t in SLOT_TYPES]

    def slot(self, slot_type: str) -> Slot:
        for s in self.slots:
            if s.slot_type == slot_type:
                return s
        raise KeyError(slot_type)

    def has_meals(self) -> bool:
        return any(s.meals for s in self.slots)

    def meal_count(self) -> int:
        return sum(len(s.meals) for s in self.slots)

    def __str__(self) -> str:
        return f"{self.date} [" + "; ".join(str(s) for s in self.slots) + "]"

    __repr__ = __str__

    def copy(self) -> "Day":
        return Day(self.date, [s.copy() for s in self.slots])

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "slots": [s.to_dict() for s in self.slots]}


class Week:
    def __init__(self, start_date: str, days: List[Day]):
        self.start_date = start_date
        self.days = days

    @classmethod
    def empty(cls, start: Union[date, str]) -> "Week":
        '''Builds a week of seven empty days; a non-Monday start is moved back to its Monday.'''
        monday = week_start(start)
        return cls(date_key(monday), [Day(date_key(d)) for d in week_days(monday)])

    @property
    def end_date(self) -> str:
        return self.days[-1].date

    def day(self, key: str) -> Optional[Day]:
        for d in self.days:
            if d.date == key:
                return d
        return None

    def __contains__(self, key: str) -> bool:
        return self.day(key) is not None

    def add_meal(self, key: str, slot_type: str, meal: MealEntry) -> bool:
        '''Appends a meal to (date, slot type). Returns False if the date is not in this week.'''
        d = self.day(key)
        if d is None:
            return False
        d.slot(slot_type).meals.append(meal)
        return True

    def remove_meal(self, key: str, slot_type: str, meal_id: str) -> Optional[MealEntry]:
        '''Removes the single entry with meal_id from (date, slot type); returns it or None.'''
        d = self.day(key)
        if d is None:
            return None
        meals = d.slot(slot_type).meals
        for idx, meal in enumerate(meals):
            if meal.id == meal_id:
                return meals.pop(idx)
        return None

    def copy(self) -> "Week":
        return Week(self.start_date, [d.copy() for d in self.days])

    def __str__(self) -> str:
        return f"Week {self.start_date}:\n\t" + ",\n\t".join(str(d) for d in self.days)

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self) -> Dict[str, Any]:
        return {"startDate": self.start_date, "days": [d.to_dict() for d in self.days]}
