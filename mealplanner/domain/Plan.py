"""Plan domain entities: an authored, calendar-agnostic meal-prep template (days by offset, slots, items)."""
from typing import Any, Dict, List, Optional

from mealplanner.domain.Ingredient import IngredientLine
from mealplanner.domain.Nutrition import NutritionProfile


class PlanItem:
    def __init__(self, id: str = "", name: str = "", servings: float = 1,
                 ingredients: Optional[List[IngredientLine]] = None,
                 nutrition: Optional[NutritionProfile] = None, recipe_id: Optional[str] = None):
        self.id = id
        self.name = name
        self.servings = servings
        self.ingredients = ingredients[:] if ingredients else []
        # Pre-computed by the authoring side, not derived from ingredients
        self.nutrition = nutrition if nutrition is not None else NutritionProfile.zero()
        self.recipe_id = recipe_id

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PlanItem(
            id=d.get("id", ""),
            name=d.get("name", ""),
            servings=d.get("servings", 1) or 1,
            ingredients=[IngredientLine.from_dict(i) for i in d.get("ingredients", [])],
            nutrition=NutritionProfile.from_dict(d.get("nutrition", {})),
            recipe_id=d.get("recipeId", d.get("recipe_id")),
        )


class PlanSlot:
    def __init__(self, slot_type: str, items: Optional[List[PlanItem]] = None):
        self.slot_type = slot_type
        self.items = items[:] if items else []

    def __str__(self) -> str:
        return f"{self.slot_type}: {', '.join(i.name for i in self.items)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PlanSlot(d.get("type", d.get("slot_type", "")),
                        [PlanItem.from_dict(i) for i in d.get("items", [])])


class PlanDay:
    def __init__(self, day_index: int = 0, label: str = "", slots: Optional[List[PlanSlot]] = None):
        self.day_index = day_index
        self.label = label
        self.slots = slots[:] if slots else []

    def slot(self, slot_type: str) -> Optional[PlanSlot]:
        '''First authored slot of the given type, or None.'''
        for s in self.slots:
            if s.slot_type == slot_type:
                return s
        return None

    def __str__(self) -> str:
        return f"Day {self.day_index} ({self.label}): " + "; ".join(str(s) for s in self.slots)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PlanDay(d.get("dayIndex", d.get("day_index", 0)), d.get("label", ""),
                       [PlanSlot.from_dict(s) for s in d.get("meals", d.get("slots", []))])


class Plan:
    def __init__(self, id: str, title: str = "", days: Optional[List[PlanDay]] = None,
                 description: str = "", plan_type: str = "weekly", difficulty: str = "easy",
                 dietary_tags: Optional[List[str]] = None, author: str = "",
                 rating: float = 0, review_count: int = 0, is_published: bool = False,
                 is_favorite: bool = False, is_owned: bool = False):
        self.id = id
        self.title = title
        self.days = days[:] if days else []
        self.description = description
        self.plan_type = plan_type
        self.difficulty = difficulty
        self.dietary_tags = dietary_tags[:] if dietary_tags else []
        self.author = author
        self.rating = rating
        self.review_count = review_count
        self.is_published = is_published
        self.is_favorite = is_favorite
        self.is_owned = is_owned

    def __str__(self) -> str:
        return f"{self.title} ({self.id}) - {len(self.days)} days - {self.plan_type}, {self.difficulty}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Plan from the authoring payload (camelCase keys accepted).'''
        d = dict(data) if isinstance(data, dict) else {}
        author = d.get("author", "")
        if isinstance(author, dict):
            author = author.get("name", "")
        return Plan(
            id=d.get("id", ""),
            title=d.get("title", ""),
            days=[PlanDay.from_dict(day) for day in d.get("days", [])],
            description=d.get("description", ""),
            plan_type=d.get("planType", d.get("plan_type", "weekly")),
            difficulty=d.get("difficulty", "easy"),
            dietary_tags=d.get("dietaryTags", d.get("dietary_tags", [])),
            author=author,
            rating=d.get("rating", 0) or 0,
            review_count=d.get("reviewCount", d.get("review_count", 0)) or 0,
            is_published=bool(d.get("isPublished", d.get("is_published", False))),
            is_favorite=bool(d.get("isFavorite", d.get("is_favorite", False))),
            is_owned=bool(d.get("isOwned", d.get("is_owned", False))),
        )
