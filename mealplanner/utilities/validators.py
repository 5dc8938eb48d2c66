"""
Input validation schemas using Pydantic for requests coming from the UI layer.

The engine itself trusts its inputs; these schemas are the single place where
raw dict payloads (authored plans, add/remove/import requests) are checked
before they are turned into domain objects.
"""
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, List, Optional

from mealplanner.domain.Ingredient import IngredientLine
from mealplanner.domain.Meal import MealEntry, MealOrigin
from mealplanner.domain.Nutrition import NutritionProfile
from mealplanner.domain.Plan import Plan, PlanDay, PlanItem, PlanSlot
from mealplanner.logic.calendar.week_math import parse_date_key
from mealplanner.utilities.constants import DIFFICULTIES, MIN_SERVINGS, PLAN_TYPES, SLOT_TYPES

DATE_KEY_PATTERN = r'^\d{4}-\d{2}-\d{2}$'
SLOT_PATTERN = r'^(' + '|'.join(SLOT_TYPES) + r')$'


def _check_date_key(v: str) -> str:
    # pattern only checks the shape; this rejects 2024-02-30 and friends
    parse_date_key(v)
    return v


DateKey = Annotated[str, Field(pattern=DATE_KEY_PATTERN), AfterValidator(_check_date_key)]


class NutritionInput(BaseModel):
    """Schema for a macro profile."""
    model_config = ConfigDict(populate_by_name=True)

    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0, alias='carbohydrates')
    fat: float = Field(0, ge=0, alias='fats')

    def to_profile(self) -> NutritionProfile:
        return NutritionProfile(self.calories, self.protein, self.carbs, self.fat)


class IngredientLineInput(BaseModel):
    """Schema for an ingredient line of a plan item."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    unit: str = Field('', max_length=20)
    in_pantry: bool = Field(False, alias='inPantry')

    @field_validator('name', 'unit')
    @classmethod
    def no_padding(cls, v: str) -> str:
        """Name and unit identify the ingredient as written, so padded values are refused."""
        if v != v.strip():
            raise ValueError('must not start or end with whitespace')
        return v


class PlanItemInput(BaseModel):
    """Schema for one meal of a plan slot."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = ''
    name: str = Field(..., min_length=1, max_length=200)
    recipe_id: Optional[str] = Field(None, alias='recipeId')
    servings: float = Field(1, ge=MIN_SERVINGS)
    ingredients: List[IngredientLineInput] = Field(default_factory=list)
    nutrition: NutritionInput = Field(default_factory=NutritionInput)


class PlanSlotInput(BaseModel):
    """Schema for a plan slot."""
    type: str = Field(..., pattern=SLOT_PATTERN)
    items: List[PlanItemInput] = Field(default_factory=list)


class PlanDayInput(BaseModel):
    """Schema for a plan day (offset based, no calendar date)."""
    model_config = ConfigDict(populate_by_name=True)

    day_index: int = Field(0, ge=0, alias='dayIndex')
    label: str = ''
    meals: List[PlanSlotInput] = Field(default_factory=list)


class PlanInput(BaseModel):
    """Schema for an authored meal-prep plan."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ''
    plan_type: str = Field('weekly', alias='planType')
    difficulty: str = 'easy'
    dietary_tags: List[str] = Field(default_factory=list, alias='dietaryTags')
    author: str = ''
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0, alias='reviewCount')
    is_published: bool = Field(False, alias='isPublished')
    is_favorite: bool = Field(False, alias='isFavorite')
    is_owned: bool = Field(False, alias='isOwned')
    days: List[PlanDayInput] = Field(default_factory=list)

    @field_validator('author', mode='before')
    @classmethod
    def author_name(cls, v):
        """Accept either a name or an {id, name} author object."""
        if isinstance(v, dict):
            return v.get('name', '')
        return v or ''

    @field_validator('plan_type')
    @classmethod
    def validate_plan_type(cls, v):
        if v not in PLAN_TYPES:
            raise ValueError(f"plan type must be one of {', '.join(PLAN_TYPES)}")
        return v

    @field_validator('difficulty')
    @classmethod
    def validate_difficulty(cls, v):
        if v not in DIFFICULTIES:
            raise ValueError(f"difficulty must be one of {', '.join(DIFFICULTIES)}")
        return v

    @field_validator('dietary_tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]

    def to_plan(self) -> Plan:
        days = [
            PlanDay(d.day_index, d.label, [
                PlanSlot(s.type, [
                    PlanItem(
                        id=it.id,
                        name=it.name,
                        servings=it.servings,
                        ingredients=[IngredientLine(i.name, i.quantity, i.unit, i.in_pantry) for i in it.ingredients],
                        nutrition=it.nutrition.to_profile(),
                        recipe_id=it.recipe_id,
                    ) for it in s.items
                ]) for s in d.meals
            ]) for d in self.days
        ]
        return Plan(
            id=self.id, title=self.title, days=days, description=self.description,
            plan_type=self.plan_type, difficulty=self.difficulty, dietary_tags=self.dietary_tags,
            author=self.author, rating=self.rating, review_count=self.review_count,
            is_published=self.is_published, is_favorite=self.is_favorite, is_owned=self.is_owned,
        )


class MealEntryInput(BaseModel):
    """Schema for a meal the user adds to a slot."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    recipe_id: Optional[str] = Field(None, alias='recipeId')
    plan_id: Optional[str] = Field(None, alias='mealPrepId')
    nutrition: NutritionInput = Field(default_factory=NutritionInput)
    servings: float = Field(1, ge=MIN_SERVINGS)
    source: MealOrigin = MealOrigin.CUSTOM

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Meal name cannot be empty')
        return v.strip()

    def to_meal(self, fallback_id: str) -> MealEntry:
        return MealEntry(
            id=self.id or fallback_id,
            name=self.name,
            nutrition=self.nutrition.to_profile(),
            servings=self.servings,
            origin=self.source,
            recipe_id=self.recipe_id,
            plan_id=self.plan_id,
        )


class AddMealInput(BaseModel):
    """Schema for an add-meal request at (date, slot type)."""
    model_config = ConfigDict(populate_by_name=True)

    date: DateKey
    slot_type: str = Field(..., pattern=SLOT_PATTERN, alias='slotType')
    meal: MealEntryInput


class RemoveMealInput(BaseModel):
    """Schema for a remove-meal request at (date, slot type)."""
    model_config = ConfigDict(populate_by_name=True)

    date: DateKey
    slot_type: str = Field(..., pattern=SLOT_PATTERN, alias='slotType')
    meal_id: str = Field(..., min_length=1, alias='mealId')


class ImportPlanInput(BaseModel):
    """Schema for importing a catalog plan at an anchor date."""
    model_config = ConfigDict(populate_by_name=True)

    plan_id: str = Field(..., min_length=1, alias='mealPrepId')
    start_date: DateKey = Field(..., alias='startDate')
