"""Shopping list builder.

Provides aggregate_ingredients(plan) and build_shopping_list(plan).
Lines merge only when name and unit match exactly; '500 g' and '0.5 kg' of the
same ingredient stay separate.
"""
from typing import Any, Dict, Iterator, List, Tuple

from mealplanner.domain.Ingredient import IngredientLine
from mealplanner.domain.Nutrition import round_half_up
from mealplanner.domain.Plan import Plan
from mealplanner.domain.ShoppingList import ShoppingList
from mealplanner.utilities.constants import INGREDIENT_QUANTITY_DECIMALS


def _iter_lines(plan: Plan) -> Iterator[IngredientLine]:
    for day in plan.days:
        for slot in day.slots:
            for item in slot.items:
                yield from item.ingredients


def _group(plan: Plan) -> Dict[Tuple[str, str], Dict[str, Any]]:
    # dict keeps first-seen order of (name, unit) groups
    groups: Dict[Tuple[str, str], Dict[str, Any]] = {}
    for line in _iter_lines(plan):
        group = groups.get(line.key)
        if group is None:
            groups[line.key] = {'quantity': line.quantity, 'all_in_pantry': line.in_pantry}
        else:
            group['quantity'] += line.quantity
            group['all_in_pantry'] = group['all_in_pantry'] and line.in_pantry
    return groups


def aggregate_ingredients(plan: Plan) -> List[Dict[str, Any]]:
    """Sum ingredient quantities across every item of the plan.

    Returns:
        List of dicts { name, quantity, unit }, one per exact (name, unit) pair,
        quantity rounded to one decimal after summing.
    """
    return [
        {'name': name, 'quantity': round_half_up(data['quantity'], INGREDIENT_QUANTITY_DECIMALS), 'unit': unit}
        for (name, unit), data in _group(plan).items()
    ]


def build_shopping_list(plan: Plan, *, skip_in_pantry: bool = False) -> ShoppingList:
    """Shopping list for a plan as domain objects.

    Args:
        plan: Plan whose items are aggregated.
        skip_in_pantry: If True, groups whose every source line is flagged in_pantry are left out.
    """
    shopping_list = ShoppingList(plan.id)
    for (name, unit), data in _group(plan).items():
        if skip_in_pantry and data['all_in_pantry']:
            continue
        quantity = round_half_up(data['quantity'], INGREDIENT_QUANTITY_DECIMALS)
        shopping_list.add_item(IngredientLine(name, quantity, unit))
    return shopping_list


def missing_ingredients(plan: Plan) -> List[Dict[str, Any]]:
    return build_shopping_list(plan, skip_in_pantry=True).to_dict()


__all__ = ['aggregate_ingredients', 'build_shopping_list', 'missing_ingredients']
