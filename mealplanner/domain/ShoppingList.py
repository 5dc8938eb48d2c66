"""ShoppingList aggregate: deduplicated ingredient lines to purchase for a plan."""
from typing import Dict, List, Optional

from mealplanner.domain.Ingredient import IngredientLine


class ShoppingList:
    def __init__(self, plan_id: Optional[str] = None):
        self.plan_id = plan_id
        self.items: List[IngredientLine] = []

    def add_item(self, item: IngredientLine):
        '''
        Adds an item to the shopping list.
        '''
        self.items.append(item)

    def find(self, name: str, unit: str) -> Optional[IngredientLine]:
        for item in self.items:
            if item.key == (name, unit):
                return item
        return None

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self) -> List[Dict]:
        '''
        Converts the shopping list to a list of {name, quantity, unit} dictionaries.
        '''
        return [item.to_dict() for item in self.items]
