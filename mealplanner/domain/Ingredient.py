"""Ingredient line of a plan item: name, quantity, unit and an optional in-pantry flag."""
from typing import Any, Dict, Tuple


class IngredientLine:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = "", in_pantry: bool = False):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.in_pantry = in_pantry

    @property
    def key(self) -> Tuple[str, str]:
        '''Identity used for aggregation: exact name and exact unit, no case folding.'''
        return (self.name, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientLine):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientLine from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return IngredientLine(
            name=d.get("name", ""),
            quantity=d.get("quantity", d.get("default_quantity", 0)) or 0,
            unit=d.get("unit", "") or "",
            in_pantry=bool(d.get("inPantry", d.get("in_pantry", False))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
