import unittest
from mealplanner.domain.Ingredient import IngredientLine
from mealplanner.domain.Nutrition import NutritionProfile
from mealplanner.domain.Plan import Plan, PlanDay, PlanItem, PlanSlot
from mealplanner.logic.shopping.list_builder import aggregate_ingredients, build_shopping_list, missing_ingredients
from mealplanner.utilities.constants import INGREDIENT_QUANTITY_DECIMALS


class TestAggregateIngredients(unittest.TestCase):

    def setUp(self):
        omelette = PlanItem("i1", "Omelette", 1, [
            IngredientLine("Eggs", 3, "pieces"),
            IngredientLine("Olive Oil", 1, "tbsp", in_pantry=True),
            IngredientLine("Spinach", 33.33, "g"),
        ], NutritionProfile(380, 32, 4, 26))
        frittata = PlanItem("i2", "Frittata", 1, [
            IngredientLine("Eggs", 4, "pieces"),
            IngredientLine("Eggs", 50, "g"),
            IngredientLine("Olive Oil", 1, "tbsp", in_pantry=True),
            IngredientLine("spinach", 10, "g"),
            IngredientLine("Spinach", 33.33, "g"),
        ], NutritionProfile(420, 30, 6, 30))
        cake = PlanItem("i3", "Cake", 1, [IngredientLine("Eggs", 2, "pieces", in_pantry=True)])
        self.plan = Plan("mp-9", "Egg week", days=[
            PlanDay(0, "Day 1", [PlanSlot("breakfast", [omelette])]),
            PlanDay(1, "Day 2", [PlanSlot("lunch", [frittata]), PlanSlot("snack", [cake])]),
        ])

    def _by_key(self, lines):
        return {(l['name'], l['unit']): l['quantity'] for l in lines}

    def test_same_name_and_unit_are_summed(self):
        lines = self._by_key(aggregate_ingredients(self.plan))
        self.assertEqual(lines[("Eggs", "pieces")], 9)

    def test_different_unit_or_case_stays_separate(self):
        lines = aggregate_ingredients(self.plan)
        keys = [(l['name'], l['unit']) for l in lines]
        self.assertEqual(len(keys), len(set(keys)))
        by_key = self._by_key(lines)
        self.assertEqual(by_key[("Eggs", "g")], 50)
        self.assertEqual(by_key[("spinach", "g")], 10)
        self.assertEqual(len(lines), 5)

    def test_quantities_rounded_to_one_decimal(self):
        by_key = self._by_key(aggregate_ingredients(self.plan))
        self.assertEqual(by_key[("Spinach", "g")], 66.7)
        self.assertEqual(INGREDIENT_QUANTITY_DECIMALS, 1)

    def test_eggs_grouped_by_unit(self):
        plan = Plan("mp-e", "Eggs", days=[PlanDay(0, "Day 1", [
            PlanSlot("breakfast", [PlanItem("a", "A", 1, [IngredientLine("Eggs", 3, "pieces")])]),
            PlanSlot("dinner", [PlanItem("b", "B", 1, [IngredientLine("Eggs", 4, "pieces"), IngredientLine("Eggs", 100, "g")])]),
        ])])
        self.assertEqual(aggregate_ingredients(plan), [
            {'name': 'Eggs', 'quantity': 7, 'unit': 'pieces'},
            {'name': 'Eggs', 'quantity': 100, 'unit': 'g'},
        ])

    def test_empty_plan(self):
        self.assertEqual(aggregate_ingredients(Plan("x", "Nothing")), [])

    def test_build_shopping_list(self):
        shopping = build_shopping_list(self.plan)
        self.assertEqual(shopping.plan_id, "mp-9")
        self.assertEqual(len(shopping), 5)
        self.assertEqual(shopping.find("Olive Oil", "tbsp").quantity, 2)
        self.assertIsNone(shopping.find("Olive Oil", "ml"))

    def test_missing_ingredients_skip_lines_all_in_pantry(self):
        names = {(l['name'], l['unit']) for l in missing_ingredients(self.plan)}
        self.assertNotIn(("Olive Oil", "tbsp"), names)
        # one of three egg lines is in the pantry, so eggs are still needed
        self.assertIn(("Eggs", "pieces"), names)
