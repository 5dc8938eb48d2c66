import unittest
from datetime import date
from mealplanner.domain.Meal import MealEntry, MealOrigin
from mealplanner.domain.Nutrition import NutritionProfile
from mealplanner.domain.Week import Day, Slot, Week


class TestWeekModel(unittest.TestCase):

    def test_empty_week_invariants(self):
        week = Week.empty(date(2024, 6, 6))
        self.assertEqual(week.start_date, "2024-06-03")
        self.assertEqual([d.date for d in week.days],
                         ["2024-06-03", "2024-06-04", "2024-06-05", "2024-06-06",
                          "2024-06-07", "2024-06-08", "2024-06-09"])
        self.assertEqual(week.end_date, "2024-06-09")
        for d in week.days:
            self.assertEqual([s.slot_type for s in d.slots], ["breakfast", "lunch", "dinner", "snack"])
            self.assertFalse(d.has_meals())

    def test_day_always_has_four_slots(self):
        day = Day("2024-06-03", [Slot("dinner", [MealEntry("a", "Stew")])])
        self.assertEqual(len(day.slots), 4)
        self.assertEqual(day.slot("dinner").meals[0].name, "Stew")
        with self.assertRaises(ValueError):
            Slot("brunch")

    def test_duplicates_by_name_are_kept_in_order(self):
        week = Week.empty("2024-06-03")
        self.assertTrue(week.add_meal("2024-06-03", "lunch", MealEntry("a", "Soup")))
        self.assertTrue(week.add_meal("2024-06-03", "lunch", MealEntry("b", "Soup")))
        self.assertFalse(week.add_meal("2024-06-10", "lunch", MealEntry("c", "Soup")))
        self.assertEqual([m.id for m in week.day("2024-06-03").slot("lunch").meals], ["a", "b"])

    def test_copy_is_deep(self):
        week = Week.empty("2024-06-03")
        week.add_meal("2024-06-03", "lunch", MealEntry("a", "Soup"))
        clone = week.copy()
        clone.remove_meal("2024-06-03", "lunch", "a")
        self.assertEqual(week.day("2024-06-03").meal_count(), 1)
        self.assertEqual(clone.day("2024-06-03").meal_count(), 0)

    def test_meal_entry_dict_shape(self):
        meal = MealEntry.from_dict({
            "id": "planner-1-1717400000000", "name": "Salmon with Sweet Potato",
            "nutrition": {"calories": 580, "protein": 42, "carbs": 38, "fat": 28},
            "servings": 1, "source": "meal-prep", "recipeId": "recipe-5", "mealPrepId": "mp-1",
        })
        self.assertEqual(meal.origin, MealOrigin.MEAL_PREP)
        self.assertEqual(meal.nutrition, NutritionProfile(580, 42, 38, 28))
        data = Week.empty("2024-06-03").to_dict()
        self.assertEqual(data["startDate"], "2024-06-03")
        self.assertEqual(meal.to_dict()["mealPrepId"], "mp-1")
        self.assertNotIn("recipeId", MealEntry("x", "Tea").to_dict())
