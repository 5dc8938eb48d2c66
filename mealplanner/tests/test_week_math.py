import unittest
from datetime import date, datetime, timedelta
from mealplanner.logic.calendar.week_math import (
    week_start, week_days, date_key, parse_date_key, shift_week, add_days
)


class TestWeekMath(unittest.TestCase):

    def test_week_start_is_monday_and_contains_date(self):
        d = date(2023, 12, 20)
        for _ in range(800):
            start = week_start(d)
            self.assertEqual(start.weekday(), 0)
            self.assertTrue(start <= d <= start + timedelta(days=6))
            d += timedelta(days=1)

    def test_sunday_maps_back_six_days(self):
        self.assertEqual(week_start(date(2024, 6, 9)), date(2024, 6, 3))
        self.assertEqual(week_start(date(2024, 6, 3)), date(2024, 6, 3))
        self.assertEqual(week_start(date(2024, 6, 8)), date(2024, 6, 3))

    def test_week_start_across_year_boundary(self):
        self.assertEqual(week_start(date(2025, 1, 1)), date(2024, 12, 30))

    def test_datetime_is_normalized_to_midnight_date(self):
        self.assertEqual(week_start(datetime(2024, 6, 5, 23, 59)), date(2024, 6, 3))

    def test_week_days_are_consecutive(self):
        days = week_days(date(2024, 2, 26))
        self.assertEqual(len(days), 7)
        self.assertEqual(date_key(days[3]), "2024-02-29")
        self.assertEqual(date_key(days[-1]), "2024-03-03")

    def test_date_key_zero_padded(self):
        self.assertEqual(date_key(date(987, 1, 5)), "0987-01-05")
        self.assertEqual(date_key(datetime(2024, 6, 3, 15, 0)), "2024-06-03")

    def test_parse_date_key(self):
        self.assertEqual(parse_date_key("2024-06-03"), date(2024, 6, 3))
        for bad in ("2024-6-3", "03.06.2024", "2024-02-30", ""):
            with self.assertRaises(ValueError):
                parse_date_key(bad)

    def test_shift_and_add_days(self):
        self.assertEqual(shift_week(date(2024, 6, 3), -1), date(2024, 5, 27))
        self.assertEqual(shift_week("2024-12-30", 1), date(2025, 1, 6))
        self.assertEqual(add_days("2024-06-03", 1), "2024-06-04")
        self.assertEqual(add_days("2024-02-28", 2), "2024-03-01")
