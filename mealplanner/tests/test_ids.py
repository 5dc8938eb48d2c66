import unittest
from mealplanner.utilities.ids import DEFAULT_ID_GENERATOR, IdGenerator


class TestIdGenerator(unittest.TestCase):

    def test_ids_are_fresh_and_prefixed(self):
        gen = IdGenerator("planner")
        ids = [gen() for _ in range(50)]
        self.assertEqual(len(set(ids)), 50)
        self.assertTrue(all(i.startswith("planner-") for i in ids))
        self.assertEqual(gen.issued, 50)

    def test_fixed_clock_is_deterministic(self):
        a = IdGenerator("t", clock=lambda: 1.5)
        b = IdGenerator("t", clock=lambda: 1.5)
        self.assertEqual([a.next_id(), a.next_id()], ["t-1-1500", "t-2-1500"])
        self.assertEqual(b.next_id(), "t-1-1500")

    def test_default_generator_is_shared(self):
        before = DEFAULT_ID_GENERATOR.issued
        first, second = DEFAULT_ID_GENERATOR(), DEFAULT_ID_GENERATOR()
        self.assertNotEqual(first, second)
        self.assertEqual(DEFAULT_ID_GENERATOR.issued, before + 2)
