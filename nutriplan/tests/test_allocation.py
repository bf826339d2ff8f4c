import unittest
from nutriplan.logic.planning.allocation import (
    adjusted_calories, allocate_calories, round_half_up, workout_calories
)


class TestAllocation(unittest.TestCase):

    def test_even_budget(self):
        self.assertEqual(allocate_calories(2000), (600, 600, 600, 200))

    def test_snack_absorbs_rounding_remainder(self):
        breakfast, lunch, dinner, snack = allocate_calories(2005)
        # 2005 * 0.3 = 601.5 -> 602
        self.assertEqual((breakfast, lunch, dinner), (602, 602, 602))
        self.assertEqual(snack, 199)

    def test_sum_is_exact(self):
        for total in (1, 7, 999, 1234, 1801, 2333, 2900.4, 1799.2, 3141.6):
            self.assertEqual(sum(allocate_calories(total)), total, total)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(601.5), 602)
        self.assertEqual(round_half_up(600.49), 600)

    def test_adjusted_calories_counts_80_percent_of_workouts(self):
        self.assertAlmostEqual(adjusted_calories(2500, 0, 500), 2900)
        self.assertAlmostEqual(adjusted_calories(1800, -200, 500), 2000)
        self.assertEqual(adjusted_calories(2000, 150, 0), 2150)

    def test_workout_calories(self):
        self.assertEqual(workout_calories([300, 200]), 500)
        self.assertEqual(workout_calories([]), 0)


if __name__ == '__main__':
    unittest.main()
