import unittest
from fuel.domain.Athlete import Athlete
from fuel.domain.MacroProfile import STANDARD_MACROS
from fuel.domain.Plan import Plan
from fuel.logic.planning.week_planner import generate_plan
from fuel.logic.reporting.nutrition import compute_week_nutrition, day_item_totals, meal_totals
from fuel.utilities.constants import DEFAULT_ATHLETE


class TestNutritionReport(unittest.TestCase):

    def setUp(self):
        self.plan = generate_plan(Athlete.from_dict(DEFAULT_ATHLETE), "2025-11-16", STANDARD_MACROS)

    def test_meal_totals(self):
        lunch = self.plan.days[0].meal("lunch")
        self.assertEqual(meal_totals(lunch), {"kcal": 610, "protein": 52, "fat": 10, "carbs": 76})

    def test_item_totals_differ_from_targets(self):
        standard, light = self.plan.days[0], self.plan.days[3]
        self.assertEqual(day_item_totals(standard)["kcal"], 3050)
        self.assertEqual(day_item_totals(light)["kcal"], 1690)
        self.assertEqual(standard.totals["kcal"], 2400)

    def test_week_report(self):
        report = compute_week_nutrition(self.plan)
        self.assertEqual(len(report["days"]), 7)
        self.assertEqual(report["week_target"]["kcal"], 5 * 2400 + 2 * 2000)
        self.assertEqual(report["week_items"]["kcal"], 5 * 3050 + 2 * 1690)
        self.assertEqual(report["days"][3]["meals"]["pre"]["kcal"], 200)

    def test_empty_plan(self):
        report = compute_week_nutrition(Plan(self.plan.athlete, [], []))
        self.assertEqual(report["days"], [])
        self.assertEqual(report["week_items"]["kcal"], 0)
