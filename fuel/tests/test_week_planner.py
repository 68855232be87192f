import copy
import json
import unittest
from datetime import date, timedelta
from fuel.domain.Athlete import Athlete
from fuel.domain.MacroProfile import LIGHT_MACROS, STANDARD_MACROS, macro_profile_for
from fuel.domain.Plan import Plan
from fuel.domain.TrainingDay import TrainingDay
from fuel.logic.dates import get_week_dates
from fuel.logic.errors import InvalidDate, InvalidScheduleLength, InvalidWeight
from fuel.logic.planning.week_planner import build_training_week, build_week, generate_plan
from fuel.utilities.constants import DEFAULT_ATHLETE


def _standard_week(start="2025-11-16"):
    return [TrainingDay(d, False, ["05:00"], ["18:00-19:00"]) for d in get_week_dates(start)]


class TestWeekPlanner(unittest.TestCase):

    def setUp(self):
        self.athlete = Athlete.from_dict(DEFAULT_ATHLETE)

    def test_seven_days_aligned_with_training(self):
        training = _standard_week()
        plan = build_week(self.athlete, training, STANDARD_MACROS)
        self.assertEqual(len(plan.days), 7)
        self.assertEqual(len(plan.training), 7)
        for t, d in zip(plan.training, plan.days):
            self.assertEqual(t.date, d.date)
        self.assertEqual(plan.week_start, "sunday")
        self.assertEqual(plan.timezone, "Africa/Cairo")

    def test_training_echoed_verbatim(self):
        training = _standard_week()
        before = [t.to_dict() for t in training]
        plan = build_week(self.athlete, training, STANDARD_MACROS)
        self.assertEqual([t.to_dict() for t in plan.training], before)
        self.assertEqual([t.to_dict() for t in training], before)

    def test_all_standard_days(self):
        plan = build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        self.assertTrue(all(d.totals["kcal"] == 2400 for d in plan.days))

    def test_light_day_forces_light_preset(self):
        training = _standard_week()
        training[2].is_light = True
        plan = build_week(self.athlete, training, STANDARD_MACROS)
        self.assertEqual(plan.days[2].totals["kcal"], 2000)
        for i, day in enumerate(plan.days):
            if i != 2:
                self.assertEqual(day.totals["kcal"], 2400)
        self.assertEqual(plan.days[2].meal("lunch").items[0].name, "Tuna salad with couscous")

    def test_light_profile_on_standard_days_keeps_standard_meals(self):
        plan = build_week(self.athlete, _standard_week(), LIGHT_MACROS)
        self.assertEqual(plan.days[0].totals["kcal"], 2000)
        self.assertEqual(plan.days[0].meal("lunch").items[0].name, "Grilled chicken breast")

    def test_water_uses_athlete_weight(self):
        plan = build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        self.assertTrue(all(d.water_ml == 2260 for d in plan.days))

    def test_idempotent(self):
        a = build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        b = build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        self.assertEqual(a.to_dict(), b.to_dict())
        self.assertEqual(a, b)

    def test_does_not_mutate_athlete(self):
        before = copy.deepcopy(self.athlete.to_dict())
        build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        self.assertEqual(self.athlete.to_dict(), before)

    def test_rejects_wrong_length(self):
        for n in (0, 6, 8):
            with self.subTest(length=n):
                training = (_standard_week() * 2)[:n]
                with self.assertRaises(InvalidScheduleLength) as ctx:
                    build_week(self.athlete, training, STANDARD_MACROS)
                self.assertEqual(ctx.exception.length, n)

    def test_rejects_bad_date_and_weight(self):
        training = _standard_week()
        training[4].date = "2025-13-01"
        with self.assertRaises(InvalidDate):
            build_week(self.athlete, training, STANDARD_MACROS)
        self.athlete.weight_kg = -1
        with self.assertRaises(InvalidWeight):
            build_week(self.athlete, _standard_week(), STANDARD_MACROS)

    def test_date_objects_are_stored_as_iso_text(self):
        training = [TrainingDay(date(2025, 11, 16) + timedelta(days=i)) for i in range(7)]
        plan = build_week(self.athlete, training, STANDARD_MACROS)
        self.assertEqual(plan.training[0].date, "2025-11-16")
        for t, d in zip(plan.training, plan.days):
            self.assertEqual(t.date, d.date)
        self.assertEqual(json.loads(json.dumps(plan.to_dict()))["training"][6]["date"], "2025-11-22")

    def test_plan_round_trips_through_dict(self):
        plan = build_week(self.athlete, _standard_week(), STANDARD_MACROS)
        self.assertEqual(Plan.from_dict(plan.to_dict()), plan)


class TestDefaultTemplate(unittest.TestCase):

    def test_default_training_week(self):
        training = build_training_week("2025-11-16")
        self.assertEqual([t.date for t in training][0], "2025-11-16")
        self.assertEqual(training[-1].date, "2025-11-22")
        # Wednesday 19th and Friday 21st
        self.assertEqual([t.is_light for t in training], [False, False, False, True, False, True, False])
        self.assertEqual(training[3].cf_times, [])
        self.assertEqual(training[0].cf_times, ["18:00-19:00"])
        self.assertTrue(all(t.run_times == ["05:00", "16:00"] for t in training))

    def test_all_light(self):
        self.assertTrue(all(t.is_light for t in build_training_week("2025-11-16", is_light=True)))

    def test_generate_plan(self):
        athlete = Athlete.from_dict(DEFAULT_ATHLETE)
        plan = generate_plan(athlete, "2025-11-16", STANDARD_MACROS)
        self.assertEqual([d.totals["kcal"] for d in plan.days], [2400, 2400, 2400, 2000, 2400, 2000, 2400])
        light = generate_plan(athlete, "2025-11-16", LIGHT_MACROS)
        self.assertTrue(all(d.totals["kcal"] == 2000 for d in light.days))

    def test_macro_profile_lookup(self):
        self.assertIs(macro_profile_for("Light"), LIGHT_MACROS)
        self.assertIs(macro_profile_for("standard"), STANDARD_MACROS)
        with self.assertRaises(ValueError):
            macro_profile_for("bulk")


if __name__ == '__main__':
    unittest.main()
