import unittest
from pydantic import ValidationError
from fuel.domain.MacroProfile import LIGHT_MACROS
from fuel.logic.planning.week_planner import build_training_week
from fuel.utilities.constants import DEFAULT_ATHLETE
from fuel.utilities.validators import AthleteInput, PlanRequest, TrainingDayInput


def _payload(**overrides):
    data = {
        "athlete": dict(DEFAULT_ATHLETE),
        "training": [t.to_dict() for t in build_training_week("2025-11-16")],
        "planMode": "standard",
        "competitionStart": "2025-11-19",
        "competitionEnd": "2025-11-22",
    }
    data.update(overrides)
    return data


class TestValidators(unittest.TestCase):

    def test_valid_request(self):
        req = PlanRequest.model_validate(_payload(planMode="light"))
        self.assertIs(req.macro_profile(), LIGHT_MACROS)
        days = req.training_days()
        self.assertEqual(days[0].date, "2025-11-16")
        self.assertTrue(days[3].is_light)
        athlete = req.athlete.to_domain()
        self.assertEqual(athlete.weight_kg, 56.5)

    def test_athlete_ranges(self):
        for field, value in (("age", 11), ("age", 19), ("heightCm", 139), ("weightKg", 101), ("weightKg", 34)):
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError):
                    AthleteInput.model_validate(dict(DEFAULT_ATHLETE, **{field: value}))

    def test_athlete_sex_and_goal(self):
        with self.assertRaises(ValidationError):
            AthleteInput.model_validate(dict(DEFAULT_ATHLETE, sex="other"))
        with self.assertRaises(ValidationError):
            AthleteInput.model_validate(dict(DEFAULT_ATHLETE, goal="  a "))

    def test_allergies_cleaned(self):
        athlete = AthleteInput.model_validate(dict(DEFAULT_ATHLETE, allergies=[" lactose", "lactose", "", "peanut"]))
        self.assertEqual(athlete.allergies, ["lactose", "peanut"])

    def test_schedule_must_have_seven_days(self):
        payload = _payload()
        payload["training"] = payload["training"][:6]
        with self.assertRaises(ValidationError):
            PlanRequest.model_validate(payload)

    def test_schedule_must_start_sunday_and_be_consecutive(self):
        with self.assertRaises(ValidationError):
            PlanRequest.model_validate(_payload(training=[t.to_dict() for t in build_training_week("2025-11-17")]))
        payload = _payload()
        payload["training"][4]["date"] = "2025-11-30"
        with self.assertRaises(ValidationError):
            PlanRequest.model_validate(payload)

    def test_competition_end_after_start(self):
        with self.assertRaises(ValidationError):
            PlanRequest.model_validate(_payload(competitionEnd="2025-11-18"))

    def test_time_formats(self):
        ok = TrainingDayInput.model_validate({"date": "2025-11-16", "runTimes": ["05:00"], "cfTimes": ["18:00-19:00"]})
        self.assertEqual(ok.to_domain().cf_times, ["18:00-19:00"])
        with self.assertRaises(ValidationError):
            TrainingDayInput.model_validate({"date": "2025-11-16", "runTimes": ["5pm"]})
        with self.assertRaises(ValidationError):
            TrainingDayInput.model_validate({"date": "2025-11-16", "cfTimes": ["18:00"]})
        with self.assertRaises(ValidationError):
            TrainingDayInput.model_validate({"date": "2025-02-30"})
