from datetime import date
import unittest
from fuel.logic.errors import InvalidDate
from fuel.logic.taper.checklist import BASE_GUIDANCE, build_taper


class TestTaperChecklist(unittest.TestCase):

    def setUp(self):
        self.taper = build_taper("2025-11-19")

    def test_seven_entries_ending_on_competition_day(self):
        self.assertEqual(len(self.taper), 7)
        self.assertEqual(self.taper[0]["date"], "2025-11-13")
        self.assertEqual(self.taper[6]["date"], "2025-11-19")
        self.assertEqual(self.taper[0]["dayLabel"], "-6 days")
        self.assertEqual(self.taper[5]["dayLabel"], "-1 days")
        self.assertEqual(self.taper[6]["dayLabel"], "Competition day")

    def test_guidance_accumulates(self):
        counts = [len(e["guidance"]) for e in self.taper]
        self.assertEqual(counts, [3, 3, 3, 3, 4, 5, 7])
        for entry in self.taper:
            self.assertEqual(entry["guidance"][:3], list(BASE_GUIDANCE))
        self.assertIn("lower fiber", self.taper[4]["guidance"][3])
        self.assertTrue(self.taper[5]["guidance"][4].startswith("Pack competition snacks"))
        self.assertTrue(self.taper[6]["guidance"][5].startswith("Breakfast 3 h pre-event"))
        self.assertTrue(self.taper[6]["guidance"][6].startswith("Between events"))

    def test_crosses_month_and_year(self):
        taper = build_taper(date(2026, 1, 3))
        self.assertEqual(taper[0]["date"], "2025-12-28")
        self.assertEqual(build_taper("2024-03-02")[0]["date"], "2024-02-25")

    def test_entries_do_not_share_guidance_lists(self):
        self.taper[0]["guidance"].append("extra")
        self.assertEqual(len(self.taper[1]["guidance"]), 3)

    def test_invalid_date(self):
        for bad in ("19/11/2025", "", "2025-11-31", None):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidDate):
                    build_taper(bad)
