import copy
import unittest
from fuel.domain.MealItem import MealItem
from fuel.logic.planning.meal_library import MEAL_LIBRARY


class TestMealItem(unittest.TestCase):

    def test_catalog_items_are_immutable(self):
        item = MEAL_LIBRARY["breakfast"][0]
        with self.assertRaises(AttributeError):
            item.grams = 1

    def test_from_dict_uses_short_macro_keys(self):
        item = MealItem.from_dict({"name": "Brown rice", "grams": 200, "kcal": 220,
                                   "protein": 6, "fat": 2, "carbs": 46, "ignored": True})
        self.assertEqual(item, MealItem("Brown rice", 200, 220, 6, 2, 46))
        self.assertEqual(item.to_dict()["carbs"], 46)

    def test_items_are_hashable_and_compare_by_value(self):
        a = MealItem("Banana", 120, 105, 1, 0, 27)
        self.assertEqual(len({a, MealItem("Banana", 120, 105, 1, 0, 27)}), 1)
        self.assertNotEqual(a, MealItem("Banana", 100, 105, 1, 0, 27))

    def test_deepcopy_keeps_values(self):
        item = MEAL_LIBRARY["dinner"][0]
        self.assertEqual(copy.deepcopy(item), item)
