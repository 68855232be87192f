"""Static meal catalog keyed by meal slot, with the light-day override table.

Selection is a plain table lookup: nothing here is scaled or fitted to the
athlete or the macro target.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from fuel.domain.MealItem import MealItem

__all__ = [
    "DAY_SLOTS", "MEAL_LIBRARY", "LIGHT_DAY_ADJUSTMENTS", "HYDRATION_NOTES",
    "select_items", "meal_note", "meal_type_label", "snack_options", "main_meal_names",
]

# Slot order of every generated day; 'intra' is catalogued but not emitted
DAY_SLOTS: Tuple[str, ...] = ("breakfast", "pre", "lunch", "snack", "dinner", "post")

MEAL_LIBRARY: Mapping[str, Tuple[MealItem, ...]] = MappingProxyType({
    "breakfast": (
        MealItem("Rolled oats with milk and banana", 350, 520, 20, 12, 82),
        MealItem("Plain yoghurt with dates and tahini", 250, 320, 16, 10, 44),
    ),
    "lunch": (
        MealItem("Grilled chicken breast", 150, 210, 40, 4, 0),
        MealItem("Brown rice", 200, 220, 6, 2, 46),
        MealItem("Molokhia + whole-wheat pita", 180, 180, 6, 4, 30),
    ),
    "dinner": (
        MealItem("Baked salmon or sardines", 140, 260, 32, 14, 0),
        MealItem("Sweet potato mash", 180, 200, 4, 0, 48),
        MealItem("Tomato-cucumber salad + olive oil", 150, 120, 3, 7, 10),
    ),
    "snack": (
        MealItem("Labneh dip + carrots + cucumbers", 160, 210, 12, 9, 20),
        MealItem("Peanut butter on whole-grain toast", 70, 240, 9, 11, 27),
    ),
    "pre": (
        MealItem("Banana + honey sandwich", 150, 260, 6, 5, 50),
        MealItem("Hydration: 300 mL water + pinch salt", 300, 0, 0, 0, 0),
    ),
    "intra": (
        MealItem("Electrolyte drink", 500, 80, 0, 0, 20),
    ),
    "post": (
        MealItem("Chocolate milk (low-fat)", 300, 220, 12, 5, 32),
        MealItem("Dates (2) + water", 120, 90, 1, 0, 24),
    ),
})

LIGHT_DAY_ADJUSTMENTS: Mapping[str, Tuple[MealItem, ...]] = MappingProxyType({
    "breakfast": (MealItem("Overnight oats with chia and apple", 300, 420, 18, 10, 60),),
    "lunch": (MealItem("Tuna salad with couscous", 260, 360, 30, 8, 40),),
    "dinner": (MealItem("Lentil soup with whole-grain bread", 320, 340, 20, 6, 46),),
    "snack": (MealItem("Greek yoghurt + seasonal fruit", 220, 180, 15, 0, 28),),
    "pre": (MealItem("Banana + tahini drizzle", 130, 200, 5, 7, 32),),
    "post": (MealItem("Labneh smoothie with dates", 260, 190, 11, 4, 26),),
})

HYDRATION_NOTES: Mapping[str, str] = MappingProxyType({
    "breakfast": "350 mL water on waking + with meal",
    "lunch": "400 mL water or karkade",
    "dinner": "300 mL water or mint tea",
    "snack": "Fruit + 200 mL water",
    "pre": "300 mL water with pinch of salt 45 min prior",
    "intra": "Sip 150–250 mL every 15–20 min",
    "post": "400 mL water within 30 min",
})

# Training-slot notes take precedence over the hydration note
_SESSION_NOTES: Mapping[str, str] = MappingProxyType({
    "pre": "30–60 min before training; keep it light and familiar",
    "intra": "Sip during sessions >60 min",
    "post": "Within 30 min post-workout with 400 mL water",
})

_SLOT_LABELS: Mapping[str, str] = MappingProxyType({
    "pre": "Pre-workout",
    "post": "Post-workout",
    "intra": "Intra-session",
})

SNACKS: Tuple[str, ...] = (
    "Banana with tahini",
    "Dates + almonds",
    "Yoghurt with honey",
    "Labneh with cucumber",
    "Peanut butter sandwich",
    "Chocolate milk",
    "Electrolyte drink",
)

MAIN_MEALS: Tuple[str, ...] = ("Breakfast", "Lunch", "Dinner")


def select_items(slot: str, is_light: bool) -> Tuple[MealItem, ...]:
    """Catalog items for ``slot``; the light override wins on light days when one exists."""
    if slot not in MEAL_LIBRARY:
        raise ValueError(f"Unknown meal slot: {slot!r}")
    if is_light and slot in LIGHT_DAY_ADJUSTMENTS:
        return LIGHT_DAY_ADJUSTMENTS[slot]
    return MEAL_LIBRARY[slot]


def meal_note(slot: str) -> str:
    if slot in _SESSION_NOTES:
        return _SESSION_NOTES[slot]
    return HYDRATION_NOTES[slot]


def meal_type_label(slot: str) -> str:
    return _SLOT_LABELS.get(slot, slot[:1].upper() + slot[1:])


def snack_options():
    return list(SNACKS)


def main_meal_names():
    return list(MAIN_MEALS)
