"""Day plan builder: one date -> six slot meals, water target and display totals."""
import logging

from fuel.domain.DayPlan import DayPlan
from fuel.domain.MacroProfile import MacroProfile
from fuel.domain.Meal import Meal
from fuel.logic.dates import DateLike, format_date, parse_date
from fuel.logic.hydration.model import baseline_ml
from fuel.logic.numbers import round_half_up
from fuel.logic.planning.meal_library import DAY_SLOTS, meal_note, select_items

logger = logging.getLogger(__name__)

__all__ = ["build_meal", "build_day"]


def build_meal(slot: str, is_light: bool) -> Meal:
    return Meal(slot, select_items(slot, is_light), notes=meal_note(slot))


def build_day(date: DateLike, profile: MacroProfile, is_light: bool, weight_kg: float) -> DayPlan:
    """Assemble the DayPlan for ``date``.

    Item portions come straight from the catalog regardless of ``profile`` or
    ``weight_kg``. ``totals`` is the profile's target rounded half-up, not the
    sum of the items; ``water_ml`` is the hydration baseline max.
    """
    # Strings are echoed as given so DayPlan.date matches TrainingDay.date
    if isinstance(date, str):
        parse_date(date)
        iso_date = date
    else:
        iso_date = format_date(date)
    water_ml = baseline_ml(weight_kg)["max"]
    meals = [build_meal(slot, is_light) for slot in DAY_SLOTS]
    totals = {
        "kcal": round_half_up(profile.kcal),
        "p": round_half_up(profile.protein_g),
        "f": round_half_up(profile.fat_g),
        "c": round_half_up(profile.carbs_g),
    }
    logger.debug("Built day %s (%s, light=%s) water=%s mL", iso_date, profile.name, is_light, water_ml)
    return DayPlan(iso_date, meals, water_ml=water_ml, totals=totals)
