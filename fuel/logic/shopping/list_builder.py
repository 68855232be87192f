"""Grocery list builder.

Provides aggregate_grocery_list(plan): one row per distinct item name across
the whole week, quantities summed.
"""
from collections import defaultdict
import logging
import unicodedata
from typing import Any, Dict, List

from fuel.domain.Plan import Plan
from fuel.logic.numbers import round_half_up

logger = logging.getLogger(__name__)


def _sort_key(name: str):
    # Accents are ignored first, then case; on ties lowercase sorts before uppercase
    base = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in base if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name.swapcase())


def aggregate_grocery_list(plan: Plan) -> List[Dict[str, Any]]:
    """Sum grams and kcal of every MealItem in the plan, grouped by exact name.

    Returns:
        List of dicts ``{name, grams, kcal}`` sorted by name. The order depends
        only on the names present, never on day or meal order.
    """
    if not plan or not plan.days:
        return []

    totals: Dict[str, Dict[str, float]] = defaultdict(lambda: {"grams": 0, "kcal": 0})
    for day in plan.days:
        for meal in day.meals:
            for item in meal.items:
                totals[item.name]["grams"] += item.grams
                totals[item.name]["kcal"] += item.kcal

    rows = [
        {"name": name, "grams": round_half_up(info["grams"]), "kcal": round_half_up(info["kcal"])}
        for name, info in totals.items()
    ]
    rows.sort(key=lambda r: _sort_key(r["name"]))
    logger.debug("Aggregated %d grocery rows from %d days", len(rows), len(plan.days))
    return rows

__all__ = ['aggregate_grocery_list']
