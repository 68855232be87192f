"""CSV renderers for the week plan and the grocery list (Excel compatible)."""
import csv
import io
import logging
from typing import Dict, List

from fuel.logic.reporting.nutrition import meal_totals

logger = logging.getLogger(__name__)

PLAN_FIELDS = ['date', 'meal', 'items', 'kcal', 'protein', 'fat', 'carbs']
GROCERY_FIELDS = ['name', 'grams', 'kcal']


def plan_to_csv(plan) -> str:
    """One row per (day, meal); macros are the sums of the meal's items."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=PLAN_FIELDS, lineterminator='\n')
    writer.writeheader()
    rows = 0
    for day in plan.days:
        for meal in day.meals:
            totals = meal_totals(meal)
            writer.writerow({
                'date': day.date,
                'meal': meal.type,
                'items': ' | '.join(f"{item.name} ({item.grams}g)" for item in meal.items),
                'kcal': totals['kcal'],
                'protein': totals['protein'],
                'fat': totals['fat'],
                'carbs': totals['carbs'],
            })
            rows += 1
    logger.info("Rendered plan CSV with %d rows", rows)
    return out.getvalue()


def grocery_to_csv(rows: List[Dict]) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=GROCERY_FIELDS, lineterminator='\n', extrasaction='ignore')
    writer.writeheader()
    writer.writerows(rows)
    logger.info("Rendered grocery CSV with %d rows", len(rows))
    return out.getvalue()
