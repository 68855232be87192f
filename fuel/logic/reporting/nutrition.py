"""Nutrition aggregation logic.

A DayPlan's ``totals`` are the macro *targets*. The helpers here sum what the
catalogued items actually provide so both figures can be shown side by side.
"""
from collections import defaultdict
from typing import Dict, Any

from fuel.domain.DayPlan import DayPlan
from fuel.domain.Meal import Meal
from fuel.logic.numbers import round_half_up

_KEYS = ('kcal', 'protein', 'fat', 'carbs')


def meal_totals(meal: Meal) -> Dict[str, int]:
    """Sum kcal/protein/fat/carbs over the items of one meal."""
    acc = {k: 0 for k in _KEYS}
    for item in meal.items:
        acc['kcal'] += item.kcal
        acc['protein'] += item.protein_g
        acc['fat'] += item.fat_g
        acc['carbs'] += item.carbs_g
    return {k: round_half_up(v) for k, v in acc.items()}


def day_item_totals(day: DayPlan) -> Dict[str, int]:
    acc = defaultdict(int)
    for meal in day.meals:
        for k, v in meal_totals(meal).items():
            acc[k] += v
    return {k: acc[k] for k in _KEYS}


def compute_week_nutrition(plan) -> Dict[str, Any]:
    """Aggregate nutrition stats for the given week plan.

    Returns structure:
    {
      'days': [
         {'date': 'yyyy-mm-dd', 'target': {'kcal', 'p', 'f', 'c'},
          'items': {'kcal', 'protein', 'fat', 'carbs'},
          'meals': {'breakfast': {'kcal', 'protein', 'fat', 'carbs'}, ...}},
         ...
      ],
      'week_target': {'kcal', 'p', 'f', 'c'},
      'week_items': {'kcal', 'protein', 'fat', 'carbs'}
    }
    """
    if not plan or not getattr(plan, 'days', None):
        return {
            'days': [],
            'week_target': {'kcal': 0, 'p': 0, 'f': 0, 'c': 0},
            'week_items': {k: 0 for k in _KEYS},
        }

    days_result = []
    week_target = defaultdict(int)
    week_items = defaultdict(int)
    for day in plan.days:
        items = day_item_totals(day)
        days_result.append({
            'date': day.date,
            'target': dict(day.totals),
            'items': items,
            'meals': {meal.type: meal_totals(meal) for meal in day.meals},
        })
        for k, v in day.totals.items():
            week_target[k] += v
        for k, v in items.items():
            week_items[k] += v

    return {
        'days': days_result,
        'week_target': {k: week_target[k] for k in ('kcal', 'p', 'f', 'c')},
        'week_items': {k: week_items[k] for k in _KEYS},
    }

__all__ = ["meal_totals", "day_item_totals", "compute_week_nutrition"]
