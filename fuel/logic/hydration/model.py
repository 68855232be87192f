"""Hydration model.

Baseline daily water is a weight-based range (35–40 mL/kg). Intense sessions
add a fixed 500 mL each; that increment is a presentation concern, so
``baseline_ml`` never includes it and ``day_water_target`` is offered for
renderers that want the combined figure.
"""
from typing import Dict

from fuel.domain.TrainingDay import TrainingDay
from fuel.logic.numbers import require_weight, round_half_up
from fuel.utilities.constants import HYDRATION_ML_PER_KG, SESSION_FLUID_ML

__all__ = ["baseline_ml", "format_water_ml", "session_count", "day_water_target", "SESSION_FLUID_ML"]


def baseline_ml(weight_kg: float) -> Dict[str, int]:
    """Return ``{'min': round(35w), 'max': round(40w)}`` in mL for a bodyweight in kg."""
    w = require_weight(weight_kg)
    return {
        "min": round_half_up(w * HYDRATION_ML_PER_KG["min"]),
        "max": round_half_up(w * HYDRATION_ML_PER_KG["max"]),
    }


def format_water_ml(weight_kg: float) -> str:
    base = baseline_ml(weight_kg)
    return f"{base['min']} – {base['max']} mL baseline + {SESSION_FLUID_ML} mL per intense session"


def session_count(day: TrainingDay) -> int:
    """Runs plus CrossFit blocks scheduled on ``day``."""
    return len(day.run_times) + len(day.cf_times)


def day_water_target(weight_kg: float, day: TrainingDay) -> int:
    """Baseline max plus the per-session increment for every session on ``day``."""
    return baseline_ml(weight_kg)["max"] + SESSION_FLUID_ML * session_count(day)
