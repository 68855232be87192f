"""Rounding policy shared by the engine: halves round up (2.5 -> 3), unlike ``round``."""
import math
from numbers import Real

from fuel.logic.errors import InvalidWeight

__all__ = ["round_half_up", "require_weight"]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def require_weight(weight_kg) -> float:
    """Return ``weight_kg`` as float, raising InvalidWeight unless it is a real number > 0."""
    if isinstance(weight_kg, bool) or not isinstance(weight_kg, Real):
        raise InvalidWeight(weight_kg)
    if math.isnan(weight_kg) or math.isinf(weight_kg) or weight_kg <= 0:
        raise InvalidWeight(weight_kg)
    return float(weight_kg)
