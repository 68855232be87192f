"""Validation errors raised by the planning engine.

All of them subclass ``ValueError`` so existing ``except ValueError`` handlers
keep working. They are raised to the immediate caller and never retried.
"""
from typing import Any

__all__ = ["PlanningError", "InvalidScheduleLength", "InvalidDate", "InvalidWeight"]


class PlanningError(ValueError):
    """Base class for engine input errors."""


class InvalidScheduleLength(PlanningError):
    def __init__(self, length: int, expected: int = 7):
        self.length = length
        self.expected = expected
        super().__init__(f"Training schedule must have exactly {expected} days, got {length}")


class InvalidDate(PlanningError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid calendar date: {value!r} (expected YYYY-MM-DD)")


class InvalidWeight(PlanningError):
    def __init__(self, weight_kg: Any):
        self.weight_kg = weight_kg
        super().__init__(f"Weight must be a positive number of kg, got {weight_kg!r}")
