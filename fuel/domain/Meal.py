"""Meal domain entity: one slot of a day (breakfast, pre, lunch, ...) with its items."""
from typing import List, Optional, Sequence
from fuel.domain.MealItem import MealItem

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack", "pre", "intra", "post")


class Meal:
    def __init__(self, type: str, items: Optional[Sequence[MealItem]] = None, notes: Optional[str] = None):
        if type not in MEAL_TYPES:
            raise ValueError(f"Unknown meal type: {type!r}")
        self.type = type
        self.items: List[MealItem] = list(items) if items else []
        self.notes = notes

    def __str__(self) -> str:
        names = ", ".join(item.name for item in self.items)
        return f"{self.type.upper()}: {names}" + (f" ({self.notes})" if self.notes else "")

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        return Meal(
            type=data.get("type", ""),
            items=[MealItem.from_dict(i) for i in data.get("items", [])],
            notes=data.get("notes"),
        )

    def to_dict(self):
        d = {"type": self.type, "items": [item.to_dict() for item in self.items]}
        if self.notes is not None:
            d["notes"] = self.notes
        return d
