"""DayPlan domain entity: the meals, water target and display totals for one date."""
from typing import Dict, List, Optional
from fuel.domain.Meal import Meal


class DayPlan:
    def __init__(self, date: str, meals: Optional[List[Meal]] = None, water_ml: int = 0,
                 totals: Optional[Dict[str, int]] = None):
        self.date = date
        self.meals = meals[:] if meals else []
        self.water_ml = water_ml
        t = totals or {}
        self.totals = {"kcal": t.get("kcal", 0), "p": t.get("p", 0), "f": t.get("f", 0), "c": t.get("c", 0)}

    def meal(self, slot: str) -> Optional[Meal]:
        for m in self.meals:
            if m.type == slot:
                return m
        return None

    def __str__(self) -> str:
        t = self.totals
        return f"{self.date} - {len(self.meals)} meals - {t['kcal']} kcal - water {self.water_ml} mL"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, DayPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        return DayPlan(
            date=data.get("date", ""),
            meals=[Meal.from_dict(m) for m in data.get("meals", [])],
            water_ml=data.get("waterMl", 0),
            totals=data.get("totals"),
        )

    def to_dict(self):
        return {
            "date": self.date,
            "meals": [m.to_dict() for m in self.meals],
            "waterMl": self.water_ml,
            "totals": dict(self.totals),
        }
