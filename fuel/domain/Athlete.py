"""Athlete domain entity: anthropometrics and dietary constraints supplied by the caller."""
from typing import Iterable, Optional


class Athlete:
    def __init__(self, age: int = 0, sex: str = "male", height_cm: float = 0, weight_kg: float = 0,
                 goal: str = "", halal: bool = False, vegetarian: bool = False,
                 allergies: Optional[Iterable[str]] = None):
        self.age = age
        self.sex = sex
        self.height_cm = height_cm
        self.weight_kg = weight_kg
        self.goal = goal
        self.halal = halal
        self.vegetarian = vegetarian
        # Stored as a tuple so the engine cannot mutate the caller's list
        self.allergies = tuple(sorted(set(allergies))) if allergies else ()

    def __str__(self) -> str:
        return f"{self.age} y • {self.sex} • {self.weight_kg} kg"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Athlete):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Athlete from a dictionary (camelCase keys). Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Athlete(
            age=d.get("age", 0),
            sex=d.get("sex", "male"),
            height_cm=d.get("heightCm", 0),
            weight_kg=d.get("weightKg", 0),
            goal=d.get("goal", ""),
            halal=bool(d.get("halal", False)),
            vegetarian=bool(d.get("vegetarian") or False),
            allergies=d.get("allergies") or [],
        )

    def to_dict(self):
        return {
            "age": self.age,
            "sex": self.sex,
            "heightCm": self.height_cm,
            "weightKg": self.weight_kg,
            "goal": self.goal,
            "halal": self.halal,
            "vegetarian": self.vegetarian,
            "allergies": list(self.allergies),
        }
