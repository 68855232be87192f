"""MacroProfile: fixed daily energy/macro target for a day type (standard or light)."""
from typing import Dict


class MacroProfile:
    __slots__ = ("name", "kcal", "protein_g", "fat_g", "carbs_g")

    def __init__(self, name: str, kcal: float, protein_g: float, fat_g: float, carbs_g: float):
        for field, value in zip(self.__slots__, (name, kcal, protein_g, fat_g, carbs_g)):
            object.__setattr__(self, field, value)

    def __setattr__(self, key, value):
        raise AttributeError(f"MacroProfile is read-only, cannot set {key!r}")

    def __delattr__(self, key):
        raise AttributeError(f"MacroProfile is read-only, cannot delete {key!r}")

    def __reduce__(self):
        return (self.__class__, tuple(getattr(self, field) for field in self.__slots__))

    def __str__(self) -> str:
        return f"{self.name}: {self.kcal} kcal • P {self.protein_g} g • F {self.fat_g} g • C {self.carbs_g} g"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, MacroProfile):
            return NotImplemented
        return self.name == other.name and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.name, self.kcal, self.protein_g, self.fat_g, self.carbs_g))

    def to_dict(self):
        return {"kcal": self.kcal, "protein": self.protein_g, "fat": self.fat_g, "carbs": self.carbs_g}


STANDARD_MACROS = MacroProfile("standard", kcal=2400, protein_g=110, fat_g=75, carbs_g=340)
LIGHT_MACROS = MacroProfile("light", kcal=2000, protein_g=90, fat_g=60, carbs_g=260)

MACRO_PROFILES: Dict[str, MacroProfile] = {
    STANDARD_MACROS.name: STANDARD_MACROS,
    LIGHT_MACROS.name: LIGHT_MACROS,
}


def macro_profile_for(mode: str) -> MacroProfile:
    """Look up a preset by name ('standard' or 'light')."""
    key = (mode or "").strip().lower()
    if key not in MACRO_PROFILES:
        raise ValueError(f"Unknown plan mode: {mode!r} (expected one of {sorted(MACRO_PROFILES)})")
    return MACRO_PROFILES[key]
