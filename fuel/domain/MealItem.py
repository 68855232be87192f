"""MealItem catalog entry: name, portion in grams, energy and macros."""


class MealItem:
    """Read-only; catalog entries are shared by every plan built in the process."""
    __slots__ = ("name", "grams", "kcal", "protein_g", "fat_g", "carbs_g")

    def __init__(self, name: str, grams: float, kcal: float, protein_g: float = 0,
                 fat_g: float = 0, carbs_g: float = 0):
        for field, value in zip(self.__slots__, (name, grams, kcal, protein_g, fat_g, carbs_g)):
            object.__setattr__(self, field, value)

    def __setattr__(self, key, value):
        raise AttributeError(f"MealItem is read-only, cannot set {key!r}")

    def __delattr__(self, key):
        raise AttributeError(f"MealItem is read-only, cannot delete {key!r}")

    def __reduce__(self):
        return (self.__class__, tuple(getattr(self, field) for field in self.__slots__))

    def __str__(self) -> str:
        return (f"{self.name} - {self.grams} g - {self.kcal} kcal "
                f"(P {self.protein_g} g, F {self.fat_g} g, C {self.carbs_g} g)")

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, MealItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(self.to_dict().values()))

    @staticmethod
    def from_dict(data):
        '''Creates a MealItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return MealItem(
            name=d.get("name", ""),
            grams=d.get("grams", 0),
            kcal=d.get("kcal", 0),
            protein_g=d.get("protein", d.get("protein_g", 0)),
            fat_g=d.get("fat", d.get("fat_g", 0)),
            carbs_g=d.get("carbs", d.get("carbs_g", 0)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "grams": self.grams,
            "kcal": self.kcal,
            "protein": self.protein_g,
            "fat": self.fat_g,
            "carbs": self.carbs_g,
        }
