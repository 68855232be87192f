from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
WEEK_START: Final[str] = "sunday"
TIMEZONE: Final[str] = "Africa/Cairo"
TIMEZONE_UTC_OFFSET_HOURS: Final[int] = 2

DAY_NAMES: Final[list[str]] = [
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"
]
DAYS_PER_WEEK: Final[int] = 7

# Hydration: ml of water per kg bodyweight, plus extra fluid per intense session
HYDRATION_ML_PER_KG: Final[dict[str, int]] = {"min": 35, "max": 40}
SESSION_FLUID_ML: Final[int] = 500
KG_TO_KCAL_RANGE: Final[dict[str, int]] = {"min": 40, "max": 45}

# Accepted athlete input ranges (inclusive)
AGE_RANGE: Final[tuple[int, int]] = (12, 18)
HEIGHT_CM_RANGE: Final[tuple[int, int]] = (140, 210)
WEIGHT_KG_RANGE: Final[tuple[int, int]] = (35, 100)

DEFAULT_ATHLETE: Final[dict] = {
    "age": 14,
    "sex": "male",
    "heightCm": 168,
    "weightKg": 56.5,
    "goal": "lean, high-energy performance",
    "halal": True,
    "vegetarian": False,
    "allergies": [],
}

DEFAULT_COMPETITION: Final[dict[str, str]] = {"start": "2025-11-19", "end": "2025-11-22"}

DEFAULT_RUN_TIMES: Final[list[str]] = ["05:00", "16:00"]
DEFAULT_CF_TIMES: Final[list[str]] = ["18:00-19:00", "19:00-20:00", "20:00-21:00"]
# Wednesday and Friday (Sunday = 0): light days with no CrossFit by default
DEFAULT_LIGHT_DAY_INDICES: Final[tuple[int, ...]] = (3, 5)

DEFAULT_PLAN_MODE: Final[str] = "standard"
