"""Static athlete guidance: caffeine, substitutions, troubleshooting, Ramadan, batch prep."""
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from fuel.domain.Athlete import Athlete

__all__ = [
    "CAFFEINE_SETTINGS", "caffeine_guidance", "substitutions",
    "troubleshooting_tips", "ramadan_tips", "batch_prep_tips",
]

CAFFEINE_SETTINGS: Mapping[str, float] = MappingProxyType({
    "maxMgUnder18": 100,
    "bedtimeBufferHours": 6,
    "redBullZeroMg": 80,
    "redBullZeroSugarG": 0,
    "whiteEditionMg": 80,
    "whiteEditionSugarG": 27,
})

ADULT_AGE = 18

SAFER_PRE_WORKOUT = (
    "Electrolyte drink (200–300 mL) with light carbs",
    "Chocolate milk 60–90 min pre-session",
    "Banana + water, or yoghurt smoothie with dates",
    "Coconut water + pinch of salt on hot days",
)

SUBSTITUTIONS = (
    ("Chicken breast", "Tuna or sardines", "Keeps protein high with more omega-3 fats"),
    ("Rice", "Potato or sweet potato", "Similar carbs, easier on stomach for some athletes"),
    ("Oats", "Whole-grain cereal", "Quick prep when mornings are rushed"),
    ("Yoghurt", "Milk + tahini", "Maintains protein + healthy fats for smoothies"),
    ("Dates", "Banana + honey", "Fast carbs before sessions with familiar flavors"),
    ("Hummus", "Eggs + carrot sticks", "Protein + crunch when chickpeas not available"),
)

TROUBLESHOOTING = (
    "Low appetite: use smoothies, soups, and yoghurt bowls to reduce chewing fatigue.",
    "GI distress: reduce fat/fiber in pre-workout meal, keep hydration cool not icy.",
    "Dehydration: set 250 mL sips every 45 min and add a pinch of salt to water.",
    "Sleep: finish caffeine by 14:00, use warm milk + banana if hungry before bed.",
)

RAMADAN = (
    "Suhoor: oats + milk + dates + nuts for slow energy; hydrate with 500 mL water + pinch salt.",
    "Iftar: break fast with water + 2 dates, then soup, lean protein, and rice/potatoes.",
    "Shift main training to after Taraweeh if possible; use lighter technique sessions while fasting.",
)

BATCH_PREP = MappingProxyType({
    "Batch prep 1 — Weekend (2 h)": (
        "Cook rice, couscous, and sweet potatoes; portion into airtight containers (3-day fridge limit).",
        "Boil eggs, prep tuna salad jars with lemon + olive oil.",
        "Blend smoothie packs (yoghurt, banana, dates) and freeze for quick post-workout use.",
    ),
    "Batch prep 2 — Midweek top-up (60 min)": (
        "Grill chicken + vegetables, store for 3 days (keep 4°C or colder).",
        "Prepare lentil soup and portion; freeze half for taper week.",
        "Cut fruit + veg sticks, store with damp paper towel to keep crisp.",
    ),
})


def caffeine_guidance(athlete: Athlete) -> Dict[str, Any]:
    """Caffeine limit, product facts and verdict for the athlete's age."""
    minor = athlete.age < ADULT_AGE
    s = CAFFEINE_SETTINGS
    products = [
        {"name": "Red Bull Zero Sugar (250 mL)", "caffeineMg": s["redBullZeroMg"], "sugarG": s["redBullZeroSugarG"]},
        {"name": "Red Bull White Edition (250 mL)", "caffeineMg": s["whiteEditionMg"], "sugarG": s["whiteEditionSugarG"]},
    ]
    return {
        "maxMgPerDay": s["maxMgUnder18"] if minor else None,
        "bedtimeBufferHours": s["bedtimeBufferHours"],
        "products": products,
        "energyDrinksRecommended": not minor,
        "verdict": ("Both are not recommended for under-18 athletes." if minor
                    else "Use sparingly, 60–90 min pre-workout, never within 6 h of bedtime."),
        "saferOptions": list(SAFER_PRE_WORKOUT),
    }


def substitutions() -> List[Dict[str, str]]:
    return [{"swap": a, "for": b, "why": why} for a, b, why in SUBSTITUTIONS]


def troubleshooting_tips() -> List[str]:
    return list(TROUBLESHOOTING)


def ramadan_tips() -> List[str]:
    return list(RAMADAN)


def batch_prep_tips() -> Dict[str, List[str]]:
    return {title: list(tips) for title, tips in BATCH_PREP.items()}
