"""Competition taper checklist.

Seven entries ending on the competition day. Guidance accumulates as the
competition approaches: every day gets the base tips, the last three days add
the low-fiber evening tip, the last two add snack packing, and competition day
adds same-day timing tips.
"""
import logging
from typing import Any, Dict, List

from fuel.logic.dates import DateLike, parse_date, shift_date

logger = logging.getLogger(__name__)

__all__ = ["BASE_GUIDANCE", "build_taper"]

TAPER_DAYS = 7

BASE_GUIDANCE = (
    "Prioritize complex carbs (rice, pasta, sweet potato) at each meal",
    "Include 500-750 mL electrolyte drink daily",
    "Salt food lightly to boost sodium stores",
)
LOW_FIBER_TIP = "Shift to lower fiber options in the evening"
PACK_SNACKS_TIP = "Pack competition snacks: dates, banana, yoghurt smoothie"
COMPETITION_DAY_TIPS = (
    "Breakfast 3 h pre-event: oats + yoghurt + banana",
    "Between events: chocolate milk, electrolyte sips, rice cakes + honey",
)


def _guidance_for(idx: int) -> List[str]:
    guidance = list(BASE_GUIDANCE)
    if idx >= 4:
        guidance.append(LOW_FIBER_TIP)
    if idx >= 5:
        guidance.append(PACK_SNACKS_TIP)
    if idx == TAPER_DAYS - 1:
        guidance.extend(COMPETITION_DAY_TIPS)
    return guidance


def build_taper(competition_start: DateLike) -> List[Dict[str, Any]]:
    """Return ``[{date, dayLabel, guidance}, ...]`` for competition_start - 6 .. competition_start."""
    start = parse_date(competition_start)
    entries = []
    for idx in range(TAPER_DAYS):
        days_out = TAPER_DAYS - 1 - idx
        entries.append({
            "date": shift_date(start, -days_out),
            "dayLabel": f"-{days_out} days" if days_out else "Competition day",
            "guidance": _guidance_for(idx),
        })
    logger.debug("Built taper checklist for competition on %s", start.isoformat())
    return entries
