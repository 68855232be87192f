"""Week planner.

Maps a seven-entry, Sunday-first training schedule onto seven day plans.
Light days always use the light macro preset, so a single call can mix
light and standard days even though only one profile is passed in.
"""
import logging
from typing import List, Sequence

from fuel.domain.Athlete import Athlete
from fuel.domain.MacroProfile import LIGHT_MACROS, MacroProfile
from fuel.domain.Plan import Plan
from fuel.domain.TrainingDay import TrainingDay
from fuel.logic.dates import DateLike, get_week_dates, parse_date
from fuel.logic.errors import InvalidScheduleLength
from fuel.logic.numbers import require_weight
from fuel.logic.planning.day_builder import build_day
from fuel.utilities.constants import (
    DAYS_PER_WEEK, DEFAULT_CF_TIMES, DEFAULT_LIGHT_DAY_INDICES, DEFAULT_RUN_TIMES, TIMEZONE, WEEK_START
)

logger = logging.getLogger(__name__)

__all__ = ["effective_profile", "build_week", "build_training_week", "generate_plan"]


def effective_profile(day: TrainingDay, profile: MacroProfile) -> MacroProfile:
    return LIGHT_MACROS if day.is_light else profile


def build_week(athlete: Athlete, training: Sequence[TrainingDay], profile: MacroProfile) -> Plan:
    """Build the Plan for ``training`` (exactly 7 days, index 0 = Sunday).

    ``training`` is echoed into ``Plan.training`` untouched and ``days[i]``
    always carries ``training[i].date``.
    """
    if len(training) != DAYS_PER_WEEK:
        logger.warning("Rejected training schedule with %d days", len(training))
        raise InvalidScheduleLength(len(training), DAYS_PER_WEEK)
    weight_kg = require_weight(athlete.weight_kg)
    for day in training:
        parse_date(day.date)

    days = [build_day(day.date, effective_profile(day, profile), day.is_light, weight_kg)
            for day in training]
    light = sum(1 for day in training if day.is_light)
    logger.debug("Built week from %s: %d light / %d standard days", training[0].date, light, len(days) - light)
    return Plan(athlete, list(training), days, week_start=WEEK_START, timezone=TIMEZONE)


def build_training_week(start_date: DateLike, is_light: bool = False) -> List[TrainingDay]:
    """Default schedule: two runs daily, CrossFit except Wednesday/Friday, which are light."""
    training = []
    for idx, iso_date in enumerate(get_week_dates(start_date)):
        rest_from_cf = idx in DEFAULT_LIGHT_DAY_INDICES
        training.append(TrainingDay(
            iso_date,
            is_light=is_light or rest_from_cf,
            run_times=list(DEFAULT_RUN_TIMES),
            cf_times=[] if rest_from_cf else DEFAULT_CF_TIMES[:1],
        ))
    return training


def generate_plan(athlete: Athlete, start_date: DateLike, profile: MacroProfile) -> Plan:
    """Plan for the default schedule starting at ``start_date``; all days light for the light preset."""
    training = build_training_week(start_date, is_light=profile == LIGHT_MACROS)
    return build_week(athlete, training, profile)
