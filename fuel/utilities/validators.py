"""
Input validation schemas using Pydantic for the planner form data.
"""
import re
from datetime import date as _date
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fuel.domain.Athlete import Athlete
from fuel.domain.MacroProfile import MacroProfile, macro_profile_for
from fuel.domain.TrainingDay import TrainingDay
from fuel.utilities.constants import AGE_RANGE, DAYS_PER_WEEK, HEIGHT_CM_RANGE, WEIGHT_KG_RANGE

RUN_TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')
CF_RANGE_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d-([01]\d|2[0-3]):[0-5]\d$')


class AthleteInput(BaseModel):
    """Schema for athlete profile validation."""
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1])
    sex: Literal['male', 'female'] = 'male'
    height_cm: float = Field(..., alias='heightCm', ge=HEIGHT_CM_RANGE[0], le=HEIGHT_CM_RANGE[1])
    weight_kg: float = Field(..., alias='weightKg', ge=WEIGHT_KG_RANGE[0], le=WEIGHT_KG_RANGE[1])
    goal: str = Field(..., min_length=3)
    halal: bool = True
    vegetarian: bool = False
    allergies: List[str] = Field(default_factory=list)

    @field_validator('goal')
    @classmethod
    def strip_goal(cls, v):
        """Remove leading/trailing whitespace."""
        if len(v.strip()) < 3:
            raise ValueError('Goal must have at least 3 characters')
        return v.strip()

    @field_validator('allergies')
    @classmethod
    def validate_allergies(cls, v):
        """Drop blanks and duplicates, keeping first-seen order."""
        seen = []
        for a in v:
            a = a.strip() if isinstance(a, str) else ''
            if a and a not in seen:
                seen.append(a)
        return seen

    def to_domain(self) -> Athlete:
        return Athlete(self.age, self.sex, self.height_cm, self.weight_kg, self.goal,
                       self.halal, self.vegetarian, self.allergies)


class TrainingDayInput(BaseModel):
    """Schema for one day of the training schedule."""
    model_config = ConfigDict(populate_by_name=True)

    date: _date
    is_light: bool = Field(False, alias='isLight')
    run_times: List[str] = Field(default_factory=list, alias='runTimes')
    cf_times: List[str] = Field(default_factory=list, alias='cfTimes')

    @field_validator('run_times')
    @classmethod
    def validate_run_times(cls, v):
        for t in v:
            if not RUN_TIME_PATTERN.match(t):
                raise ValueError(f'Invalid run time {t!r} (expected HH:MM)')
        return v

    @field_validator('cf_times')
    @classmethod
    def validate_cf_times(cls, v):
        for t in v:
            if not CF_RANGE_PATTERN.match(t):
                raise ValueError(f'Invalid CrossFit slot {t!r} (expected HH:MM-HH:MM)')
        return v

    def to_domain(self) -> TrainingDay:
        return TrainingDay(self.date.isoformat(), self.is_light, self.run_times, self.cf_times)


class PlanRequest(BaseModel):
    """Schema for a full plan request: athlete, 7-day schedule and plan mode."""
    model_config = ConfigDict(populate_by_name=True)

    athlete: AthleteInput
    training: List[TrainingDayInput] = Field(..., min_length=DAYS_PER_WEEK, max_length=DAYS_PER_WEEK)
    plan_mode: Literal['standard', 'light'] = Field('standard', alias='planMode')
    competition_start: _date = Field(..., alias='competitionStart')
    competition_end: _date = Field(..., alias='competitionEnd')

    @field_validator('training')
    @classmethod
    def validate_consecutive(cls, v):
        """Schedule days must be consecutive, starting on a Sunday."""
        if v and v[0].date.isoweekday() != 7:
            raise ValueError('Training week must start on a Sunday')
        for prev, cur in zip(v, v[1:]):
            if (cur.date - prev.date).days != 1:
                raise ValueError('Training days must be consecutive calendar days')
        return v

    @field_validator('competition_end')
    @classmethod
    def validate_competition_end(cls, v, info):
        start = info.data.get('competition_start')
        if start is not None and v < start:
            raise ValueError('Competition end cannot be before its start')
        return v

    def macro_profile(self) -> MacroProfile:
        return macro_profile_for(self.plan_mode)

    def training_days(self) -> List[TrainingDay]:
        return [d.to_domain() for d in self.training]
