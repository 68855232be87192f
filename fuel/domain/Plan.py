"""Plan domain entity: one Sunday-start week of training days and their day plans."""
from typing import List, Optional
from fuel.domain.Athlete import Athlete
from fuel.domain.DayPlan import DayPlan
from fuel.domain.TrainingDay import TrainingDay
from fuel.utilities.constants import TIMEZONE, WEEK_START


class Plan:
    def __init__(self, athlete: Athlete, training: List[TrainingDay], days: List[DayPlan],
                 week_start: str = WEEK_START, timezone: str = TIMEZONE):
        self.week_start = week_start
        self.timezone = timezone
        self.athlete = athlete
        self.training = training
        self.days = days

    @property
    def start_date(self) -> Optional[str]:
        return self.days[0].date if self.days else None

    def __str__(self) -> str:
        return f"Plan week of {self.start_date} ({self.timezone}) - {len(self.days)} days - {self.athlete}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Plan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        return Plan(
            athlete=Athlete.from_dict(data.get("athlete", {})),
            training=[TrainingDay.from_dict(t) for t in data.get("training", [])],
            days=[DayPlan.from_dict(d) for d in data.get("days", [])],
            week_start=data.get("weekStart", WEEK_START),
            timezone=data.get("timezone", TIMEZONE),
        )

    def to_dict(self):
        return {
            "weekStart": self.week_start,
            "timezone": self.timezone,
            "athlete": self.athlete.to_dict(),
            "training": [t.to_dict() for t in self.training],
            "days": [d.to_dict() for d in self.days],
        }
