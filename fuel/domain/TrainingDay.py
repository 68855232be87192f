"""TrainingDay domain entity: date, light flag, run times and CrossFit time ranges."""
from datetime import date as _date
from typing import List, Optional, Union

from fuel.utilities.constants import DATE_FORMAT


class TrainingDay:
    def __init__(self, date: Union[str, _date], is_light: bool = False, run_times: Optional[List[str]] = None,
                 cf_times: Optional[List[str]] = None):
        # Stored as ISO text so day plans and JSON exports carry the same value
        self.date = date.strftime(DATE_FORMAT) if isinstance(date, _date) else date
        self.is_light = is_light
        self.run_times = run_times[:] if run_times else []
        self.cf_times = cf_times[:] if cf_times else []

    def __str__(self) -> str:
        kind = "light" if self.is_light else "standard"
        runs = ", ".join(self.run_times) or "Rest"
        cf = ", ".join(self.cf_times) or "None"
        return f"{self.date} ({kind}) - Runs: {runs} - CrossFit: {cf}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, TrainingDay):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        return TrainingDay(
            date=data.get("date", ""),
            is_light=bool(data.get("isLight", False)),
            run_times=list(data.get("runTimes") or []),
            cf_times=list(data.get("cfTimes") or []),
        )

    def to_dict(self):
        return {
            "date": self.date,
            "isLight": self.is_light,
            "runTimes": list(self.run_times),
            "cfTimes": list(self.cf_times),
        }
