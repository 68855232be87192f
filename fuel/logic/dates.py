"""Calendar-day helpers. Only date arithmetic, wall-clock time is never read."""
from datetime import date, datetime, timedelta
from typing import List, Union

from fuel.logic.errors import InvalidDate
from fuel.utilities.constants import DATE_FORMAT, DAYS_PER_WEEK

DateLike = Union[date, str]

__all__ = ["DateLike", "parse_date", "format_date", "shift_date", "get_week_dates"]


def parse_date(value: DateLike) -> date:
    """Return a ``date`` for a ``date`` or ISO ``YYYY-MM-DD`` string; raise InvalidDate otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(value)
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDate(value) from None
    # strptime also takes unpadded fields; only canonical text is accepted
    if parsed.strftime(DATE_FORMAT) != value:
        raise InvalidDate(value)
    return parsed


def format_date(value: DateLike) -> str:
    return parse_date(value).strftime(DATE_FORMAT)


def shift_date(value: DateLike, days: int) -> str:
    """ISO date ``days`` calendar days after (or before, if negative) ``value``."""
    return (parse_date(value) + timedelta(days=days)).strftime(DATE_FORMAT)


def get_week_dates(start: DateLike) -> List[str]:
    """Seven consecutive ISO dates beginning with ``start``."""
    first = parse_date(start)
    return [(first + timedelta(days=i)).strftime(DATE_FORMAT) for i in range(DAYS_PER_WEEK)]
