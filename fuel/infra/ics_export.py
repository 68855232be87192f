"""Calendar export: reminders for the training-related meals of the week.

Times are planned in the fixed UTC+2 plan zone and written as UTC, so readers
do not apply daylight-saving rules of the named zone.
"""
import logging
from datetime import datetime, timedelta, timezone

from icalendar import Calendar, Event

from fuel.logic.dates import parse_date
from fuel.utilities.constants import TIMEZONE, TIMEZONE_UTC_OFFSET_HOURS

logger = logging.getLogger(__name__)

CALENDAR_SLOTS = ('pre', 'intra', 'post', 'snack')
EVENT_MINUTES = 30
PLAN_TZ = timezone(timedelta(hours=TIMEZONE_UTC_OFFSET_HOURS), TIMEZONE)


def _default_time(slot):
    if slot == 'pre':
        return 15, 30
    if slot == 'post':
        return 20, 30
    return 12, 0


def plan_to_ics(plan) -> bytes:
    """One 30-minute event per pre/intra/post/snack meal of every day."""
    cal = Calendar()
    cal.add('prodid', '-//ELFIT Rookie Fuel Planner//EN')
    cal.add('version', '2.0')
    count = 0
    for day in plan.days:
        d = parse_date(day.date)
        for meal in day.meals:
            if meal.type not in CALENDAR_SLOTS:
                continue
            hour, minute = _default_time(meal.type)
            start = datetime(d.year, d.month, d.day, hour, minute, tzinfo=PLAN_TZ).astimezone(timezone.utc)
            event = Event()
            event.add('uid', f"{day.date}-{meal.type}@elfit-rookie-fuel")
            event.add('summary', f"{meal.type.upper()} nutrition")
            event.add('dtstart', start)
            event.add('dtend', start + timedelta(minutes=EVENT_MINUTES))
            event.add('dtstamp', datetime(d.year, d.month, d.day, tzinfo=timezone.utc))
            event.add('description', ', '.join(item.name for item in meal.items))
            cal.add_component(event)
            count += 1
    logger.info("Rendered %d calendar events", count)
    return cal.to_ical()
