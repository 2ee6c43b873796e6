"""Discrete 30-minute time grid over an inclusive calendar-date range.

Dates are handled as calendar dates (``datetime.date``), never as instants,
so the same range always yields the same slots regardless of time zone.
"""

import re
from datetime import date, timedelta

from groupslot.models.scheduling import TimeSlot

SLOT_MINUTES = 30
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES

SLOT_KEY_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})-([01]\d|2[0-3])-(00|30)$")


def as_date(value: str | date) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def slot_key(day: str | date, hour: int, minute: int) -> str:
    return f"{as_date(day).isoformat()}-{hour:02d}-{minute:02d}"


def parse_slot_key(key: str) -> TimeSlot:
    """Split a ``YYYY-MM-DD-HH-MM`` key back into its slot.

    Raises:
        ValueError: If the key is not a well-formed slot key.
    """
    m = SLOT_KEY_RE.match(key)
    if not m:
        raise ValueError(f"invalid slot key: {key}")
    day = as_date(m.group(1))
    return TimeSlot(key=key, date=day.isoformat(), hour=int(m.group(2)), minute=int(m.group(3)))


def iter_dates(start_date: str | date, end_date: str | date) -> list[date]:
    start, end = as_date(start_date), as_date(end_date)
    days = []
    d = start
    while d <= end:
        days.append(d)
        d += timedelta(days=1)
    return days


def generate_slots(start_date: str | date, end_date: str | date) -> list[TimeSlot]:
    """Every slot from 00:00 to 23:30 on each day of the range, in chronological order.

    A range whose end precedes its start yields no slots.
    """
    slots = []
    for d in iter_dates(start_date, end_date):
        day = d.isoformat()
        for hour in range(24):
            for minute in range(0, 60, SLOT_MINUTES):
                slots.append(TimeSlot(key=slot_key(d, hour, minute), date=day, hour=hour, minute=minute))
    return slots


def grid_keys(start_date: str | date, end_date: str | date) -> set[str]:
    return {s.key for s in generate_slots(start_date, end_date)}


def is_weekday(day: str | date) -> bool:
    return as_date(day).weekday() < 5


def end_time(start_time: str, duration_hours: float) -> str:
    """Add ``duration_hours`` to an ``HH:MM`` start time.

    No day rollover: ``23:00`` plus two hours is ``25:00``.
    """
    hours, minutes = (int(part) for part in start_time.split(":"))
    end_minutes = hours * 60 + minutes + round(duration_hours * 60)
    return f"{end_minutes // 60:02d}:{end_minutes % 60:02d}"


def default_date_range(today: date | None = None) -> tuple[str, str]:
    """Range offered when a new event is created: today through one week later."""
    today = today or date.today()
    return today.isoformat(), (today + timedelta(days=7)).isoformat()
