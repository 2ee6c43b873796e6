"""Reusable weekly availability templates.

A template is keyed by day of week instead of calendar date, e.g.
``monday-9-30`` (hour not zero-padded). It is stored as an opaque snapshot
and can be projected onto any event grid to seed a participant.
"""

from typing import Iterable

from groupslot.models.scheduling import TimeSlot
from groupslot.scheduling.presets import EARLY_HOURS
from groupslot.scheduling.timegrid import as_date

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

WEEKLY_PRESETS: dict[str, list[int]] = {
    "office-worker": list(range(9, 18)),
    "student": list(range(9, 16)),
}


def weekly_key(day: str, hour: int, minute: int) -> str:
    return f"{day}-{hour}-{minute:02d}"


def weekly_keys() -> list[str]:
    return [weekly_key(day, hour, minute) for day in WEEKDAYS for hour in range(24) for minute in (0, 30)]


def all_available_week() -> dict[str, bool]:
    return {k: True for k in weekly_keys()}


def weekly_preset(name: str) -> dict[str, bool]:
    """Fresh template with the preset's weekday hours left out.

    Raises:
        KeyError: For an unknown preset name.
    """
    blocked = set(WEEKLY_PRESETS[name])
    template = {}
    for index, day in enumerate(WEEKDAYS):
        for hour in range(24):
            if index < 5 and hour in blocked:
                continue
            template[weekly_key(day, hour, 0)] = True
            template[weekly_key(day, hour, 30)] = True
    return template


def remove_early_hours_weekly(template: dict[str, bool]) -> dict[str, bool]:
    result = dict(template)
    for day in WEEKDAYS:
        for hour in EARLY_HOURS:
            result.pop(weekly_key(day, hour, 0), None)
            result.pop(weekly_key(day, hour, 30), None)
    return result


def project_onto_grid(template: dict[str, bool], slots: Iterable[TimeSlot]) -> dict[str, bool]:
    """Event availability holding every slot whose weekday/time is on in the template."""
    availability = {}
    for s in slots:
        day = WEEKDAYS[as_date(s.date).weekday()]
        if template.get(weekly_key(day, s.hour, s.minute)) is True:
            availability[s.key] = True
    return availability
