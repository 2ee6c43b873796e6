"""Starting availability derived from a participant's category.

Presets only ever remove keys, so applying one twice gives the same result
as applying it once.
"""

import logging
from typing import Iterable

from groupslot.models.scheduling import TimeSlot
from groupslot.scheduling.timegrid import is_weekday

logger = logging.getLogger("groupslot.scheduling.presets")

EARLY_HOURS = range(0, 7)

PRESETS: dict[str, dict] = {
    "office-worker": {
        "label": "Office worker",
        "description": "Weekdays 09:00-18:00 excluded (editable)",
        "blocked_hours": list(range(9, 18)),
    },
    "university-student": {
        "label": "University student",
        "description": "Enter your timetable manually",
        "blocked_hours": [],
    },
    "high-school-student": {
        "label": "High school student",
        "description": "Weekdays 08:00-17:00 excluded (editable)",
        "blocked_hours": list(range(8, 17)),
    },
    "middle-school-student": {
        "label": "Middle school student",
        "description": "Weekdays 08:00-16:00 excluded (editable)",
        "blocked_hours": list(range(8, 16)),
    },
    "custom": {
        "label": "Custom",
        "description": "Set every slot yourself",
        "blocked_hours": [],
    },
}


def seed_all_available(slots: Iterable[TimeSlot]) -> dict[str, bool]:
    return {s.key: True for s in slots}


def apply_user_type_preset(
    user_type: str,
    base: dict[str, bool],
    slots: Iterable[TimeSlot],
) -> dict[str, bool]:
    """Remove the preset's blocked hours on weekdays.

    The weekday test runs on each slot's own date. Weekend slots and
    unknown user types are left untouched.
    """
    preset = PRESETS.get(user_type)
    if preset is None:
        logger.debug("No preset for user_type=%s", user_type)
        return dict(base)
    blocked = set(preset["blocked_hours"])
    result = dict(base)
    if not blocked:
        return result
    for s in slots:
        if s.hour in blocked and is_weekday(s.date):
            result.pop(s.key, None)
    return result


def remove_early_hours(availability: dict[str, bool], slots: Iterable[TimeSlot]) -> dict[str, bool]:
    """Drop 00:00-06:30 on every day, whatever preset is active."""
    result = dict(availability)
    for s in slots:
        if s.hour in EARLY_HOURS:
            result.pop(s.key, None)
    return result
