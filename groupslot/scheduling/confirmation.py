from groupslot.models.scheduling import ConfirmedMeeting
from groupslot.scheduling.timegrid import parse_slot_key


def confirm(
    slot_date: str,
    slot_time: str,
    duration: float,
    location: str | None = None,
    notes: str | None = None,
) -> ConfirmedMeeting:
    """Freeze the chosen slot into a meeting record.

    Duration is taken as already clamped by the caller. Blank location and
    notes are stored as missing.
    """
    return ConfirmedMeeting(
        date=slot_date,
        time=slot_time,
        duration=duration,
        location=location or None,
        notes=notes or None,
    )


def confirm_slot(
    key: str,
    duration: float,
    location: str | None = None,
    notes: str | None = None,
) -> ConfirmedMeeting:
    slot = parse_slot_key(key)
    return confirm(slot.date, slot.display, duration, location=location, notes=notes)
