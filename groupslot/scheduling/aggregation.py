import logging

from groupslot.models.scheduling import Event, Participant
from groupslot.scheduling.timegrid import generate_slots

logger = logging.getLogger("groupslot.scheduling.aggregation")


def submitted_participants(event: Event) -> list[Participant]:
    return [p for p in event.participants if p.submitted]


def aggregate(event: Event) -> dict[str, int]:
    """Number of submitted participants available in each grid slot.

    Returns an empty mapping when nobody has submitted yet, which callers
    must tell apart from a grid of zeros. Keys outside the event's grid do
    not contribute.
    """
    submitted = submitted_participants(event)
    if not submitted:
        return {}
    counts = {}
    for slot in generate_slots(event.start_date, event.end_date):
        counts[slot.key] = sum(1 for p in submitted if p.availability.get(slot.key) is True)
    logger.debug("Aggregated %d slots over %d participants for event %s", len(counts), len(submitted), event.id)
    return counts


def slot_support(event: Event, key: str) -> tuple[int, int]:
    """(available, submitted) for one slot, e.g. for an "N of M available" note."""
    counts = aggregate(event)
    return counts.get(key, 0), len(submitted_participants(event))
