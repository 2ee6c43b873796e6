import re
from datetime import date
from typing import Iterable, Optional

import redis.asyncio as redis

from groupslot import store
from groupslot.errors import BadRequestError, NotFoundError
from groupslot.models.scheduling import Event, Participant
from groupslot.scheduling import find_participant, grid_keys

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):(?:00|30)$")
SLOT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-(?:[01]\d|2[0-3])-(?:00|30)$")


def check_date(v: Optional[str]) -> Optional[str]:
    """Accept None or a real calendar date in YYYY-MM-DD form."""
    if v is None:
        return v
    if not DATE_RE.match(v):
        raise ValueError(f"invalid date format: {v}")
    try:
        date.fromisoformat(v)
    except ValueError:
        raise ValueError(f"invalid date: {v}") from None
    return v


async def load_event(client: redis.Redis, event_id: str) -> Event:
    event = await store.event_get(client, event_id)
    if event is None:
        raise NotFoundError(detail="Event not found", event_id=event_id)
    return event


def load_participant(event: Event, participant_id: str) -> Participant:
    participant = find_participant(event, participant_id)
    if participant is None:
        raise NotFoundError(detail="Participant not found", event_id=event.id, participant_id=participant_id)
    return participant


def check_slots(event: Event, slots: Iterable[str]) -> None:
    valid = grid_keys(event.start_date, event.end_date)
    for slot in slots:
        if slot not in valid:
            raise BadRequestError(detail=f"Invalid slot: {slot}", event_id=event.id)
