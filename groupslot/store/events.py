"""Event and confirmed-meeting documents.

Derived fields (participant status, meeting end time) are written along
with the rest and ignored when the document is validated back.
"""

import json
import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from groupslot.config import get_settings
from groupslot.errors import StoreError
from groupslot.models.scheduling import ConfirmedMeeting, Event
from groupslot.scheduling.events import create_event
from groupslot.store.core import key, load_json, save_json

logger = logging.getLogger("groupslot.store")


def _event_key(event_id: str) -> str:
    return key("event", event_id)


def _meeting_key(event_id: str) -> str:
    return key("meeting", event_id)


async def event_get(client: redis.Redis, event_id: str) -> Event | None:
    data = await load_json(client, _event_key(event_id))
    if data is None:
        return None
    return Event.model_validate(data)


async def event_save(client: redis.Redis, event: Event) -> Event:
    ttl = get_settings().store.event_ttl_sec
    await save_json(client, _event_key(event.id), event.model_dump(mode="json"), ttl)
    return event


async def event_create(
    client: redis.Redis,
    title: str,
    start_date: str,
    end_date: str,
    description: str = "",
) -> Event:
    ttl = get_settings().store.event_ttl_sec
    for _ in range(10):
        event = create_event(title, start_date, end_date, description=description)
        try:
            # NX: a colliding id is never overwritten
            created = await client.set(
                _event_key(event.id),
                json.dumps(event.model_dump(mode="json")),
                nx=True,
                ex=ttl if ttl > 0 else None,
            )
        except RedisError as e:
            raise StoreError(detail="Failed to create event", error_code="STORE_WRITE") from e
        if created:
            logger.info("Stored event id=%s", event.id)
            return event
        logger.warning("Event id collision id=%s, retrying", event.id)
    raise RuntimeError("Failed to generate unique event ID")


async def meeting_get(client: redis.Redis, event_id: str) -> ConfirmedMeeting | None:
    data = await load_json(client, _meeting_key(event_id))
    if data is None:
        return None
    return ConfirmedMeeting.model_validate(data)


async def meeting_save(client: redis.Redis, event_id: str, meeting: ConfirmedMeeting) -> ConfirmedMeeting:
    ttl = get_settings().store.event_ttl_sec
    await save_json(client, _meeting_key(event_id), meeting.model_dump(mode="json"), ttl)
    return meeting
