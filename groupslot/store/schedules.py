"""Weekly availability templates, stored verbatim per owner."""

import redis.asyncio as redis

from groupslot.config import get_settings
from groupslot.models.scheduling import true_only
from groupslot.store.core import delete, key, load_json, save_json


def _schedule_key(owner: str) -> str:
    return key("schedule", owner)


async def schedule_get(client: redis.Redis, owner: str) -> dict[str, bool] | None:
    data = await load_json(client, _schedule_key(owner))
    if data is None:
        return None
    return true_only(data)


async def schedule_save(client: redis.Redis, owner: str, template: dict[str, bool]) -> dict[str, bool]:
    template = true_only(template)
    await save_json(client, _schedule_key(owner), template, get_settings().store.schedule_ttl_sec)
    return template


async def schedule_delete(client: redis.Redis, owner: str) -> bool:
    return await delete(client, _schedule_key(owner))
