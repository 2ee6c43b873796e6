"""Key layout and JSON helpers for the opaque Redis store."""

import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from groupslot.config import get_settings
from groupslot.errors import StoreError


def key(*parts: str) -> str:
    return ":".join([get_settings().store.key_prefix, *parts])


async def load_json(client: redis.Redis, name: str) -> Any | None:
    try:
        raw = await client.get(name)
    except RedisError as e:
        raise StoreError(detail=f"Failed to read {name}", error_code="STORE_READ") from e
    if raw is None:
        return None
    return json.loads(raw)


async def save_json(client: redis.Redis, name: str, payload: Any, ttl: int = 0) -> None:
    data = json.dumps(payload)
    try:
        if ttl > 0:
            await client.setex(name, ttl, data)
        else:
            await client.set(name, data)
    except RedisError as e:
        raise StoreError(detail=f"Failed to write {name}", error_code="STORE_WRITE") from e


async def delete(client: redis.Redis, name: str) -> bool:
    try:
        return bool(await client.delete(name))
    except RedisError as e:
        raise StoreError(detail=f"Failed to delete {name}", error_code="STORE_DELETE") from e
