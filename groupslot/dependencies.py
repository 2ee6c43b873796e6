"""Dependency injection for FastAPI endpoints.

Usage in controllers:
    from groupslot.dependencies import Redis

    @router.get("/example")
    async def example(client: Redis):
        ...
"""

from typing import Annotated

import redis.asyncio as redis
from fastapi import Depends

from groupslot import state
from groupslot.errors import ServiceUnavailableError


def get_redis() -> redis.Redis:
    """Get the Redis client.

    Raises:
        ServiceUnavailableError: If Redis is not connected.
    """
    if state.redis_client is None:
        raise ServiceUnavailableError(detail="Redis not connected")
    return state.redis_client


def get_optional_redis() -> redis.Redis | None:
    return state.redis_client


Redis = Annotated[redis.Redis, Depends(get_redis)]
OptionalRedis = Annotated[redis.Redis | None, Depends(get_optional_redis)]
