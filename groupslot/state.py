from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional
import redis.asyncio as redis
import asyncio

# Global runtime state initialized in lifespan
redis_client: Optional[redis.Redis] = None

# One lock per event id; read-modify-write of an event happens under it.
# An entry lives only while some request holds or waits on the lock.
event_locks: Dict[str, asyncio.Lock] = {}
event_lock_users: Dict[str, int] = {}


@asynccontextmanager
async def event_lock(event_id: str) -> AsyncIterator[None]:
    lock = event_locks.get(event_id)
    if lock is None:
        lock = asyncio.Lock()
        event_locks[event_id] = lock
    event_lock_users[event_id] = event_lock_users.get(event_id, 0) + 1
    try:
        async with lock:
            yield
    finally:
        event_lock_users[event_id] -= 1
        if event_lock_users[event_id] == 0:
            del event_lock_users[event_id]
            del event_locks[event_id]
