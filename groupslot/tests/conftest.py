import os
import sys
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest
from fastapi.testclient import TestClient
import fakeredis.aioredis as fakeredis

import groupslot.lifespan as lifespan
import groupslot.main as main
from groupslot.scheduling import create_event, generate_slots, join, submit
from groupslot.scheduling.availability import set_availability


class _AwaitableRedis:
    def __init__(self, client):
        self._client = client

    def __await__(self):
        async def _coro():
            return self._client

        return _coro().__await__()


@pytest.fixture
def client(monkeypatch):
    def fake_redis_constructor(*_args, **_kwargs):
        fake = fakeredis.FakeRedis(decode_responses=True)
        return _AwaitableRedis(fake)

    monkeypatch.setattr(lifespan.redis, "Redis", fake_redis_constructor)

    with TestClient(main.app) as c:
        yield c


@pytest.fixture
def fake_redis():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def two_day_event():
    """2025-06-02 (Mon) to 2025-06-03 (Tue), nobody joined yet."""
    return create_event("Team dinner", "2025-06-02", "2025-06-03", event_id="evt1")


@pytest.fixture
def scenario_event(two_day_event):
    """Office worker A on preset defaults, custom B free all of Monday only."""
    slots = generate_slots(two_day_event.start_date, two_day_event.end_date)
    a = join("A", "office-worker", slots, participant_id="a")
    b = join("B", "custom", slots, participant_id="b")
    b = set_availability(b, {s.key: True for s in slots if s.date == "2025-06-02"})
    event = submit(two_day_event, a)
    return submit(event, b)
