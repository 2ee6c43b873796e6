import pytest
from unittest.mock import AsyncMock
from redis.exceptions import ConnectionError as RedisConnectionError

from groupslot import store
from groupslot.errors import StoreError
from groupslot.models.scheduling import Participant
from groupslot.scheduling import confirm, submit


class TestEvents:
    @pytest.mark.asyncio
    async def test_create_and_get(self, fake_redis):
        event = await store.event_create(fake_redis, "Study group", "2025-06-02", "2025-06-03", description="weekly")
        assert len(event.id) == 10
        loaded = await store.event_get(fake_redis, event.id)
        assert loaded == event

    @pytest.mark.asyncio
    async def test_get_missing(self, fake_redis):
        assert await store.event_get(fake_redis, "nope") is None

    @pytest.mark.asyncio
    async def test_save_round_trips_participants(self, fake_redis, two_day_event):
        event = submit(two_day_event, Participant(id="p1", name="Kim", availability={"2025-06-02-10-00": True}))
        await store.event_save(fake_redis, event)
        loaded = await store.event_get(fake_redis, event.id)
        assert loaded.participants[0].availability == {"2025-06-02-10-00": True}
        assert loaded.participants[0].submitted is True

    @pytest.mark.asyncio
    async def test_event_ttl_applied(self, fake_redis, two_day_event):
        await store.event_save(fake_redis, two_day_event)
        ttl = await fake_redis.ttl("groupslot:event:evt1")
        assert ttl > 0

    @pytest.mark.asyncio
    async def test_read_failure_raises_store_error(self):
        broken = AsyncMock()
        broken.get.side_effect = RedisConnectionError("down")
        with pytest.raises(StoreError) as exc_info:
            await store.event_get(broken, "evt1")
        assert exc_info.value.error_code == "STORE_READ"


class TestMeetings:
    @pytest.mark.asyncio
    async def test_save_and_get(self, fake_redis):
        meeting = confirm("2025-06-02", "19:00", 1.5, location="Cafe")
        await store.meeting_save(fake_redis, "evt1", meeting)
        loaded = await store.meeting_get(fake_redis, "evt1")
        assert loaded == meeting
        assert loaded.end_time == "20:30"

    @pytest.mark.asyncio
    async def test_missing(self, fake_redis):
        assert await store.meeting_get(fake_redis, "evt1") is None


class TestSchedules:
    @pytest.mark.asyncio
    async def test_snapshot_loads_back_verbatim(self, fake_redis):
        template = {"monday-9-00": True, "monday-9-30": True}
        await store.schedule_save(fake_redis, "kim", template)
        assert await store.schedule_get(fake_redis, "kim") == template

    @pytest.mark.asyncio
    async def test_false_entries_not_stored(self, fake_redis):
        saved = await store.schedule_save(fake_redis, "kim", {"monday-9-00": True, "monday-10-00": False})
        assert saved == {"monday-9-00": True}

    @pytest.mark.asyncio
    async def test_delete(self, fake_redis):
        await store.schedule_save(fake_redis, "kim", {"monday-9-00": True})
        assert await store.schedule_delete(fake_redis, "kim") is True
        assert await store.schedule_delete(fake_redis, "kim") is False
        assert await store.schedule_get(fake_redis, "kim") is None
