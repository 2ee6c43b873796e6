import logging
import re
from typing import Any, Dict, Literal

from fastapi import APIRouter
from pydantic import BaseModel, field_validator

from groupslot import store
from groupslot.dependencies import Redis
from groupslot.errors import NotFoundError
from groupslot.scheduling.weekly import all_available_week, remove_early_hours_weekly, weekly_preset

logger = logging.getLogger("groupslot.schedules")
router = APIRouter()

WEEKLY_KEY_RE = re.compile(r"^(monday|tuesday|wednesday|thursday|friday|saturday|sunday)-(1?\d|2[0-3])-(00|30)$")


class ScheduleBody(BaseModel):
    schedule: Dict[str, bool]

    @field_validator("schedule")
    @classmethod
    def validate_schedule(cls, v: Dict[str, bool]) -> Dict[str, bool]:
        for k in v:
            if not WEEKLY_KEY_RE.match(k):
                raise ValueError(f"invalid weekly slot: {k}")
        return v


class PresetRequest(BaseModel):
    preset: Literal["office-worker", "student", "all"]


def _response(owner: str, schedule: Dict[str, bool]) -> Dict[str, Any]:
    return {"owner": owner, "schedule": schedule, "slot_count": len(schedule)}


async def _load(client, owner: str) -> Dict[str, bool]:
    schedule = await store.schedule_get(client, owner)
    if schedule is None:
        raise NotFoundError(detail="Weekly schedule not found", owner=owner)
    return schedule


@router.get("/schedules/{owner}")
async def get_schedule(owner: str, client: Redis) -> Dict[str, Any]:
    return _response(owner, await _load(client, owner))


@router.put("/schedules/{owner}")
async def put_schedule(owner: str, body: ScheduleBody, client: Redis) -> Dict[str, Any]:
    saved = await store.schedule_save(client, owner, body.schedule)
    logger.info("Saved weekly schedule owner=%s slots=%d", owner, len(saved))
    return _response(owner, saved)


@router.delete("/schedules/{owner}")
async def delete_schedule(owner: str, client: Redis) -> Dict[str, Any]:
    deleted = await store.schedule_delete(client, owner)
    if not deleted:
        raise NotFoundError(detail="Weekly schedule not found", owner=owner)
    return {"owner": owner, "deleted": True}


@router.post("/schedules/{owner}/preset")
async def apply_preset(owner: str, req: PresetRequest, client: Redis) -> Dict[str, Any]:
    """Replace the owner's template with a fresh preset."""
    if req.preset == "all":
        schedule = all_available_week()
    else:
        schedule = weekly_preset(req.preset)
    saved = await store.schedule_save(client, owner, schedule)
    logger.info("Applied weekly preset %s owner=%s", req.preset, owner)
    return _response(owner, saved)


@router.post("/schedules/{owner}/early-hours")
async def drop_early_hours(owner: str, client: Redis) -> Dict[str, Any]:
    schedule = remove_early_hours_weekly(await _load(client, owner))
    return _response(owner, await store.schedule_save(client, owner, schedule))
