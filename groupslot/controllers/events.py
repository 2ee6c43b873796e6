import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, field_validator, model_validator

from groupslot import store
from groupslot.config import get_settings
from groupslot.controllers.common import SLOT_RE, TIME_RE, check_date, check_slots, load_event
from groupslot.dependencies import Redis
from groupslot.errors import NotFoundError
from groupslot.models.scheduling import ConfirmedMeeting, Event, Tier, TimeSlot
from groupslot.scheduling import (
    aggregate,
    confirm,
    default_date_range,
    generate_slots,
    parse_slot_key,
    recommend,
    slot_support,
    submitted_participants,
)

logger = logging.getLogger("groupslot.events")
router = APIRouter()


class CreateEventRequest(BaseModel):
    title: str
    description: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v or len(v) > 200:
            raise ValueError("title must be 1-200 characters")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_date(cls, v: Optional[str]) -> Optional[str]:
        return check_date(v)

    @model_validator(mode="after")
    def fill_and_order(self) -> "CreateEventRequest":
        default_start, default_end = default_date_range()
        self.start_date = self.start_date or default_start
        self.end_date = self.end_date or default_end
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class ConfirmRequest(BaseModel):
    slot: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    duration: Optional[float] = None
    location: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("slot")
    @classmethod
    def validate_slot(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not SLOT_RE.match(v):
            raise ValueError(f"invalid slot format: {v}")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: Optional[str]) -> Optional[str]:
        return check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not TIME_RE.match(v):
            raise ValueError(f"invalid time format: {v}")
        return v

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return v
        cfg = get_settings().scheduling
        if not cfg.min_duration <= v <= cfg.max_duration:
            raise ValueError(f"duration must be between {cfg.min_duration} and {cfg.max_duration} hours")
        steps = v / cfg.duration_step
        if not math.isclose(steps, round(steps)):
            raise ValueError(f"duration must be a multiple of {cfg.duration_step} hours")
        return v

    @model_validator(mode="after")
    def require_slot(self) -> "ConfirmRequest":
        if self.slot is None and (self.date is None or self.time is None):
            raise ValueError("either slot or date and time are required")
        return self

    def slot_key(self) -> str:
        if self.slot is not None:
            return self.slot
        hour, minute = self.time.split(":")
        return f"{self.date}-{hour}-{minute}"


class EventView(BaseModel):
    event: Event
    submitted_count: int
    summary: Dict[str, int]
    recommendations: List[Tier]
    meeting: Optional[ConfirmedMeeting] = None


class MeetingView(BaseModel):
    meeting: ConfirmedMeeting
    available: int
    total: int


@router.post("/events", status_code=201)
async def create_event(req: CreateEventRequest, client: Redis) -> Event:
    logger.info("POST /events title=%s range=%s..%s", req.title, req.start_date, req.end_date)
    event = await store.event_create(
        client,
        title=req.title,
        start_date=req.start_date,
        end_date=req.end_date,
        description=req.description,
    )
    logger.info("Created event id=%s", event.id)
    return event


@router.get("/events/{event_id}")
async def get_event(event_id: str, client: Redis) -> EventView:
    logger.info("GET /events/%s", event_id)
    event = await load_event(client, event_id)
    limit = get_settings().scheduling.recommendation_limit
    return EventView(
        event=event,
        submitted_count=len(submitted_participants(event)),
        summary=aggregate(event),
        recommendations=recommend(event, limit=limit),
        meeting=await store.meeting_get(client, event_id),
    )


@router.get("/events/{event_id}/slots")
async def get_slots(event_id: str, client: Redis) -> List[TimeSlot]:
    event = await load_event(client, event_id)
    return generate_slots(event.start_date, event.end_date)


@router.get("/events/{event_id}/slots/{slot}")
async def get_slot_support(event_id: str, slot: str, client: Redis) -> Dict[str, Any]:
    event = await load_event(client, event_id)
    check_slots(event, [slot])
    available, total = slot_support(event, slot)
    return {"slot": parse_slot_key(slot), "available": available, "total": total}


@router.get("/events/{event_id}/recommendations")
async def get_recommendations(event_id: str, client: Redis) -> List[Tier]:
    event = await load_event(client, event_id)
    return recommend(event, limit=get_settings().scheduling.recommendation_limit)


@router.post("/events/{event_id}/confirm", status_code=201)
async def confirm_meeting(event_id: str, req: ConfirmRequest, client: Redis) -> MeetingView:
    logger.info("POST /events/%s/confirm slot=%s date=%s time=%s", event_id, req.slot, req.date, req.time)
    event = await load_event(client, event_id)
    key = req.slot_key()
    check_slots(event, [key])
    slot = parse_slot_key(key)
    duration = req.duration if req.duration is not None else get_settings().scheduling.default_duration
    meeting = confirm(slot.date, slot.display, duration, location=req.location, notes=req.notes)
    await store.meeting_save(client, event_id, meeting)
    available, total = slot_support(event, key)
    logger.info("Confirmed meeting for event %s at %s %s (%d/%d available)", event_id, meeting.date, meeting.time, available, total)
    return MeetingView(meeting=meeting, available=available, total=total)


@router.get("/events/{event_id}/meeting")
async def get_meeting(event_id: str, client: Redis) -> MeetingView:
    event = await load_event(client, event_id)
    meeting = await store.meeting_get(client, event_id)
    if meeting is None:
        raise NotFoundError(detail="No meeting confirmed yet", event_id=event_id)
    key = f"{meeting.date}-{meeting.time.replace(':', '-')}"
    available, total = slot_support(event, key)
    return MeetingView(meeting=meeting, available=available, total=total)
