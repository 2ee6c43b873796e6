"""Joining an event and editing one participant's availability.

Every write loads the event, applies one transition from
``groupslot.scheduling`` and saves the result while holding the event's
lock, so concurrent submissions never lose each other's merge.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, field_validator

from groupslot import state, store
from groupslot.controllers.common import SLOT_RE, check_slots, load_event, load_participant
from groupslot.dependencies import Redis
from groupslot.errors import ConflictError, NotFoundError
from groupslot.models.scheduling import Event, Participant, UserType
from groupslot.scheduling import (
    apply_user_type_preset,
    change_user_type,
    generate_slots,
    join,
    paint_stroke,
    remove_early_hours,
    rename_participant,
    reopen,
    set_availability,
    submit,
    toggle,
    upsert_participant,
)
from groupslot.scheduling.weekly import project_onto_grid

logger = logging.getLogger("groupslot.participants")
router = APIRouter()


def _validate_name(v: str) -> str:
    v = v.strip()
    if not v or len(v) > 100:
        raise ValueError("name must be 1-100 characters")
    return v


def _validate_slots(v: List[str]) -> List[str]:
    for s in v:
        if not SLOT_RE.match(s):
            raise ValueError(f"invalid slot format: {s}")
    return v


class JoinRequest(BaseModel):
    """Join as a draft participant.

    The draft starts fully available, or from the weekly template of
    ``template_owner`` when given; the ``user_type`` preset is applied on top.
    """

    name: str
    user_type: UserType = "custom"
    template_owner: Optional[str] = None
    no_early_hours: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v)


class UpdateParticipantRequest(BaseModel):
    name: Optional[str] = None
    user_type: Optional[UserType] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _validate_name(v)


class ToggleRequest(BaseModel):
    slot: str

    @field_validator("slot")
    @classmethod
    def validate_slot(cls, v: str) -> str:
        return _validate_slots([v])[0]


class StrokeRequest(BaseModel):
    slots: List[str]

    @field_validator("slots")
    @classmethod
    def validate_slots(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("slots must not be empty")
        return _validate_slots(v)


class SubmitRequest(BaseModel):
    available_slots: Optional[List[str]] = None

    @field_validator("available_slots")
    @classmethod
    def validate_available_slots(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return None if v is None else _validate_slots(v)


def _require_editing(participant: Participant) -> None:
    if participant.submitted:
        raise ConflictError(
            detail="Participant already submitted; reopen to edit",
            participant_id=participant.id,
        )


async def _save(client, event: Event, participant: Participant) -> Participant:
    await store.event_save(client, upsert_participant(event, participant))
    return participant


@router.post("/events/{event_id}/participants", status_code=201)
async def join_event(event_id: str, req: JoinRequest, client: Redis) -> Participant:
    logger.info("POST /events/%s/participants name=%s user_type=%s", event_id, req.name, req.user_type)
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        slots = generate_slots(event.start_date, event.end_date)
        participant = join(req.name, req.user_type, slots)
        if req.template_owner:
            template = await store.schedule_get(client, req.template_owner)
            if template is None:
                raise NotFoundError(detail="Weekly schedule not found", owner=req.template_owner)
            projected = project_onto_grid(template, slots)
            participant = set_availability(participant, apply_user_type_preset(req.user_type, projected, slots))
        if req.no_early_hours:
            participant = set_availability(participant, remove_early_hours(participant.availability, slots))
        await _save(client, event, participant)
    logger.info("Participant %s joined event %s", participant.id, event_id)
    return participant


@router.get("/events/{event_id}/participants/{participant_id}")
async def get_participant(event_id: str, participant_id: str, client: Redis) -> Participant:
    event = await load_event(client, event_id)
    return load_participant(event, participant_id)


@router.patch("/events/{event_id}/participants/{participant_id}")
async def update_participant(event_id: str, participant_id: str, req: UpdateParticipantRequest, client: Redis) -> Participant:
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = load_participant(event, participant_id)
        if req.user_type is not None and req.user_type != participant.user_type:
            _require_editing(participant)
            participant = change_user_type(participant, req.user_type, generate_slots(event.start_date, event.end_date))
            event = upsert_participant(event, participant)
        if req.name is not None:
            event = rename_participant(event, participant_id, req.name)
        await store.event_save(client, event)
    return load_participant(event, participant_id)


@router.post("/events/{event_id}/participants/{participant_id}/toggle")
async def toggle_slot(event_id: str, participant_id: str, req: ToggleRequest, client: Redis) -> Participant:
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = load_participant(event, participant_id)
        _require_editing(participant)
        check_slots(event, [req.slot])
        participant = set_availability(participant, toggle(participant.availability, req.slot))
        return await _save(client, event, participant)


@router.post("/events/{event_id}/participants/{participant_id}/strokes")
async def paint_slots(event_id: str, participant_id: str, req: StrokeRequest, client: Redis) -> Participant:
    """Apply one drag gesture; the first slot decides whether the stroke adds or removes."""
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = load_participant(event, participant_id)
        _require_editing(participant)
        check_slots(event, req.slots)
        participant = set_availability(participant, paint_stroke(participant.availability, req.slots))
        return await _save(client, event, participant)


@router.post("/events/{event_id}/participants/{participant_id}/early-hours")
async def drop_early_hours(event_id: str, participant_id: str, client: Redis) -> Participant:
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = load_participant(event, participant_id)
        _require_editing(participant)
        slots = generate_slots(event.start_date, event.end_date)
        participant = set_availability(participant, remove_early_hours(participant.availability, slots))
        return await _save(client, event, participant)


@router.post("/events/{event_id}/participants/{participant_id}/submit")
async def submit_availability(event_id: str, participant_id: str, req: SubmitRequest, client: Redis) -> Participant:
    logger.info("POST /events/%s/participants/%s/submit", event_id, participant_id)
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = load_participant(event, participant_id)
        if req.available_slots is not None:
            check_slots(event, req.available_slots)
            participant = set_availability(participant, {s: True for s in req.available_slots})
        event = submit(event, participant)
        await store.event_save(client, event)
    logger.info("Participant %s submitted %d slots to event %s", participant_id, len(participant.availability), event_id)
    return load_participant(event, participant_id)


@router.post("/events/{event_id}/participants/{participant_id}/reopen")
async def reopen_participant(event_id: str, participant_id: str, client: Redis) -> Participant:
    async with state.event_lock(event_id):
        event = await load_event(client, event_id)
        participant = reopen(load_participant(event, participant_id))
        return await _save(client, event, participant)
