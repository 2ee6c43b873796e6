"""Per-participant availability editing and merging into an event.

Availability maps are sparse: a slot key is present (mapped to ``True``)
when the participant is available and absent otherwise. Every function
here returns a new value and leaves its inputs untouched.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from groupslot.models.scheduling import Event, Participant, TimeSlot, true_only
from groupslot.scheduling.events import generate_id
from groupslot.scheduling.presets import apply_user_type_preset, seed_all_available

logger = logging.getLogger("groupslot.scheduling.availability")


def toggle(availability: dict[str, bool], key: str) -> dict[str, bool]:
    updated = dict(availability)
    if updated.get(key) is True:
        del updated[key]
    else:
        updated[key] = True
    return updated


def paint(availability: dict[str, bool], key: str, intent: bool) -> dict[str, bool]:
    updated = dict(availability)
    if intent:
        updated[key] = True
    else:
        updated.pop(key, None)
    return updated


@dataclass(frozen=True)
class Brush:
    """Drag-to-paint gesture.

    Idle while ``intent`` is None. Pressing on a slot captures the intent
    from that slot (turn on if it was off, off if it was on) and every slot
    dragged over afterwards gets the same intent until release.
    """

    intent: bool | None = None

    @property
    def painting(self) -> bool:
        return self.intent is not None

    def press(self, availability: dict[str, bool], key: str) -> tuple["Brush", dict[str, bool]]:
        intent = availability.get(key) is not True
        return Brush(intent=intent), paint(availability, key, intent)

    def drag(self, availability: dict[str, bool], key: str) -> dict[str, bool]:
        if self.intent is None:
            return dict(availability)
        return paint(availability, key, self.intent)

    def release(self) -> "Brush":
        return Brush()


def paint_stroke(availability: dict[str, bool], keys: Iterable[str]) -> dict[str, bool]:
    """Replay a whole drag gesture: press on the first key, drag over the rest."""
    brush = Brush()
    result = dict(availability)
    for key in keys:
        if brush.painting:
            result = brush.drag(result, key)
        else:
            brush, result = brush.press(result, key)
    return result


def join(name: str, user_type: str, slots: Iterable[TimeSlot], participant_id: str | None = None) -> Participant:
    """Draft participant, all slots available minus the user type preset."""
    slots = list(slots)
    availability = apply_user_type_preset(user_type, seed_all_available(slots), slots)
    return Participant(
        id=participant_id or generate_id(9),
        name=name,
        user_type=user_type,
        availability=availability,
        submitted=False,
    )


def set_availability(participant: Participant, availability: dict[str, bool]) -> Participant:
    return participant.model_copy(update={"availability": true_only(availability)})


def change_user_type(participant: Participant, user_type: str, slots: Iterable[TimeSlot]) -> Participant:
    slots = list(slots)
    current = participant.availability or seed_all_available(slots)
    availability = apply_user_type_preset(user_type, current, slots)
    return participant.model_copy(update={"user_type": user_type, "availability": availability})


def reopen(participant: Participant) -> Participant:
    """Submitted back to editing; the last submitted slots stay in place."""
    return participant.model_copy(update={"submitted": False})


def find_participant(event: Event, participant_id: str) -> Participant | None:
    for p in event.participants:
        if p.id == participant_id:
            return p
    return None


def upsert_participant(event: Event, participant: Participant) -> Event:
    """Replace the participant with the same id in place, or append it."""
    participants = list(event.participants)
    for i, p in enumerate(participants):
        if p.id == participant.id:
            participants[i] = participant
            logger.debug("Replaced participant %s at position %d in event %s", participant.id, i, event.id)
            break
    else:
        participants.append(participant)
        logger.debug("Appended participant %s to event %s", participant.id, event.id)
    return event.model_copy(update={"participants": participants})


def submit(event: Event, participant: Participant) -> Event:
    return upsert_participant(event, participant.model_copy(update={"submitted": True}))


def rename_participant(event: Event, participant_id: str, name: str) -> Event:
    """Copy of the event with one participant renamed; unknown ids change nothing."""
    existing = find_participant(event, participant_id)
    if existing is None:
        return event
    return upsert_participant(event, existing.model_copy(update={"name": name}))
