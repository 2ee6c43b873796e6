"""Availability aggregation and meeting-time recommendation.

Pure, synchronous functions over immutable values: each takes the prior
Event or Participant and returns a new one.
"""

from groupslot.scheduling.aggregation import aggregate, slot_support, submitted_participants
from groupslot.scheduling.availability import (
    Brush,
    change_user_type,
    find_participant,
    join,
    paint_stroke,
    rename_participant,
    reopen,
    set_availability,
    submit,
    toggle,
    upsert_participant,
)
from groupslot.scheduling.confirmation import confirm, confirm_slot
from groupslot.scheduling.events import create_event, generate_id
from groupslot.scheduling.presets import PRESETS, apply_user_type_preset, remove_early_hours, seed_all_available
from groupslot.scheduling.recommendation import classify, recommend
from groupslot.scheduling.timegrid import (
    default_date_range,
    end_time,
    generate_slots,
    grid_keys,
    parse_slot_key,
    slot_key,
)

__all__ = [
    # Grid
    "generate_slots",
    "grid_keys",
    "slot_key",
    "parse_slot_key",
    "end_time",
    "default_date_range",
    # Events and participants
    "create_event",
    "generate_id",
    "join",
    "toggle",
    "Brush",
    "paint_stroke",
    "set_availability",
    "change_user_type",
    "reopen",
    "find_participant",
    "upsert_participant",
    "submit",
    "rename_participant",
    # Presets
    "PRESETS",
    "seed_all_available",
    "apply_user_type_preset",
    "remove_early_hours",
    # Aggregation and recommendation
    "aggregate",
    "submitted_participants",
    "slot_support",
    "classify",
    "recommend",
    # Confirmation
    "confirm",
    "confirm_slot",
]
