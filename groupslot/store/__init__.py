"""Opaque Redis-backed store for events, meetings and weekly templates."""

from groupslot.store.events import event_create, event_get, event_save, meeting_get, meeting_save
from groupslot.store.schedules import schedule_delete, schedule_get, schedule_save

__all__ = [
    "event_create",
    "event_get",
    "event_save",
    "meeting_get",
    "meeting_save",
    "schedule_get",
    "schedule_save",
    "schedule_delete",
]
