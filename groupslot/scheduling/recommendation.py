"""Tiered recommendation of meeting times.

With N submitted participants a slot is

* perfect when its count equals N,
* good when ceil(0.9 N) <= count < N,
* ok when ceil(0.8 N) <= count < ceil(0.9 N).

For small groups the thresholds coincide (N=2 gives 2 for both), so some
counts fall into no tier at all. That is kept as is.
"""

import math

from groupslot.models.scheduling import Event, Tier
from groupslot.scheduling.aggregation import aggregate, submitted_participants
from groupslot.scheduling.timegrid import generate_slots

DEFAULT_LIMIT = 5

COLOR_WEIGHTS = {"perfect": 600, "good": 500, "ok": 400}


def classify(count: int, total: int) -> str | None:
    if total <= 0:
        return None
    good_floor = math.ceil(total * 0.9)
    ok_floor = math.ceil(total * 0.8)
    if count == total:
        return "perfect"
    if good_floor <= count < total:
        return "good"
    if ok_floor <= count < good_floor:
        return "ok"
    return None


def _label(name: str, total: int) -> str:
    if name == "perfect":
        return f"All participants available ({total})"
    if name == "good":
        return "90%+ of participants available"
    return "80%+ of participants available"


def recommend(event: Event, limit: int = DEFAULT_LIMIT) -> list[Tier]:
    total = len(submitted_participants(event))
    if total == 0:
        return []
    counts = aggregate(event)
    buckets: dict[str, list] = {"perfect": [], "good": [], "ok": []}
    for slot in generate_slots(event.start_date, event.end_date):
        name = classify(counts.get(slot.key, 0), total)
        if name is not None:
            buckets[name].append(slot)
    return [
        Tier(name=name, label=_label(name, total), color_weight=COLOR_WEIGHTS[name], slots=slots[:limit])
        for name, slots in buckets.items()
        if slots
    ]
