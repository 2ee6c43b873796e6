import pytest

from groupslot.models.scheduling import Participant
from groupslot.scheduling import aggregate, classify, recommend, submit


def _event_with_counts(base, total, counts):
    """Submit ``total`` participants so that slot k is held by counts[k] of them."""
    event = base
    for i in range(total):
        availability = {k: True for k, c in counts.items() if i < c}
        event = submit(event, Participant(id=f"p{i}", name=f"P{i}", availability=availability))
    return event


class TestClassify:
    @pytest.mark.parametrize(
        "count,total,expected",
        [
            (10, 10, "perfect"),
            (9, 10, "good"),
            (8, 10, "ok"),
            (7, 10, None),
            (1, 1, "perfect"),
            (0, 1, None),
            (1, 2, None),
            (4, 5, "ok"),
            (19, 20, "good"),
            (18, 20, "good"),
            (17, 20, "ok"),
            (16, 20, "ok"),
            (15, 20, None),
        ],
    )
    def test_thresholds(self, count, total, expected):
        assert classify(count, total) == expected

    def test_no_participants(self):
        assert classify(0, 0) is None


class TestRecommend:
    def test_empty_without_submissions(self, two_day_event):
        assert recommend(two_day_event) == []

    def test_tiers_in_priority_order_and_disjoint(self, two_day_event):
        counts = {
            "2025-06-02-10-00": 10,
            "2025-06-02-11-00": 9,
            "2025-06-02-12-00": 8,
            "2025-06-02-13-00": 7,
        }
        event = _event_with_counts(two_day_event, 10, counts)
        tiers = recommend(event)
        assert [t.name for t in tiers] == ["perfect", "good", "ok"]
        assert [[s.key for s in t.slots] for t in tiers] == [
            ["2025-06-02-10-00"],
            ["2025-06-02-11-00"],
            ["2025-06-02-12-00"],
        ]
        assert [t.color_weight for t in tiers] == [600, 500, 400]
        assert tiers[0].label == "All participants available (10)"

    def test_empty_tiers_are_skipped(self, two_day_event):
        event = _event_with_counts(two_day_event, 10, {"2025-06-02-12-00": 8})
        assert [t.name for t in recommend(event)] == ["ok"]

    def test_truncates_to_first_five_chronologically(self, two_day_event):
        keys = [f"2025-06-03-{h:02d}-00" for h in range(23, 15, -1)]
        event = _event_with_counts(two_day_event, 3, {k: 3 for k in keys})
        (perfect,) = recommend(event)
        assert [s.key for s in perfect.slots] == [f"2025-06-03-{h:02d}-00" for h in range(16, 21)]
        assert len(recommend(event, limit=10)[0].slots) == 8

    def test_slot_belongs_to_at_most_one_tier(self, scenario_event):
        tiers = recommend(scenario_event, limit=1000)
        seen = [s.key for t in tiers for s in t.slots]
        assert len(seen) == len(set(seen))


def test_scenario_recommendations(scenario_event):
    counts = aggregate(scenario_event)
    assert classify(counts["2025-06-02-19-00"], 2) == "perfect"
    assert classify(counts["2025-06-02-10-00"], 2) is None

    tiers = recommend(scenario_event, limit=1000)
    assert [t.name for t in tiers] == ["perfect"]
    keys = [s.key for s in tiers[0].slots]
    assert "2025-06-02-19-00" in keys
    assert "2025-06-02-10-00" not in keys
    # Monday outside 09:00-18:00 for A, and B is free all Monday
    assert len(keys) == 48 - 18

    (shown,) = recommend(scenario_event)
    assert [s.key for s in shown.slots] == [
        "2025-06-02-00-00",
        "2025-06-02-00-30",
        "2025-06-02-01-00",
        "2025-06-02-01-30",
        "2025-06-02-02-00",
    ]
