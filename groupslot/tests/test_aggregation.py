from groupslot.models.scheduling import Participant
from groupslot.scheduling import aggregate, slot_support, submit, submitted_participants, upsert_participant


class TestAggregate:
    def test_no_submissions_is_empty_mapping(self, two_day_event):
        draft = Participant(id="p1", name="Kim", availability={"2025-06-02-10-00": True})
        event = upsert_participant(two_day_event, draft)
        assert aggregate(event) == {}
        assert aggregate(two_day_event) == {}

    def test_counts_cover_full_grid_once_anyone_submits(self, two_day_event):
        event = submit(two_day_event, Participant(id="p1", name="Kim"))
        counts = aggregate(event)
        assert len(counts) == 96
        assert set(counts.values()) == {0}

    def test_all_submitted_on_same_slot(self, two_day_event):
        event = two_day_event
        for i in range(4):
            event = submit(event, Participant(id=f"p{i}", name=f"P{i}", availability={"2025-06-03-20-00": True}))
        assert aggregate(event)["2025-06-03-20-00"] == 4
        assert len(submitted_participants(event)) == 4

    def test_drafts_are_excluded(self, two_day_event):
        event = submit(two_day_event, Participant(id="p1", name="Kim", availability={"2025-06-02-10-00": True}))
        event = upsert_participant(event, Participant(id="p2", name="Lee", availability={"2025-06-02-10-00": True}))
        assert aggregate(event)["2025-06-02-10-00"] == 1

    def test_keys_outside_grid_are_ignored(self, two_day_event):
        stale = {"2025-05-30-10-00": True, "2025-06-02-10-00": True}
        event = submit(two_day_event, Participant(id="p1", name="Kim", availability=stale))
        counts = aggregate(event)
        assert "2025-05-30-10-00" not in counts
        assert counts["2025-06-02-10-00"] == 1


def test_scenario_counts(scenario_event):
    counts = aggregate(scenario_event)
    assert counts["2025-06-02-19-00"] == 2
    assert counts["2025-06-02-10-00"] == 1
    assert counts["2025-06-03-10-00"] == 0


def test_slot_support(scenario_event, two_day_event):
    assert slot_support(scenario_event, "2025-06-02-10-00") == (1, 2)
    assert slot_support(two_day_event, "2025-06-02-10-00") == (0, 0)
