import pytest

from groupslot.scheduling import generate_slots
from groupslot.scheduling.weekly import (
    all_available_week,
    project_onto_grid,
    remove_early_hours_weekly,
    weekly_keys,
    weekly_preset,
)


def test_weekly_keys_cover_the_week():
    keys = weekly_keys()
    assert len(keys) == 7 * 48
    assert keys[0] == "monday-0-00"
    assert "sunday-23-30" in keys


def test_office_worker_preset():
    template = weekly_preset("office-worker")
    assert "monday-9-00" not in template
    assert "friday-17-30" not in template
    assert "friday-18-00" in template
    assert "saturday-10-00" in template
    assert len(template) == 7 * 48 - 5 * 18


def test_student_preset():
    template = weekly_preset("student")
    assert "tuesday-15-30" not in template
    assert "tuesday-16-00" in template


def test_unknown_preset():
    with pytest.raises(KeyError):
        weekly_preset("retired")


def test_remove_early_hours_weekly():
    template = remove_early_hours_weekly(all_available_week())
    assert "wednesday-6-30" not in template
    assert "wednesday-7-00" in template
    assert len(template) == 7 * (48 - 14)


def test_project_onto_grid_uses_day_of_week():
    template = {"monday-19-00": True, "tuesday-9-30": True, "sunday-19-00": True}
    slots = generate_slots("2025-06-02", "2025-06-03")
    assert project_onto_grid(template, slots) == {
        "2025-06-02-19-00": True,
        "2025-06-03-09-30": True,
    }
