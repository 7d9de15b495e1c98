from app_utils.storage import SCHEDULER_KEY
from features.scheduler import (
    cell, clear_scheduler, completion_ratio, load_progress, set_progress,
)

DAYS = ["Mon: Push A", "Tue: Pull A", "Wed: Legs A", "Sun: Rest/Cardio"]


def test_creates_cell_with_defaults(store):
    set_progress(store, "Week 1", "Mon: Push A", completed=True)
    assert store.get(SCHEDULER_KEY) == {"Week 1": {"Mon: Push A": {"completed": True, "note": ""}}}


def test_none_leaves_field_unchanged(store):
    set_progress(store, "Week 1", "Tue: Pull A", completed=True)
    set_progress(store, "Week 1", "Tue: Pull A", note="felt strong")
    set_progress(store, "Week 1", "Tue: Pull A", completed=False)

    assert cell(load_progress(store), "Week 1", "Tue: Pull A") == {"completed": False, "note": "felt strong"}


def test_labels_are_opaque_strings(store):
    set_progress(store, "Deload (wk 5)", "Sat: Legs B", note="skip")
    set_progress(store, "1", "Sat: Legs B", completed=True)
    progress = load_progress(store)
    assert set(progress) == {"Deload (wk 5)", "1"}


def test_cell_defaults_for_missing():
    assert cell({}, "Week 9", "Mon: Push A") == {"completed": False, "note": ""}


def test_completion_ratio(store):
    set_progress(store, "Week 2", "Mon: Push A", completed=True)
    set_progress(store, "Week 2", "Wed: Legs A", completed=True)
    set_progress(store, "Week 2", "Tue: Pull A", note="missed")
    assert completion_ratio(load_progress(store), "Week 2", DAYS) == 0.5
    assert completion_ratio({}, "Week 2", []) == 0.0


def test_clear(store):
    set_progress(store, "Week 1", "Mon: Push A", completed=True)
    clear_scheduler(store)
    assert load_progress(store) == {}
