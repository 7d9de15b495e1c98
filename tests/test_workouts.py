from app_utils.plan_data import ExercisePlan, WeekTarget
from app_utils.storage import WORKOUT_KEY
from features.workouts import (
    clear_workouts, load_series, load_workout_logs, logged_entry, read_only_columns,
    set_workout_field, table_rows, upsert_workout_log,
)


def test_upsert_replaces_and_sorts_by_week(store):
    upsert_workout_log(store, "Squat", 3, 205, 5)
    upsert_workout_log(store, "Squat", 1, 185, 7)
    upsert_workout_log(store, "Squat", 3, 210, 4)

    logs = store.get(WORKOUT_KEY)
    assert logs["Squat"] == [
        {"week": 1, "load": 185.0, "reps": 7},
        {"week": 3, "load": 210.0, "reps": 4},
    ]


def test_clearing_both_fields_removes_record(store):
    upsert_workout_log(store, "Squat", 3, 135, 5)
    set_workout_field(store, "Squat", 3, "load", "")
    assert logged_entry(load_workout_logs(store), "Squat", 3) == {"week": 3, "load": "", "reps": 5}

    set_workout_field(store, "Squat", 3, "reps", "")
    assert load_workout_logs(store)["Squat"] == []


def test_set_field_creates_record_and_keeps_other_field(store):
    set_workout_field(store, "Bench", 2, "reps", "8")
    set_workout_field(store, "Bench", 2, "load", "140.5")
    set_workout_field(store, "Bench", 1, "load", 135)

    logs = load_workout_logs(store)
    assert logs["Bench"] == [
        {"week": 1, "load": 135.0, "reps": ""},
        {"week": 2, "load": 140.5, "reps": 8},
    ]


def test_rejects_bad_edits(store):
    assert set_workout_field(store, "Bench", 2, "tempo", "3") is False
    assert set_workout_field(store, "Bench", 2, "load", "abc") is False
    assert set_workout_field(store, "Bench", 2, "reps", "7.5") is False
    assert upsert_workout_log(store, "Bench", 2, "abc", 8) is False
    assert upsert_workout_log(store, "", 2, 100, 8) is False
    assert WORKOUT_KEY not in store


def test_out_of_range_week_is_stored(store):
    assert upsert_workout_log(store, "Bench", 12, 100, 8) is True
    assert logged_entry(load_workout_logs(store), "Bench", 12)["load"] == 100.0


def test_load_series_skips_reps_only_weeks(store):
    upsert_workout_log(store, "Row", 1, 135, 8)
    set_workout_field(store, "Row", 2, "reps", 8)
    upsert_workout_log(store, "Row", 3, 145, 7)
    assert load_series(load_workout_logs(store), "Row") == ([1, 3], [135.0, 145.0])
    assert load_series({}, "Row") == ([], [])


def test_clear(store):
    upsert_workout_log(store, "Squat", 1, 185, 7)
    clear_workouts(store)
    assert load_workout_logs(store) == {}


def test_table_shows_plan_targets_next_to_logs(store):
    bench = ExercisePlan("Bench", sets="3", target_reps="6-8",
                         targets={1: WeekTarget("135", "8"), 2: WeekTarget("", "10")})
    upsert_workout_log(store, "Bench", 1, 140, 7)

    [row] = table_rows([bench], load_workout_logs(store))
    assert row["W1 Plan"] == "135 x 8"
    assert row["W2 Plan"] == "10"
    assert row["W3 Plan"] == ""
    assert (row["W1 Load"], row["W1 Reps"]) == ("140.0", "7")
    assert (row["W2 Load"], row["W2 Reps"]) == ("", "")


def test_plan_columns_are_read_only():
    cols = read_only_columns()
    assert "W8 Plan" in cols
    assert not any(c.endswith(("Load", "Reps")) for c in cols)


def test_add_log_rejects_bad_input(store):
    assert upsert_workout_log(store, "", 1, 100, 5) is False
    assert upsert_workout_log(store, "Bench", 1, "heavy", 5) is False
    assert upsert_workout_log(store, "Bench", "one", 100, 5) is False
    assert WORKOUT_KEY not in store
