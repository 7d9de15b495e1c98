import logging

from app_utils.numbers import is_empty, to_float, to_int
from app_utils.storage import WORKOUT_KEY, clear_collection, load_dict

log = logging.getLogger(__name__)

# 8-week progressive overload block. Not enforced by the store.
WEEKS = range(1, 9)
FIELDS = ("load", "reps")

_PARSERS = {"load": to_float, "reps": to_int}


def load_workout_logs(store):
    return load_dict(store, WORKOUT_KEY)


def logged_entry(logs, exercise, week):
    for item in logs.get(exercise, []):
        if item.get("week") == week:
            return item
    return None


def upsert_workout_log(store, exercise, week, load, reps):
    week_no = to_int(week)
    load_val = to_float(load)
    reps_val = to_int(reps)
    if not exercise or week_no is None or load_val is None or reps_val is None:
        log.debug("rejected workout log %r week=%r load=%r reps=%r", exercise, week, load, reps)
        return False

    logs = load_workout_logs(store)
    items = logs.get(exercise, [])
    record = {"week": week_no, "load": load_val, "reps": reps_val}
    for i, item in enumerate(items):
        if item.get("week") == week_no:
            items[i] = record
            break
    else:
        items.append(record)

    items.sort(key=lambda l: l["week"])
    logs[exercise] = items
    store.set(WORKOUT_KEY, logs)
    log.info("logged %s week %d: %s x %s", exercise, week_no, load_val, reps_val)
    return True


def set_workout_field(store, exercise, week, field, value):
    """
    Edit a single cell of the log table. An empty value clears the field;
    a record left with both fields empty is dropped.
    """
    week_no = to_int(week)
    if not exercise or week_no is None or field not in _PARSERS:
        log.debug("rejected workout edit %r week=%r field=%r", exercise, week, field)
        return False

    if is_empty(value):
        parsed = ""
    else:
        parsed = _PARSERS[field](value)
        if parsed is None:
            log.debug("rejected workout %s value %r", field, value)
            return False

    logs = load_workout_logs(store)
    items = logs.get(exercise, [])
    item = logged_entry(logs, exercise, week_no)
    if item is None:
        item = {"week": week_no, "load": "", "reps": ""}
        items.append(item)
    item[field] = parsed

    if all(is_empty(item.get(f)) for f in FIELDS):
        items = [l for l in items if l is not item]
        log.info("removed empty log %s week %d", exercise, week_no)

    items.sort(key=lambda l: l["week"])
    logs[exercise] = items
    store.set(WORKOUT_KEY, logs)
    return True


def plan_label(target):
    if target.load and target.reps:
        return f"{target.load} x {target.reps}"
    return target.load or target.reps


def table_rows(exercises, logs):
    """
    One row per planned exercise: plan target next to the logged load/reps for every week.
    Logged cells are strings so they can be edited in place.
    """
    rows = []
    for ex in exercises:
        row = {"Exercise": ex.name, "Sets": ex.sets, "Target Reps": ex.target_reps}
        for week in WEEKS:
            item = logged_entry(logs, ex.name, week) or {}
            row[f"W{week} Plan"] = plan_label(ex.target(week))
            row[f"W{week} Load"] = str(item.get("load", ""))
            row[f"W{week} Reps"] = str(item.get("reps", ""))
        rows.append(row)
    return rows


def read_only_columns():
    return ["Exercise", "Sets", "Target Reps"] + [f"W{w} Plan" for w in WEEKS]


def load_series(logs, exercise):
    """(weeks, loads) for charting, skipping weeks with no load."""
    items = [l for l in logs.get(exercise, []) if not is_empty(l.get("load"))]
    return [l["week"] for l in items], [l["load"] for l in items]


def clear_workouts(store):
    clear_collection(store, "workouts")
