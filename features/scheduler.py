import logging

from app_utils.storage import SCHEDULER_KEY, clear_collection, load_dict

log = logging.getLogger(__name__)


def default_cell():
    return {"completed": False, "note": ""}


def load_progress(store):
    return load_dict(store, SCHEDULER_KEY)


def cell(progress, week_label, day_label):
    found = progress.get(week_label, {}).get(day_label)
    if not found:
        return default_cell()
    return {**default_cell(), **found}


def set_progress(store, week_label, day_label, completed=None, note=None):
    """
    Update one schedule cell. None leaves that sub-field as it was.
    Week/day labels come from the plan's scheduler rows and are used as-is.
    """
    progress = load_progress(store)
    week = progress.setdefault(week_label, {})
    current = week.get(day_label) or default_cell()
    if completed is not None:
        current["completed"] = bool(completed)
    if note is not None:
        current["note"] = note
    week[day_label] = current
    store.set(SCHEDULER_KEY, progress)
    log.info("schedule %s / %s -> %s", week_label, day_label, current)
    return True


def completion_ratio(progress, week_label, day_labels) -> float:
    # share of the week's days ticked off
    if not day_labels:
        return 0.0
    done = sum(1 for d in day_labels if cell(progress, week_label, d)["completed"])
    return done / max(1, len(day_labels))


def clear_scheduler(store):
    clear_collection(store, "scheduler")
