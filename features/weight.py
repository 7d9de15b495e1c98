import logging

import pandas as pd

from app_utils.dates import days_between, parse_date, sort_by_date
from app_utils.numbers import to_float
from app_utils.storage import WEIGHT_KEY, clear_collection, load_list

log = logging.getLogger(__name__)

CHANGE_LOOKBACK_DAYS = 7
MA_WINDOW = 7


def load_weights(store):
    return sort_by_date(load_list(store, WEIGHT_KEY))


def record_weight(store, log_date, weight):
    """
    Add or replace the weigh-in for log_date.
    Returns False (and writes nothing) for an empty/unparseable date or a non-finite weight.
    """
    value = to_float(weight)
    day = parse_date(log_date) if log_date else None
    if day is None or value is None:
        log.debug("rejected weight entry date=%r weight=%r", log_date, weight)
        return False

    # stored dates are ISO; older entries in other formats still match by calendar day
    entries = [e for e in load_list(store, WEIGHT_KEY) if parse_date(e.get("date")) != day]
    entries.append({"date": day.isoformat(), "weight": value})
    store.set(WEIGHT_KEY, sort_by_date(entries))
    log.info("recorded weight %.1f for %s", value, day)
    return True


def summarize(entries):
    """
    entries: date-sorted weigh-ins.
    Returns {"latest", "latest_date", "change"} where change is versus the newest
    entry at least a week older than the latest one (None if there is none).
    """
    if not entries:
        return None

    latest = entries[-1]
    previous = None
    for entry in reversed(entries[:-1]):
        if days_between(latest["date"], entry["date"]) >= CHANGE_LOOKBACK_DAYS:
            previous = entry
            break

    change = None
    if previous is not None:
        change = round(latest["weight"] - previous["weight"], 1)

    return {
        "latest": float(latest["weight"]),
        "latest_date": latest["date"],
        "change": change,
    }


def moving_average(values, window=MA_WINDOW):
    """
    Trailing mean aligned with `values`; the first window-1 slots are None.
    Accepts plain numbers or weight entries.
    """
    weights = [v["weight"] if isinstance(v, dict) else v for v in values]
    if not weights:
        return []
    rolled = pd.Series(weights, dtype="float64").rolling(window).mean().round(2)
    return [None if pd.isna(x) else float(x) for x in rolled]


def clear_weights(store):
    clear_collection(store, "weight")
