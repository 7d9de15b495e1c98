import logging
from datetime import date, timedelta

from app_utils.dates import parse_date, sort_by_date
from app_utils.numbers import to_float
from app_utils.storage import FOOD_KEY, clear_collection, load_list

log = logging.getLogger(__name__)

MACROS = ["calories", "protein", "carbs", "fat"]


def load_food(store):
    return sort_by_date(load_list(store, FOOD_KEY))


def record_food(store, log_date, calories, protein, carbs, fat):
    values = [to_float(v) for v in (calories, protein, carbs, fat)]
    day = parse_date(log_date) if log_date else None
    if day is None or any(v is None for v in values):
        log.debug("rejected food entry date=%r macros=%r", log_date, (calories, protein, carbs, fat))
        return False

    entry = {"date": day.isoformat()}
    entry.update(zip(MACROS, values))
    entries = load_list(store, FOOD_KEY)
    entries.append(entry)
    store.set(FOOD_KEY, sort_by_date(entries))
    log.info("recorded food entry for %s (%.0f kcal)", day, entry["calories"])
    return True


def weekly_average(entries, now=None):
    """Mean macros over the 7 calendar days ending at `now` (inclusive)."""
    today = parse_date(now) if now is not None else date.today()
    cutoff = today - timedelta(days=6)
    window = [e for e in entries if (parse_date(e.get("date")) or date.min) >= cutoff]
    count = max(1, len(window))

    out = {m: sum(e[m] for e in window) / count for m in MACROS}
    out["count"] = len(window)
    return out


def clear_food(store):
    clear_collection(store, "food")
