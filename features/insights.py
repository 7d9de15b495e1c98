import pandas as pd

from app_utils.dates import parse_date
from app_utils.goals import calorie_suggestion, weekly_loss
from features.weight import moving_average, summarize


def entries_frame(entries, columns):
    # list of dated records -> DataFrame sorted by real dates
    if not entries:
        return pd.DataFrame(columns=["date"] + list(columns))
    d = pd.DataFrame(entries)
    d["date"] = pd.to_datetime(d["date"].map(parse_date), errors="coerce")
    return d.dropna(subset=["date"]).sort_values("date", kind="stable").reset_index(drop=True)


def weight_frame(entries):
    d = entries_frame(entries, ["weight"])
    d["avg_7d"] = moving_average(d["weight"].tolist()) if len(d) else []
    return d


def dashboard_summary(entries):
    # entries: date-sorted weigh-ins
    if not entries:
        return None

    loss = weekly_loss(entries)
    out = {
        "weight": summarize(entries),
        "weekly_loss": round(loss, 2) if loss is not None else None,
        "suggestion": calorie_suggestion(loss),
        "moving_average": moving_average(entries),
    }
    return out
