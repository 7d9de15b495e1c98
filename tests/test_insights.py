from datetime import date, timedelta

from app_utils.goals import calorie_suggestion, weekly_loss
from features.insights import dashboard_summary, entries_frame, weight_frame


def daily(weights, start=date(2024, 1, 1)):
    return [{"date": (start + timedelta(days=i)).isoformat(), "weight": w} for i, w in enumerate(weights)]


def test_weekly_loss_needs_two_weeks_of_averages():
    # 19 points -> 13 moving-average values
    assert weekly_loss(daily([180.0] * 19)) is None
    assert weekly_loss(daily([180.0] * 20)) == 0.0


def test_weekly_loss_tracks_steady_drop():
    # one pound every day -> moving average also drops 7 lb a week
    loss = weekly_loss(daily([200.0 - i for i in range(20)]))
    assert round(loss, 2) == -7.0


def test_calorie_suggestion_thresholds():
    assert calorie_suggestion(None) is None
    assert calorie_suggestion(-2.5).startswith("Increase")
    assert calorie_suggestion(-0.5).startswith("Decrease")
    assert calorie_suggestion(-1.5) == "Maintain current intake"
    assert calorie_suggestion(-2.0) == "Maintain current intake"


def test_dashboard_summary():
    assert dashboard_summary([]) is None
    out = dashboard_summary(daily([200.0 - i for i in range(20)]))
    assert out["weekly_loss"] == -7.0
    assert out["suggestion"].startswith("Increase")
    assert out["weight"]["latest"] == 181.0
    assert len(out["moving_average"]) == 20


def test_frames_sort_by_date():
    entries = [{"date": "2024-10-01", "weight": 180}, {"date": "2024-9-30", "weight": 181}]
    d = weight_frame(entries)
    assert d["weight"].tolist() == [181, 180]
    assert d["avg_7d"].isna().all()
    assert entries_frame([], ["calories"]).empty
