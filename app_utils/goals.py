from features.weight import moving_average

WEEK = 7

# thresholds in lb/week; negative means losing
FAST_LOSS = -2.0
SLOW_LOSS = -1.0


def weekly_loss(entries):
    """
    Last week's mean of the 7-day average minus the week before.
    None until 14 average points exist; a partial previous week is never compared.
    """
    avg = [v for v in moving_average(entries, WEEK) if v is not None]
    if len(avg) < 2 * WEEK:
        return None
    last_week = sum(avg[-WEEK:]) / WEEK
    prev_week = sum(avg[-2 * WEEK:-WEEK]) / WEEK
    return last_week - prev_week


def calorie_suggestion(loss):
    if loss is None:
        return None
    if loss < FAST_LOSS:
        return "Increase calories by 150–200 kcal/day"
    if loss > SLOW_LOSS:
        return "Decrease calories by 200 kcal/day or add 2,000 steps"
    return "Maintain current intake"
