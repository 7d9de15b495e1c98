from datetime import date, datetime

import pandas as pd


def parse_date(value):
    """Calendar date for a date string (or date/datetime), None when it cannot be parsed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    ts = pd.to_datetime(value.strip(), errors="coerce")
    if pd.isna(ts):
        return None
    return ts.date()


def sort_by_date(entries):
    # stable, so same-day entries keep insertion order
    return sorted(entries, key=lambda e: parse_date(e.get("date")) or date.min)


def days_between(later, earlier):
    return (parse_date(later) - parse_date(earlier)).days
