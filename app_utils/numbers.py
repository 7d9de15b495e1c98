import numpy as np


def to_float(value):
    """Finite float from a number or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not np.isfinite(number):
        return None
    return number


def to_int(value):
    """Whole number from an int, integral float or numeric string, else None."""
    number = to_float(value)
    if number is None or not float(number).is_integer():
        return None
    return int(number)


def is_empty(value):
    return value is None or value == ""
