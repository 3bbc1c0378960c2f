# takeoff_core/geometry.py

"""
Wing area resolution: user override, then base wingspan, then extended wingspan.
"""

from .aircraft_loader import parse_number, to_positive_float
from .constants import BASE_WINGSPAN_FIELD, EXTENDED_WINGSPAN_FIELD


def parse_override(value):
    """
    Turn the raw wing-area form value into an override.

    Empty, non-numeric and negative entries give None (no override).
    Zero is kept here; effective_wing_area treats it as absent.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    number = parse_number(value)
    if number is None or number < 0:
        return None
    return number


def base_wingspan(record):
    return record.number(BASE_WINGSPAN_FIELD) if record is not None else None


def extended_wingspan(record):
    return record.number(EXTENDED_WINGSPAN_FIELD) if record is not None else None


def effective_wing_area(override, selected):
    """
    Wing area (ft²) to feed the speed formula.

    Args:
        override: User-entered value (number, text or None).
        selected: Selected AircraftRecord or None.

    Returns:
        The first positive value of override, base wingspan, extended
        wingspan; None when none of them is usable.
    """
    value = to_positive_float(override)
    if value is not None:
        return value
    return base_wingspan(selected) or extended_wingspan(selected)
