# takeoff_core/display.py

"""
Text formatting for the results and aircraft info cards.
"""

from .constants import DISPLAY_FIELDS, PLACEHOLDER, SPEED_UNIT_LABEL


def format_value(value):
    """Whole floats lose their .0; None becomes the placeholder."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_speed(speed):
    if speed is None:
        return PLACEHOLDER
    return f"{speed} {SPEED_UNIT_LABEL}"


def field_label(field):
    return field.replace("_", " ")


def display_rows(record):
    """(label, text) pairs for the allow-listed fields present on the record."""
    if record is None:
        return []
    return [
        (field_label(field), format_value(record.get(field)))
        for field in DISPLAY_FIELDS
        if record.get(field) is not None
    ]


def summary_rows(record):
    """Engine, AAC and approach speed lines, always shown for a selection."""
    if record is None:
        return []
    engines = format_value(record.get("Num_Engines"))
    engine_class = format_value(record.get("Physical_Class_Engine"))
    return [
        ("Engines", f"{engines} ({engine_class})"),
        ("AAC", format_value(record.get("AAC"))),
        ("Approach Speed (knot)", format_value(record.get("Approach_Speed_knot"))),
    ]
