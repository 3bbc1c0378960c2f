# takeoff_core/__init__.py

"""
Core module containing the aircraft search, wing-area resolution,
takeoff speed estimate, and session state.
"""

from .constants import (
    DEBUG_LOG,
    DEFAULT_DATASET,
    DEFAULT_ANGLE_OF_ATTACK,
    SEARCH_DEBOUNCE_MS,
    SPEED_CURVE_ANGLES,
    SPEED_UNIT_LABEL,
    PLACEHOLDER,
    IDENTIFIER_FIELDS,
    NUMERIC_FIELDS,
    TEXT_FIELDS,
    DISPLAY_FIELDS,
    COLORS,
)

from .aircraft_loader import (
    AircraftRecord,
    AircraftTable,
    load_aircraft_table,
    table_from_frame,
    record_from_row,
    parse_number,
    to_positive_float,
    resource_path,
    dprint,
)

from .search import suggest

from .geometry import (
    parse_override,
    effective_wing_area,
)

from .calculations import (
    # Formula pieces
    ft2_to_m2,
    compute_lift_coefficient,
    # Speeds
    estimate_speed,
    extended_wing_speed,
    speed_curve,
)

from .display import (
    format_speed,
    format_value,
    display_rows,
    summary_rows,
)

from .session import (
    SessionState,
    SpeedResults,
    SessionController,
    Debouncer,
    TimerScheduler,
    set_query,
    apply_suggestions,
    run_search,
    select_suggestion,
    set_override_wing_area,
    set_angle,
    compute_results,
)
