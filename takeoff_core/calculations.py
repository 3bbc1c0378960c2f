# takeoff_core/calculations.py

"""
Takeoff speed estimate.
A fixed-form lift approximation, not a certified performance calculation.
All speed math lives here so the Dash callbacks stay thin.
"""

import math

import numpy as np

from .aircraft_loader import parse_number
from .constants import AIR_DENSITY_SL, ASSUMED_WEIGHT, CL_PER_DEGREE, FT2_TO_M2
from .geometry import extended_wingspan


def ft2_to_m2(area_ft2):
    return area_ft2 * FT2_TO_M2


def compute_lift_coefficient(angle_deg):
    """Cl = 0.1 * AoA"""
    return CL_PER_DEGREE * angle_deg


def round_half_up(value):
    """Nearest integer, .5 rounds up."""
    return int(math.floor(value + 0.5))


def estimate_speed(wing_area_ft2, angle_deg):
    """
    v = sqrt(2 W / (rho * S * Cl)), S converted to m².

    Returns the speed rounded to an int (shown as km/h), or None when
    either input is missing, zero, NaN, or the result isn't real.
    """
    area = parse_number(wing_area_ft2)
    angle = parse_number(angle_deg)
    if not area or not angle:
        return None

    denominator = AIR_DENSITY_SL * ft2_to_m2(area) * compute_lift_coefficient(angle)
    if denominator <= 0:
        return None
    return round_half_up(math.sqrt((2 * ASSUMED_WEIGHT) / denominator))


def extended_wing_speed(selected, effective_area, angle_deg):
    """
    Speed with the selected aircraft's extended (winglet) span.
    Only defined when that span is strictly larger than the area in use.
    """
    if effective_area is None:
        return None
    extended = extended_wingspan(selected)
    if extended is None or extended <= effective_area:
        return None
    return estimate_speed(extended, angle_deg)


def speed_curve(wing_area_ft2, angles):
    """
    Vectorised estimate over a range of angles.

    Returns (angles, speeds) as float arrays; speeds are NaN where the
    formula is undefined. Both arrays are empty if the area is unusable.
    """
    area = parse_number(wing_area_ft2)
    angles = np.asarray(angles, dtype=float)
    if not area or area <= 0:
        return np.array([]), np.array([])

    cl = compute_lift_coefficient(angles)
    denominator = AIR_DENSITY_SL * ft2_to_m2(area) * cl
    speeds = np.full(angles.shape, np.nan)
    valid = denominator > 0
    speeds[valid] = np.sqrt((2 * ASSUMED_WEIGHT) / denominator[valid])
    return angles, speeds
