# tests/test_core.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import math

import numpy as np
import pytest

from takeoff_core.calculations import (
    compute_lift_coefficient,
    estimate_speed,
    extended_wing_speed,
    ft2_to_m2,
    round_half_up,
    speed_curve,
)
from takeoff_core.geometry import effective_wing_area, parse_override
from takeoff_core.aircraft_loader import record_from_row


# =============================================================================
# SPEED ESTIMATE
# =============================================================================

def test_formula_pieces():
    assert ft2_to_m2(1000) == pytest.approx(92.903)
    assert compute_lift_coefficient(10) == pytest.approx(1.0)
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


def test_estimate_speed_reference_point():
    # 1000 ft², 10° -> Cl 1.0, S 92.903 m², v = sqrt(1.2e6 / (1.225 * 92.903)) ~ 102.69
    expected = math.sqrt(2 * 600000 / (1.225 * 92.903 * 1.0))
    assert expected == pytest.approx(102.69, abs=0.01)
    assert estimate_speed(1000, 10) == 103


def test_estimate_speed_larger_area_is_slower():
    assert estimate_speed(2000, 10) < estimate_speed(1000, 10)
    assert estimate_speed(1000, 15) < estimate_speed(1000, 10)


@pytest.mark.parametrize("area, angle", [
    (1000, 0),
    (0, 10),
    (None, 10),
    (1000, None),
    (float("nan"), 10),
    (1000, float("nan")),
    (1000, -5),
])
def test_estimate_speed_not_computable(area, angle):
    assert estimate_speed(area, angle) is None


def test_extended_wing_speed_only_when_larger():
    rec = record_from_row(0, {"Wingspan_ft_with_winglets_sharklets": 117.5})
    assert extended_wing_speed(rec, 111.9, 10) == estimate_speed(117.5, 10)
    assert extended_wing_speed(rec, 117.5, 10) is None
    assert extended_wing_speed(rec, 120, 10) is None
    assert extended_wing_speed(rec, None, 10) is None
    assert extended_wing_speed(None, 111.9, 10) is None


def test_speed_curve_matches_point_estimate():
    angles, speeds = speed_curve(1000, [0, 5, 10])
    assert list(angles) == [0, 5, 10]
    assert np.isnan(speeds[0])
    assert round_half_up(speeds[2]) == estimate_speed(1000, 10)
    assert speeds[1] > speeds[2]


def test_speed_curve_without_area_is_empty():
    angles, speeds = speed_curve(None, [5, 10])
    assert len(angles) == 0 and len(speeds) == 0


# =============================================================================
# WING AREA RESOLUTION
# =============================================================================

def _record(base=None, extended=None):
    return record_from_row(0, {
        "Model_FAA": "Test",
        "Wingspan_ft_without_winglets_sharklets": base,
        "Wingspan_ft_with_winglets_sharklets": extended,
    })


def test_wing_area_precedence():
    rec = _record(base=111.9, extended=117.5)
    assert effective_wing_area(150, rec) == 150
    assert effective_wing_area(None, rec) == 111.9
    assert effective_wing_area(None, _record(extended=117.5)) == 117.5
    assert effective_wing_area(None, _record()) is None
    assert effective_wing_area(None, None) is None
    assert effective_wing_area(150, None) == 150


def test_zero_or_negative_override_falls_through():
    rec = _record(base=111.9, extended=117.5)
    assert effective_wing_area(0, rec) == 111.9
    assert effective_wing_area(-10, rec) == 111.9
    assert effective_wing_area("", rec) == 111.9


def test_unparseable_base_wingspan_falls_to_extended():
    rec = _record(base="N/A", extended="117.5")
    assert effective_wing_area(None, rec) == 117.5


@pytest.mark.parametrize("raw, expected", [
    ("", None),
    ("   ", None),
    (None, None),
    ("abc", None),
    ("-5", None),
    ("0", 0.0),
    ("12.5", 12.5),
    (" 150 ", 150.0),
    (200, 200.0),
])
def test_parse_override(raw, expected):
    assert parse_override(raw) == expected
