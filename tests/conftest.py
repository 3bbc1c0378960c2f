# tests/conftest.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from takeoff_core import AircraftTable, record_from_row


class ManualHandle:
    def __init__(self, delay_s, fn):
        self.delay_s = delay_s
        self.fn = fn
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler that only fires when the test says so."""

    def __init__(self):
        self.handles = []

    def schedule(self, delay_s, fn):
        handle = ManualHandle(delay_s, fn)
        self.handles.append(handle)
        return handle

    def live(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def run_pending(self):
        ran = 0
        for handle in self.live():
            handle.fired = True
            handle.fn()
            ran += 1
        return ran


def make_table(*rows):
    return AircraftTable(record_from_row(i, raw) for i, raw in enumerate(rows))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sample_table():
    return make_table(
        {"ICAO_Code": "A20N", "FAA_Designator": "A320neo", "Manufacturer": "Airbus",
         "Model_FAA": "A320neo", "Wingspan_ft_without_winglets_sharklets": "",
         "Wingspan_ft_with_winglets_sharklets": 117.5},
        {"ICAO_Code": "A320", "FAA_Designator": "A320", "Manufacturer": "Airbus",
         "Model_FAA": "A320", "Wingspan_ft_without_winglets_sharklets": 111.9,
         "Wingspan_ft_with_winglets_sharklets": 117.5},
        {"ICAO_Code": "B738", "FAA_Designator": "B737-800", "Manufacturer": "Boeing",
         "Model_FAA": "737-800", "Wingspan_ft_without_winglets_sharklets": "112.6",
         "Wingspan_ft_with_winglets_sharklets": "117.4"},
        {"ICAO_Code": "C172", "FAA_Designator": "C172", "Manufacturer": "Cessna",
         "Model_FAA": "172 Skyhawk", "Wingspan_ft_without_winglets_sharklets": 36.1,
         "Num_Engines": 1, "Physical_Class_Engine": "Piston", "AAC": "A"},
        {"ICAO_Code": "EC35", "Manufacturer": "Airbus Helicopters", "Model_FAA": None},
    )
