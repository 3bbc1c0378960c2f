# takeoff_core/constants.py

"""
Application-wide constants for the Takeoff Speed Finder.
Formula constants, dataset column names, and app config all live here.
"""

import os

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
DEBUG_LOG = os.environ.get("TAKEOFF_DEBUG", "0") == "1"

# =============================================================================
# DATASET / SERVER
# =============================================================================
DEFAULT_DATASET = os.environ.get("TAKEOFF_DATASET", "aircraft_data/aircraft_data.csv")
SERVER_HOST = os.environ.get("TAKEOFF_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("TAKEOFF_PORT", "8050"))

# =============================================================================
# TAKEOFF SPEED FORMULA
# =============================================================================
FT2_TO_M2 = 0.092903     # ft² -> m²
AIR_DENSITY_SL = 1.225   # kg/m³
ASSUMED_WEIGHT = 600000  # tuning constant, not an aircraft weight
CL_PER_DEGREE = 0.1      # lift coefficient per degree of AoA

# =============================================================================
# DEFAULT VALUES
# =============================================================================
DEFAULT_ANGLE_OF_ATTACK = 10  # degrees
SEARCH_DEBOUNCE_MS = 300
SPEED_CURVE_ANGLES = (2, 20)  # degrees, chart range

# =============================================================================
# DISPLAY
# =============================================================================
SPEED_UNIT_LABEL = "km/h"
PLACEHOLDER = "—"

# =============================================================================
# DATASET COLUMNS
# =============================================================================
MODEL_FIELD = "Model_FAA"
BASE_WINGSPAN_FIELD = "Wingspan_ft_without_winglets_sharklets"
EXTENDED_WINGSPAN_FIELD = "Wingspan_ft_with_winglets_sharklets"

IDENTIFIER_FIELDS = (
    "ICAO_Code",
    "FAA_Designator",
    "Manufacturer",
    MODEL_FIELD,
)

# Measurement and count columns, coerced to positive floats on load
NUMERIC_FIELDS = (
    BASE_WINGSPAN_FIELD,
    EXTENDED_WINGSPAN_FIELD,
    "Length_ft",
    "Tail_Height_at_OEW_ft",
    "Wheelbase_ft",
    "Cockpit_to_Main_Gear_ft",
    "Main_Gear_Width_ft",
    "MTOW_lb",
    "MALW_lb",
    "Parking_Area_ft2",
    "Rotor_Diameter_ft",
    "Num_Engines",
    "Approach_Speed_knot",
    "Registration_Count",
    "TMFS_Operations_FY24",
)

# Classification and free-text columns, kept as stripped strings
TEXT_FIELDS = IDENTIFIER_FIELDS + (
    "Main_Gear_Config",
    "ICAO_WTC",
    "Class",
    "FAA_Weight",
    "CWT",
    "One_Half_Wake_Category",
    "Two_Wake_Category_Appx_A",
    "Two_Wake_Category_Appx_B",
    "SRS",
    "LAHSO",
    "Physical_Class_Engine",
    "AAC",
    "FAA_Registry",
    "Remarks",
)

DISPLAY_FIELDS = [
    BASE_WINGSPAN_FIELD,
    EXTENDED_WINGSPAN_FIELD,
    "Length_ft",
    "Tail_Height_at_OEW_ft",
    "Wheelbase_ft",
    "Cockpit_to_Main_Gear_ft",
    "Main_Gear_Width_ft",
    "MTOW_lb",
    "MALW_lb",
    "Main_Gear_Config",
    "ICAO_WTC",
    "Parking_Area_ft2",
    "Class",
    "FAA_Weight",
    "CWT",
    "One_Half_Wake_Category",
    "Two_Wake_Category_Appx_A",
    "Two_Wake_Category_Appx_B",
    "Rotor_Diameter_ft",
    "SRS",
    "LAHSO",
    "FAA_Registry",
    "Registration_Count",
    "TMFS_Operations_FY24",
    "Remarks",
]

# =============================================================================
# STYLING CONSTANTS
# =============================================================================
COLORS = {
    "dark_bg": "#1e1e1e",
    "card_bg": "#2c2c2c",
    "input_bg": "#3a3a3a",
    "text": "#f5f5f5",
    "accent": "#4fc3f7",
    "highlight_bg": "#444",
    "speed_card_bg": "#37474f",
    "info_card_bg": "#263238",
    "speed_curve": "#4fc3f7",
    "selected_angle": "orange",
}
