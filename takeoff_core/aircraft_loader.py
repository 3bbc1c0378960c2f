# takeoff_core/aircraft_loader.py

"""
Aircraft data loading and management.
Reads the reference table (first sheet of a workbook, or a CSV) once,
coerces its columns, and exposes the rows as a read-only AircraftTable.
"""

import math
import os
import re
import sys
from types import MappingProxyType

import pandas as pd

from .constants import (
    DEBUG_LOG,
    DEFAULT_DATASET,
    IDENTIFIER_FIELDS,
    MODEL_FIELD,
    NUMERIC_FIELDS,
    TEXT_FIELDS,
)

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def dprint(*args, **kwargs):
    """Debug print that can be globally toggled."""
    if DEBUG_LOG:
        print(*args, **kwargs)


def resource_path(filename):
    """Get the absolute path to a resource, works for dev and PyInstaller."""
    if hasattr(sys, '_MEIPASS'):
        return os.path.join(sys._MEIPASS, filename)
    return filename


# =============================================================================
# VALUE COERCION
# =============================================================================

def parse_number(value):
    """
    Parse a raw cell or form value into a finite float.

    Text is read up to the end of its leading number, so "117.5 ft"
    gives 117.5. Returns None for anything that doesn't start with a number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        number = float(match.group(0))
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if not math.isfinite(number):
        return None
    return number


def to_positive_float(value):
    """Parsed number if it is strictly positive, else None."""
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def clean_text(value):
    """Stripped string form of a cell, or None when the cell is empty."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    return text or None


# =============================================================================
# RECORDS
# =============================================================================

class AircraftRecord:
    """
    One row of the aircraft table.

    Known columns are held in ``fields`` already coerced (numbers as floats,
    text as stripped strings). Columns the app doesn't know about are kept
    untouched in ``extra``. Absent values are simply not in either mapping.
    """
    __slots__ = ("row", "_fields", "_extra")

    def __init__(self, row, fields, extra=None):
        self.row = row
        self._fields = MappingProxyType(dict(fields))
        self._extra = MappingProxyType(dict(extra or {}))

    @property
    def fields(self):
        return self._fields

    @property
    def extra(self):
        return self._extra

    def __getitem__(self, key):
        if key in self._fields:
            return self._fields[key]
        return self._extra[key]

    def get(self, key, default=None):
        if key in self._fields:
            return self._fields[key]
        return self._extra.get(key, default)

    def __contains__(self, key):
        return key in self._fields or key in self._extra

    @property
    def model_name(self):
        return self._fields.get(MODEL_FIELD, "")

    @property
    def identifiers(self):
        """Identifier fields in match order, None where absent."""
        return tuple(self._fields.get(name) for name in IDENTIFIER_FIELDS)

    def number(self, key):
        """Positive numeric value of a column, or None."""
        return to_positive_float(self.get(key))

    def __repr__(self):
        return f"AircraftRecord(row={self.row}, model={self.model_name!r})"


def record_from_row(row, raw):
    """
    Build an AircraftRecord from a raw {header: value} dict.

    Header names are used verbatim. Numeric columns become positive floats,
    text columns stripped strings; empty, non-numeric and non-positive
    values are dropped.
    """
    fields = {}
    extra = {}
    for key, value in raw.items():
        name = str(key)
        if name in NUMERIC_FIELDS:
            coerced = to_positive_float(value)
        elif name in TEXT_FIELDS:
            coerced = clean_text(value)
        else:
            if value is not None and not (isinstance(value, float) and math.isnan(value)):
                extra[name] = value
            continue
        if coerced is not None:
            fields[name] = coerced
    return AircraftRecord(row, fields, extra)


class AircraftTable:
    """
    Read-only, ordered collection of AircraftRecord.
    Built once at boot; nothing mutates it afterwards.
    """
    def __init__(self, records=()):
        self._records = tuple(records)

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __bool__(self):
        return bool(self._records)

    def by_row(self, row):
        """Record at a table row, or None if the row doesn't exist."""
        if row is None or not 0 <= row < len(self._records):
            return None
        return self._records[row]


# =============================================================================
# LOADING
# =============================================================================

def read_aircraft_frame(path):
    """Read the first sheet of a workbook (or a CSV) as an object-typed DataFrame."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        frame = pd.read_csv(path, dtype=object)
    else:
        frame = pd.read_excel(path, sheet_name=0, dtype=object)
    return frame.astype(object).where(frame.notna(), None)


def table_from_frame(frame):
    """Turn a DataFrame into an AircraftTable, keeping row order."""
    rows = frame.to_dict(orient="records")
    return AircraftTable(record_from_row(i, raw) for i, raw in enumerate(rows))


def load_aircraft_table(path=None):
    """
    Load the aircraft reference table.

    Args:
        path: Workbook or CSV path. Relative paths resolve against the
            project root. Defaults to DEFAULT_DATASET.

    Returns:
        AircraftTable. Empty if the file is missing or unreadable.
    """
    path = resource_path(path or DEFAULT_DATASET)
    if not os.path.isabs(path):
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        path = os.path.join(base_dir, path)

    if not os.path.exists(path):
        print(f"[WARNING] Aircraft dataset not found: {path}")
        return AircraftTable()

    try:
        frame = read_aircraft_frame(path)
    except Exception as e:
        print(f"[ERROR] Failed to load {path}: {e}")
        return AircraftTable()

    table = table_from_frame(frame)
    dprint(f"[DEBUG] {len(table)} rows, columns: {list(frame.columns)}")
    return table
