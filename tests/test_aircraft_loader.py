# tests/test_aircraft_loader.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pandas as pd
import pytest

from takeoff_core import load_aircraft_table, parse_number, suggest, to_positive_float
from takeoff_core.aircraft_loader import clean_text, record_from_row


@pytest.mark.parametrize("raw, expected", [
    (111.9, 111.9),
    ("111.9", 111.9),
    ("117.5 ft", 117.5),
    (" 42 ", 42.0),
    ("1e3", 1000.0),
    ("N/A", None),
    ("", None),
    (None, None),
    (True, None),
    (float("nan"), None),
    (float("inf"), None),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_to_positive_float_drops_zero_and_negative():
    assert to_positive_float("0") is None
    assert to_positive_float(-3) is None
    assert to_positive_float("0.5") == 0.5


def test_clean_text():
    assert clean_text("  A320 ") == "A320"
    assert clean_text("   ") is None
    assert clean_text(float("nan")) is None
    assert clean_text(320.0) == "320"


def test_record_coercion_and_extra_columns():
    rec = record_from_row(7, {
        "Model_FAA": " A-320 ",
        "Wingspan_ft_without_winglets_sharklets": "111.9",
        "MTOW_lb": "0",
        "MALW_lb": "N/A",
        "Remarks": "",
        "Fleet Notes": "leased",
        "Unnamed: 40": None,
    })
    assert rec.row == 7
    assert rec.model_name == "A-320"
    assert rec["Wingspan_ft_without_winglets_sharklets"] == 111.9
    assert "MTOW_lb" not in rec
    assert "MALW_lb" not in rec
    assert "Remarks" not in rec
    assert rec.extra == {"Fleet Notes": "leased"}
    assert rec["Fleet Notes"] == "leased"
    with pytest.raises(KeyError):
        rec["MTOW_lb"]


def test_load_csv(tmp_path):
    path = tmp_path / "aircraft.csv"
    pd.DataFrame([
        {"ICAO_Code": "B738", "Model_FAA": "737-800",
         "Wingspan_ft_without_winglets_sharklets": "112.6", "Custom": "x"},
        {"ICAO_Code": "C172", "Model_FAA": "172 Skyhawk",
         "Wingspan_ft_without_winglets_sharklets": ""},
    ]).to_csv(path, index=False)

    table = load_aircraft_table(str(path))
    assert len(table) == 2
    assert [rec.row for rec in table] == [0, 1]
    assert table[0].number("Wingspan_ft_without_winglets_sharklets") == 112.6
    assert table[0].extra == {"Custom": "x"}
    assert "Wingspan_ft_without_winglets_sharklets" not in table[1]
    assert table.by_row(1) is table[1]
    assert table.by_row(5) is None
    assert [rec.model_name for rec in table] == ["737-800", "172 Skyhawk"]


def test_load_xlsx_first_sheet_only(tmp_path):
    path = tmp_path / "aircraft.xlsx"
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame([
            {"ICAO_Code": "A320", "Model_FAA": "A-320",
             "Wingspan_ft_without_winglets_sharklets": 111.9,
             "Wingspan_ft_with_winglets_sharklets": 117.5},
        ]).to_excel(writer, sheet_name="Aircraft", index=False)
        pd.DataFrame([{"Model_FAA": "Ignored"}]).to_excel(writer, sheet_name="Other", index=False)

    table = load_aircraft_table(str(path))
    assert [rec.model_name for rec in table] == ["A-320"]
    assert table[0].number("Wingspan_ft_with_winglets_sharklets") == 117.5


def test_missing_file_gives_empty_table(tmp_path, capsys):
    table = load_aircraft_table(str(tmp_path / "nope.xlsx"))
    assert len(table) == 0
    assert not table
    assert suggest("a320", table) == []
    assert "[WARNING]" in capsys.readouterr().out


def test_unreadable_file_gives_empty_table(tmp_path, capsys):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a workbook")
    table = load_aircraft_table(str(path))
    assert len(table) == 0
    assert "[ERROR]" in capsys.readouterr().out


def test_bundled_dataset_loads():
    table = load_aircraft_table()
    assert len(table) > 0
    hits = suggest("a-320", table)
    assert hits[0].model_name == "A-320"
