import csv
import json

import openpyxl
import pytest

from remittance_tabulator.config import Settings
from remittance_tabulator.errors import ConversionError
from remittance_tabulator.export import (
    cell_value,
    check_rows,
    column_widths,
    export_rows,
    preview,
    to_frame,
    write_csv,
    write_xlsx,
)

COLUMNS = ["ClaimID", "Net", "Comments"]
ROWS = [
    {"ClaimID": "C1", "Net": 100, "Comments": None},
    {"ClaimID": "C2", "Net": 50.5},
    {"ClaimID": "C3", "Net": 0, "Comments": {"note": "x"}, "Extra": 1},
]


@pytest.fixture
def settings():
    return Settings(_env_file=None)


def test_cell_value():
    assert cell_value(None) == ""
    assert cell_value(0) == 0
    assert cell_value([1, 2]) == "[1,2]"
    assert cell_value({"a": 1}) == '{"a":1}'
    with pytest.raises(TypeError):
        cell_value({1, 2})


def test_check_rows_rejects_worksheet_control_characters():
    check_rows(ROWS)
    with pytest.raises(ValueError, match="cannot be used in worksheets"):
        check_rows([{"ClaimID": "C\u00072"}])


def test_preview_caption_only_when_truncated():
    rows = [{"n": i} for i in range(7)]

    shown, caption = preview(rows, limit=5)
    assert shown == rows[:5]
    assert caption == "Showing 5 of 7 records"

    assert preview(rows[:3], limit=5) == (rows[:3], "")


def test_to_frame_fills_missing_cells():
    frame = to_frame(COLUMNS, ROWS)

    assert list(frame.columns) == COLUMNS
    assert frame.shape == (3, 3)
    assert frame.loc[1, "Comments"] == ""
    assert frame.loc[2, "Comments"] == '{"note":"x"}'


def test_column_widths_are_capped(settings):
    rows = [{"Short": "x" * 80, "LongHeaderName": 1}]
    assert column_widths(["Short", "LongHeaderName"], rows, settings) == [53, 17]


def test_write_xlsx(tmp_path, settings):
    path = write_xlsx(str(tmp_path / "out.xlsx"), COLUMNS, ROWS, settings)

    wb = openpyxl.load_workbook(path)
    ws = wb.active
    assert ws.title == "Combined Data"
    assert ws.freeze_panes == "A2"
    assert ws["A1"].font.bold
    assert ws["A1"].alignment.vertical == "center"
    values = [list(r) for r in ws.iter_rows(values_only=True)]
    assert values[0] == ["ClaimID", "Net", "Comments"]
    assert values[1] == ["C1", 100, None]
    assert values[2] == ["C2", 50.5, None]
    assert values[3] == ["C3", 0, '{"note":"x"}']


def test_write_csv(tmp_path):
    path = write_csv(str(tmp_path / "out.csv"), COLUMNS, ROWS)

    with open(path, newline="", encoding="utf-8") as f:
        lines = list(csv.reader(f))
    assert lines[0] == COLUMNS
    assert lines[1] == ["C1", "100", ""]
    assert len(lines) == 4


def test_export_rows_json(settings):
    path = export_rows(COLUMNS, ROWS[:2], "json", "report", settings)

    assert path.endswith("report.json")
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == ROWS[:2]


def test_export_rows_default_name(settings):
    path = export_rows(COLUMNS, ROWS, "XLSX", "  ", settings)
    assert path.endswith("combined_data.xlsx")


def test_export_rows_rejects_unknown_format(settings):
    with pytest.raises(ValueError):
        export_rows(COLUMNS, ROWS, "PDF", None, settings)


def test_export_rows_requires_rows(settings):
    with pytest.raises(ValueError, match="No data to convert"):
        export_rows([], [], "CSV", None, settings)


def test_unsupported_value_is_a_conversion_error(settings):
    with pytest.raises(ConversionError) as exc_info:
        export_rows(["a"], [{"a": {1, 2}}], "CSV", "bad", settings)
    assert "Error converting to CSV" in str(exc_info.value)
