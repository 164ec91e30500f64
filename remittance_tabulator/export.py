"""Tabular sink: preview, DataFrame view and file export of extracted rows."""
from __future__ import annotations

import csv
import json
import logging
import os
import tempfile
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

import openpyxl
import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from .accessors import is_list
from .config import Settings, get_settings
from .errors import ConversionError
from .flattening import Row, to_json_text

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("XLSX", "CSV", "JSON")
HEADER_ROW_HEIGHT = 22


def cell_value(value: Any, blank: Any = "") -> Any:
    """Map a row value to what a spreadsheet cell can hold."""
    if value is None:
        return blank
    if isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping) or is_list(value):
        return to_json_text(value)
    raise TypeError(f"Unsupported value type {type(value).__name__}")


def row_values(row: Mapping[str, Any], columns: Sequence[str], blank: Any = "") -> List[Any]:
    return [cell_value(row.get(column), blank) for column in columns]


def check_rows(rows: Sequence[Row]) -> None:
    """Raise if any value could not be written to a worksheet cell."""
    for row in rows:
        for value in row.values():
            text = cell_value(value)
            if isinstance(text, str) and ILLEGAL_CHARACTERS_RE.search(text):
                raise ValueError(f"{text!r} cannot be used in worksheets")


def preview(rows: Sequence[Row], limit: int = 5) -> Tuple[List[Row], str]:
    """First `limit` rows plus a caption when the table is longer."""
    shown = list(rows[:max(1, int(limit))])
    caption = f"Showing {len(shown)} of {len(rows)} records" if len(shown) < len(rows) else ""
    return shown, caption


def to_frame(columns: Sequence[str], rows: Sequence[Row]) -> pd.DataFrame:
    """DataFrame with one column per name; absent and null values become empty cells."""
    data = [row_values(row, columns) for row in rows]
    return pd.DataFrame(data, columns=list(columns))


def column_widths(columns: Sequence[str], rows: Sequence[Row], settings: Settings) -> List[int]:
    widths: List[int] = []
    sample = rows[:settings.WIDTH_SAMPLE_ROWS]
    for column in columns:
        width = len(column)
        for row in sample:
            value = row.get(column)
            length = len(str(cell_value(value))) if value else 0
            if length > width:
                width = min(length, settings.MAX_COLUMN_WIDTH)
        widths.append(width + 3)
    return widths


def write_xlsx(path: str, columns: Sequence[str], rows: Sequence[Row], settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = settings.SHEET_NAME

    ws.append(list(columns))
    ws.row_dimensions[1].height = HEADER_ROW_HEIGHT
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")

    for row in rows:
        ws.append(row_values(row, columns, blank=None))

    for idx, width in enumerate(column_widths(columns, rows, settings), start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    ws.freeze_panes = "A2"
    wb.save(path)
    return path


def write_csv(path: str, columns: Sequence[str], rows: Sequence[Row]) -> str:
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(columns)
        for row in rows:
            writer.writerow(row_values(row, columns))
    return path


def write_json(path: str, rows: Sequence[Row]) -> str:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(list(rows), f, indent=2, ensure_ascii=False)
    return path


def output_path(file_name: Optional[str], output_format: str, settings: Settings) -> str:
    if not file_name or not file_name.strip():
        file_name = settings.DEFAULT_FILE_NAME
    file_name = file_name.strip()

    ext = f".{output_format.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext
    return os.path.join(tempfile.gettempdir(), file_name)


def export_rows(
    columns: Sequence[str],
    rows: Sequence[Row],
    output_format: str = "XLSX",
    file_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Write all rows to a file in the temp directory and return its path."""
    settings = settings or get_settings()
    output_format = (output_format or "XLSX").upper()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")
    if not rows:
        raise ValueError("No data to convert")

    path = output_path(file_name, output_format, settings)
    writers: Dict[str, Any] = {
        "XLSX": lambda: write_xlsx(path, columns, rows, settings),
        "CSV": lambda: write_csv(path, columns, rows),
        "JSON": lambda: write_json(path, rows),
    }
    try:
        writers[output_format]()
    except (TypeError, ValueError, OSError, IllegalCharacterError) as exc:
        raise ConversionError(os.path.basename(path), f"Error converting to {output_format}: {exc}") from exc

    logger.info("Exported %d row(s) to %s", len(rows), path)
    return path
