#!/usr/bin/env python3
"""
Helpers for writing bulk content workbooks in a consistent table style.

Thin wrappers around openpyxl shared by the validation report and the xlsx
export: bold header row, auto-width columns, a styled table per sheet and
optional yellow highlighting of flagged rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

MAX_COLUMN_WIDTH = 60


@dataclass(frozen=True)
class ExcelSheetData:
    """
    Describes a sheet to be written to the workbook.

    Attributes:
        name: Sheet/tab name.
        headers: Ordered list of column headers.
        rows: Row values already ordered to match headers.
        highlighted_rows: Optional per-row flags; flagged rows get a yellow fill.
    """

    name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    highlighted_rows: Optional[Sequence[bool]] = None


def sheet_from_records(
    name: str,
    records: Sequence[Mapping[str, Any]],
    headers: Optional[Sequence[str]] = None,
) -> ExcelSheetData:
    """Build sheet data from mappings; headers default to the first record's keys."""
    if headers is None:
        headers = list(records[0].keys()) if records else []
    rows = [[record.get(h, '') for h in headers] for record in records]
    return ExcelSheetData(name=name, headers=list(headers), rows=rows)


def _write_excel_sheet(ws, sheet: ExcelSheetData) -> None:
    """Render a single sheet using provided headers/rows and optional highlighting."""
    ws.title = sheet.name

    headers = list(sheet.headers)
    bold_font = Font(bold=True)
    for col_idx, header in enumerate(headers, 1):
        ws.cell(row=1, column=col_idx, value=header).font = bold_font

    yellow_fill = PatternFill(start_color="FFFF00", end_color="FFFF00", fill_type="solid")
    flags = list(sheet.highlighted_rows or [])

    for row_idx, row in enumerate(sheet.rows, 2):
        highlight = (row_idx - 2) < len(flags) and bool(flags[row_idx - 2])
        for col_idx, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if highlight:
                cell.fill = yellow_fill

    for col_idx in range(1, len(headers) + 1):
        col_letter = get_column_letter(col_idx)
        max_length = len(str(headers[col_idx - 1]))

        for cell in ws[col_letter]:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))

        ws.column_dimensions[col_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)

    if sheet.rows and headers:
        last_col = get_column_letter(len(headers))
        table = Table(
            displayName=sheet.name.replace(" ", "") + "Table",
            ref=f"A1:{last_col}{len(sheet.rows) + 1}",
        )
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)


def write_excel_workbook(output_path: Path | str, sheets: Sequence[ExcelSheetData]) -> Path:
    """
    Write a workbook consisting of the provided sheets.

    Args:
        output_path: Destination path for the workbook.
        sheets: Ordered sheet definitions to render.

    Returns:
        Path to the written workbook.
    """
    if not sheets:
        raise ValueError("At least one sheet must be provided to write a workbook.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    for idx, sheet in enumerate(sheets):
        ws = wb.active if idx == 0 else wb.create_sheet()
        _write_excel_sheet(ws, sheet)

    wb.save(output_path)
    return output_path
