"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from catalogo.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, CODE_FONT,
    THIN_BORDER, ALTERNATE_FILL,
    CENTER, LEFT, WRAP,
)


def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    """Apply header styling to an entire row."""
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
    striped: bool = False,
) -> None:
    """Write and format a single data cell.

    Codes are written as text so leading zeros survive; blanks stay empty.
    """
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = None if value is None or value == "" else str(value)
    cell.border = THIN_BORDER
    if col_type == "code":
        cell.font = CODE_FONT
        cell.alignment = LEFT
        cell.number_format = "@"
    elif col_type == "wrap":
        cell.font = DATA_FONT
        cell.alignment = WRAP
    else:
        cell.font = DATA_FONT
        cell.alignment = LEFT

    if striped:
        cell.fill = ALTERNATE_FILL


def auto_column_width(ws: Worksheet, start_row: int = 1, min_width: int = 10, max_width: int = 80) -> None:
    """Auto-fit column widths based on content length from start_row down."""
    for column in ws.iter_cols(min_row=start_row):
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[column_letter].width = min(max(max_length + 2, min_width), max_width)
