"""
ExcelWriter — high-level helpers for building styled Excel workbooks.
"""
from __future__ import annotations

import io
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from catalogo.excel.styles import TITLE_FONT, SUBTITLE_FONT, WARNING_FONT, SECTION_FONT, SECTION_FILL
from catalogo.excel.formatters import format_header_row, format_data_cell, auto_column_width


ColSpec = tuple[str, str, str]  # (key, col_type, label)


class ExcelWriter:
    """Fluent builder for styled Excel workbooks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        return ws

    def write_title(
        self,
        ws: Worksheet,
        title: str,
        subtitle: str,
        note: str | None = None,
        merge_cols: int = 3,
    ) -> int:
        """Write title + subtitle (+ optional warning note). Returns next available row."""
        ws.cell(row=1, column=1).value = title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=merge_cols)

        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=merge_cols)

        if note:
            ws.cell(row=3, column=1).value = note
            ws.cell(row=3, column=1).font = WARNING_FONT
            ws.merge_cells(start_row=3, start_column=1, end_row=3, end_column=merge_cols)
            return 5
        return 4

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColSpec],
        rows: list[dict],
        group_key: str | None = None,
        freeze: bool = True,
    ) -> int:
        """Write headers + data rows. Returns the row after the last data row.

        With group_key, the key column is only filled on the first row of each
        run of equal values and that cell is shaded as a group label.
        """
        for col_num, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = label
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        previous = object()
        for idx, row_data in enumerate(rows):
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                val = row_data.get(key, "")
                if key == group_key:
                    if val == previous:
                        val = ""
                    else:
                        previous = val
                        format_data_cell(ws, row, col_num, val, "wrap")
                        ws.cell(row=row, column=col_num).font = SECTION_FONT
                        ws.cell(row=row, column=col_num).fill = SECTION_FILL
                        continue
                format_data_cell(ws, row, col_num, val, col_type, striped=idx % 2 == 1)
            row += 1

        auto_column_width(ws, start_row=start_row)
        if freeze:
            ws.freeze_panes = f"A{start_row + 1}"
        return row

    def set_widths(self, ws: Worksheet, widths: dict[int, float]) -> None:
        for col, width in widths.items():
            ws.column_dimensions[get_column_letter(col)].width = width

    def to_bytes(self) -> bytes:
        """Serialize the workbook for a download response."""
        buf = io.BytesIO()
        self.wb.save(buf)
        return buf.getvalue()

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
