"""Excel workbooks via openpyxl."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from accrual.formats.base import OUTPUT_HEADER, PathLike, TabularFormat, register_format
from accrual.schemas.ledger import AccrualPoint, RawRow

RESULTS_SHEET = "Results"
AMOUNT_FORMAT = "#,##0.00"

HEADER_FONT = Font(name="Calibri", size=11, bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="1B5E20", end_color="1B5E20", fill_type="solid")
HEADER_BORDER = Border(bottom=Side(style="thin", color="000000"))
CENTER = Alignment(horizontal="center", vertical="center")


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def read_rows(path: PathLike) -> List[RawRow]:
    """Read the first worksheet from row 2 down to the first blank row."""
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows: List[RawRow] = []
        for row_number, values in enumerate(
            ws.iter_rows(min_row=2, max_col=3, values_only=True), start=2
        ):
            if all(v is None or str(v).strip() == "" for v in values):
                break
            fields = [_cell_text(v) for v in values]
            fields += [""] * (3 - len(fields))
            rows.append(RawRow.from_fields(fields, row_number=row_number))
        return rows
    finally:
        wb.close()


def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 55) -> None:
    """Fit column widths to their longest value."""
    for column in ws.columns:
        longest = max((len(str(cell.value)) for cell in column if cell.value is not None), default=0)
        ws.column_dimensions[get_column_letter(column[0].column)].width = min(
            max(longest + 2, min_width), max_width
        )


def write_rows(path: PathLike, points: Sequence[AccrualPoint]) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = RESULTS_SHEET

    ws.append(list(OUTPUT_HEADER))
    format_header_row(ws, 1, len(OUTPUT_HEADER))

    for point in points:
        ws.append([point.description, point.period_end_date, point.balance])
        ws.cell(row=ws.max_row, column=3).number_format = AMOUNT_FORMAT

    auto_column_width(ws)
    wb.save(path)


SPREADSHEET = register_format(
    TabularFormat(
        name="spreadsheet",
        extensions=(".xlsx", ".xlsm"),
        read_rows=read_rows,
        write_rows=write_rows,
    )
)
