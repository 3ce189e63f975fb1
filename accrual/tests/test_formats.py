from __future__ import annotations

import csv
from datetime import datetime

import pytest
from openpyxl import Workbook, load_workbook

from accrual.errors import UnsupportedFormatError
from accrual.formats import OUTPUT_HEADER, get_format, supported_extensions
from accrual.formats import delimited, spreadsheet
from accrual.schemas.ledger import AccrualPoint, RawRow

from .conftest import write_ledger_csv

POINTS = [
    AccrualPoint(description="Loan A", period_end_date="2023-02-01", balance=1004.25),
    AccrualPoint(description="Loan, with comma", period_end_date="2023-03-01", balance=1008.1),
]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ledger.csv", "delimited-text"),
        ("LEDGER.CSV", "delimited-text"),
        ("ledger.xlsx", "spreadsheet"),
        ("dir/ledger.xlsm", "spreadsheet"),
    ],
)
def test_dispatch_by_extension(name, expected):
    assert get_format(name).name == expected


@pytest.mark.parametrize("name", ["ledger.txt", "ledger.xls", "ledger"])
def test_unknown_extension_is_rejected(name):
    with pytest.raises(UnsupportedFormatError) as info:
        get_format(name)
    assert info.value.supported == supported_extensions()


def test_csv_reader_skips_header_and_blank_lines(tmp_path):
    path = tmp_path / "ledger.csv"
    write_ledger_csv(path, [("Loan A", "2023-01-01", "1000.00"), ("", "", ""), ("Loan B", "2022-06-15", "250.5")])

    rows = delimited.read_rows(path)

    assert rows == [
        RawRow(description="Loan A", date_text="2023-01-01", amount_text="1000.00", row_number=2),
        RawRow(description="Loan B", date_text="2022-06-15", amount_text="250.5", row_number=4),
    ]


def test_csv_reader_handles_bom(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_bytes("\ufeffOpis;Data;Kwota\nLoan;2023-01-01;10\n".encode("utf-8"))

    assert delimited.read_rows(path) == [
        RawRow(description="Loan", date_text="2023-01-01", amount_text="10", row_number=2)
    ]


def test_csv_writer_emits_header_and_rows(tmp_path):
    path = tmp_path / "out.csv"
    delimited.write_rows(path, POINTS)

    with open(path, newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))

    assert rows[0] == list(OUTPUT_HEADER)
    assert rows[1] == ["Loan A", "2023-02-01", "1004.25"]
    assert rows[2] == ["Loan, with comma", "2023-03-01", "1008.10"]


def test_csv_writer_with_no_points_writes_header_only(tmp_path):
    path = tmp_path / "out.csv"
    delimited.write_rows(path, [])

    with open(path, newline="", encoding="utf-8") as fh:
        assert list(csv.reader(fh)) == [list(OUTPUT_HEADER)]


def test_xlsx_reader_converts_cells_to_text(tmp_path):
    path = tmp_path / "ledger.xlsx"
    wb = Workbook()
    ws = wb.active
    ws.append(["Opis", "Data", "Kwota"])
    ws.append(["Loan A", datetime(2023, 1, 1), 1000])
    ws.append([None, "2022-06-15", 250.5])
    wb.save(path)

    rows = spreadsheet.read_rows(path)

    assert rows == [
        RawRow(description="Loan A", date_text="2023-01-01", amount_text="1000", row_number=2),
        RawRow(description="", date_text="2022-06-15", amount_text="250.5", row_number=3),
    ]


def test_xlsx_reader_with_header_only(tmp_path):
    path = tmp_path / "ledger.xlsx"
    wb = Workbook()
    wb.active.append(["Opis", "Data", "Kwota"])
    wb.save(path)

    assert spreadsheet.read_rows(path) == []


def test_xlsx_writer_builds_results_sheet(tmp_path):
    path = tmp_path / "out.xlsx"
    spreadsheet.write_rows(path, POINTS)

    ws = load_workbook(path).active
    values = [list(row) for row in ws.iter_rows(values_only=True)]

    assert ws.title == "Results"
    assert values[0] == list(OUTPUT_HEADER)
    assert values[1] == ["Loan A", "2023-02-01", 1004.25]
    assert values[2] == ["Loan, with comma", "2023-03-01", 1008.1]
    assert ws.cell(row=1, column=1).font.bold


def test_xlsx_writer_with_no_points_writes_header_only(tmp_path):
    path = tmp_path / "out.xlsx"
    spreadsheet.write_rows(path, [])

    ws = load_workbook(path).active
    assert [list(row) for row in ws.iter_rows(values_only=True)] == [list(OUTPUT_HEADER)]
