"""Delimited-text ledgers.

Input uses ';' between fields and starts with a header row. Output uses ','
and is quoted by the csv module where a description needs it.
"""

from __future__ import annotations

import csv
from typing import List, Sequence

from accrual.formats.base import OUTPUT_HEADER, PathLike, TabularFormat, register_format
from accrual.schemas.ledger import AccrualPoint, RawRow

INPUT_DELIMITER = ";"
OUTPUT_DELIMITER = ","


def read_rows(path: PathLike) -> List[RawRow]:
    rows: List[RawRow] = []
    with open(path, "r", encoding="utf-8-sig", newline="") as fh:
        reader = csv.reader(fh, delimiter=INPUT_DELIMITER)
        next(reader, None)  # header
        for fields in reader:
            if not fields or all(not f.strip() for f in fields):
                continue
            rows.append(RawRow.from_fields(fields, row_number=reader.line_num))
    return rows


def write_rows(path: PathLike, points: Sequence[AccrualPoint]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, delimiter=OUTPUT_DELIMITER)
        writer.writerow(OUTPUT_HEADER)
        for point in points:
            writer.writerow([point.description, point.period_end_date, f"{point.balance:.2f}"])


DELIMITED_TEXT = register_format(
    TabularFormat(
        name="delimited-text",
        extensions=(".csv",),
        read_rows=read_rows,
        write_rows=write_rows,
    )
)
