from __future__ import annotations

from datetime import date, datetime

import pytest
from flask.testing import FlaskClient

from accrual.app import create_app
from accrual.app.settings import ApiSettings
from accrual.schemas.ledger import LedgerEntry

FIXED_NOW = datetime(2023, 3, 15)


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(ApiSettings(cors_origins=""))
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def loan_a() -> LedgerEntry:
    return LedgerEntry(description="Loan A", start_date=date(2023, 1, 1), principal=1000.00)


def write_ledger_csv(path, rows, header="Description;Date;Amount") -> None:
    lines = [header] + [";".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
