from __future__ import annotations

import csv
import io
from datetime import datetime

from city_tutors_crm.export import EXPORT_COLUMNS, export_filename, transactions_to_csv_bytes
from city_tutors_crm.models import Transaction


def _read_rows(payload: bytes) -> list[list[str]]:
    return list(csv.reader(io.StringIO(payload.decode("utf-8"))))


def test_csv_export_quotes_commas_in_descriptions() -> None:
    rows = [
        Transaction(
            id="1",
            date=datetime(2024, 2, 1),
            description="Gala tickets, table of ten",
            amount=5000,
            type="income",
            category="Events",
        ),
        Transaction(
            id="2",
            date=datetime(2024, 2, 3),
            description='Rent for "Main" office',
            amount=-2500,
            type="expense",
            category="Operations",
            status="pending",
        ),
    ]

    parsed = _read_rows(transactions_to_csv_bytes(rows))

    assert parsed[0] == EXPORT_COLUMNS
    assert parsed[1] == ["Feb 01, 2024", "Gala tickets, table of ten", "5000", "income", "Events", "completed"]
    assert parsed[2][1] == 'Rent for "Main" office'
    assert parsed[2][2] == "-2500"
    assert parsed[2][5] == "pending"


def test_csv_export_of_nothing_is_header_only() -> None:
    parsed = _read_rows(transactions_to_csv_bytes([]))

    assert parsed == [EXPORT_COLUMNS]


def test_export_filename_uses_one_based_month() -> None:
    assert export_filename(2024, 1) == "financial-report-2024-2.csv"
    assert export_filename(2023, 11) == "financial-report-2023-12.csv"


def test_csv_export_keeps_whole_amounts_integral_next_to_floats() -> None:
    rows = [
        Transaction(
            id="1",
            date=datetime(2024, 2, 1),
            description="Major gift",
            amount=75000,
            type="income",
            category="Donations",
        ),
        Transaction(
            id="2",
            date=datetime(2024, 2, 2),
            description="Office supplies",
            amount=-250.0,
            type="expense",
            category="Operations",
        ),
        Transaction(
            id="3",
            date=datetime(2024, 2, 3),
            description="Coffee",
            amount=-12.5,
            type="expense",
            category="Operations",
        ),
    ]

    parsed = _read_rows(transactions_to_csv_bytes(rows))

    assert [row[2] for row in parsed[1:]] == ["75000", "-250", "-12.5"]
