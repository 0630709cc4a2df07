"""CSV export for the finances view."""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from .models import Transaction

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Date", "Description", "Amount", "Type", "Category", "Status"]


def format_export_date(row: Transaction) -> str:
    return row.date.strftime("%b %d, %Y")


def format_export_amount(amount: float) -> str:
    # Whole-dollar amounts export without a trailing ".0".
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Date": format_export_date(row),
                "Description": row.description,
                "Amount": format_export_amount(row.amount),
                "Type": row.type,
                "Category": row.category,
                "Status": row.status,
            }
            for row in transactions
        ],
        columns=EXPORT_COLUMNS,
    )


def transactions_to_csv_bytes(transactions: Iterable[Transaction]) -> bytes:
    frame = transactions_frame(transactions)
    logger.info("Exporting %s transactions to CSV.", len(frame))
    return frame.to_csv(index=False).encode("utf-8")


def export_filename(year: int, month0: int) -> str:
    return f"financial-report-{year}-{month0 + 1}.csv"
