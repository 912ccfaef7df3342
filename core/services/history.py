from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from core.models import SaleRecord
from core.utils import format_coords, format_local_timestamp, format_money

HISTORY_COLUMNS = [
    "timestamp",
    "product",
    "quantity",
    "unit_price",
    "total_price",
    "latitude",
    "longitude",
    "id",
]


@dataclass
class HistorySummary:
    sales_count: int
    units_sold: int
    revenue: float


def history_rows(records: list[SaleRecord], currency: str) -> list[dict]:
    """Card-style display rows, in ledger order (newest first)."""
    return [
        {
            "id": r.id,
            "product": r.product,
            "total": format_money(r.total_price, currency),
            "quantity": r.quantity,
            "price_per_item": format_money(r.unit_price, currency),
            "location": format_coords(r.location.latitude, r.location.longitude),
            "date": format_local_timestamp(r.timestamp),
        }
        for r in records
    ]


def history_frame(records: list[SaleRecord]) -> pd.DataFrame:
    rows = [
        {
            "timestamp": r.timestamp,
            "product": r.product,
            "quantity": r.quantity,
            "unit_price": r.unit_price,
            "total_price": r.total_price,
            "latitude": r.location.latitude,
            "longitude": r.location.longitude,
            "id": r.id,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def summarize(records: list[SaleRecord]) -> HistorySummary:
    return HistorySummary(
        sales_count=len(records),
        units_sold=sum(int(r.quantity) for r in records),
        revenue=float(sum(r.total_price for r in records)),
    )
