"""
Sale records and their JSON encoding.

A ledger is stored as a single JSON array of objects, newest first:

    [{"id": "...", "product": "Laptop", "unitPrice": 1000, "quantity": 2,
      "totalPrice": 2000, "location": {"latitude": 0.31, "longitude": 32.58},
      "timestamp": "2024-05-01T09:30:00.000Z"}, ...]

Numbers are written as JSON numeric literals and the timestamp string is kept
verbatim, so decoding an encoded record reproduces it exactly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Union

from core.errors import StorageReadError

Number = Union[int, float]


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class SaleRecord:
    id: str
    product: str
    unit_price: Number
    quantity: int
    total_price: Number
    location: Location
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "product": self.product,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
            "totalPrice": self.total_price,
            "location": self.location.to_dict(),
            "timestamp": self.timestamp,
        }


def _number(value: Any, field: str) -> Number:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StorageReadError(f"Field '{field}' must be a number, got {type(value).__name__}.")
    return value


def _text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise StorageReadError(f"Field '{field}' must be a string, got {type(value).__name__}.")
    return value


def record_from_dict(row: Mapping[str, Any]) -> SaleRecord:
    """
    Build a SaleRecord from one decoded JSON object.

    Accepts the legacy 'price' key in place of 'unitPrice'. Stored totals are
    taken as-is, never recomputed.
    """
    if not isinstance(row, Mapping):
        raise StorageReadError("Sale entry must be an object.")

    try:
        unit_price = row["unitPrice"] if "unitPrice" in row else row["price"]
        loc = row["location"]
        if not isinstance(loc, Mapping):
            raise StorageReadError("Field 'location' must be an object.")

        quantity = _number(row["quantity"], "quantity")
        if not isinstance(quantity, int):
            raise StorageReadError("Field 'quantity' must be an integer.")

        return SaleRecord(
            id=_text(row["id"], "id"),
            product=_text(row["product"], "product"),
            unit_price=_number(unit_price, "unitPrice"),
            quantity=quantity,
            total_price=_number(row["totalPrice"], "totalPrice"),
            location=Location(
                latitude=_number(loc["latitude"], "latitude"),
                longitude=_number(loc["longitude"], "longitude"),
            ),
            timestamp=_text(row["timestamp"], "timestamp"),
        )
    except KeyError as e:
        raise StorageReadError(f"Sale entry is missing field {e}.") from e


def encode_ledger(records: list[SaleRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False, allow_nan=False)


def decode_ledger(payload: str | None) -> list[SaleRecord]:
    if payload is None or not str(payload).strip():
        raise StorageReadError("No stored ledger.")

    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise StorageReadError(f"Stored ledger is not valid JSON: {e}") from e

    if data is None:
        raise StorageReadError("Stored ledger is null.")
    if not isinstance(data, list):
        raise StorageReadError("Stored ledger must be a JSON array.")

    return [record_from_dict(row) for row in data]
