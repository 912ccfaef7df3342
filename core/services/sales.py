from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional
from uuid import uuid4

from core.errors import LocationPermissionError, ValidationError
from core.models import Location, SaleRecord
from core.services.ledger import SalesLedger
from core.services.location import LocationProvider
from core.utils import iso_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    name: str
    price: int


DEFAULT_PRODUCTS = [
    Product("Laptop", 1000),
    Product("Phone", 500),
    Product("Tablet", 300),
    Product("Headphones", 150),
]


def find_product(name: str, products: Optional[list[Product]] = None) -> Optional[Product]:
    for p in products if products is not None else DEFAULT_PRODUCTS:
        if p.name == name:
            return p
    return None


def increment_quantity(quantity: int) -> int:
    return int(quantity) + 1


def decrement_quantity(quantity: int) -> int:
    # Never below 1
    return int(quantity) - 1 if int(quantity) > 1 else 1


def _normalize_product(product: Optional[str]) -> str:
    if product is None:
        raise ValidationError("Please fill in all fields: product is required.")
    s = str(product).strip()
    if not s:
        raise ValidationError("Please fill in all fields: product is required.")
    return s


def _is_finite(value: float | int) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _normalize_unit_price(unit_price: Any) -> float | int:
    if unit_price is None or isinstance(unit_price, bool):
        raise ValidationError("Please fill in all fields: price is required.")
    if isinstance(unit_price, (int, float)):
        up = unit_price
    else:
        try:
            up = float(unit_price)
        except (TypeError, ValueError):
            raise ValidationError("Unit price must be a number.")
    if not _is_finite(up):
        raise ValidationError("Unit price must be a finite number.")
    if not up > 0:
        raise ValidationError("Unit price must be > 0.")
    return up


def _normalize_quantity(quantity: Any) -> int:
    if quantity is None or isinstance(quantity, bool):
        raise ValidationError("Quantity must be at least 1.")
    try:
        qty = int(quantity)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("Quantity must be a whole number.")
    if qty != quantity and not isinstance(quantity, str):
        raise ValidationError("Quantity must be a whole number.")
    if qty < 1:
        raise ValidationError("Quantity must be at least 1.")
    return qty


def build_sale(
    *,
    product: str,
    unit_price: float | int,
    quantity: int,
    location: Location,
    timestamp: Optional[str] = None,
    id_factory: Callable[[], str] = lambda: uuid4().hex,
) -> SaleRecord:
    return SaleRecord(
        id=id_factory(),
        product=product,
        unit_price=unit_price,
        quantity=quantity,
        total_price=unit_price * quantity,
        location=location,
        timestamp=timestamp or iso_now(),
    )


def record_sale(
    ledger: SalesLedger,
    locator: LocationProvider,
    *,
    product: Optional[str],
    unit_price: Any,
    quantity: Any,
    timestamp: Optional[str] = None,
    id_factory: Callable[[], str] = lambda: uuid4().hex,
) -> SaleRecord:
    """
    Validate input, obtain the current position and append the sale.

    Raises ValidationError or LocationPermissionError before anything is
    written. StorageWriteError from the ledger propagates unchanged.
    """
    product_s = _normalize_product(product)
    up = _normalize_unit_price(unit_price)
    qty = _normalize_quantity(quantity)
    if not _is_finite(up * qty):
        raise ValidationError("Total price is too large.")

    if not locator.request_permission():
        logger.info("Location permission denied; sale of %s discarded", product_s)
        raise LocationPermissionError("Location permission is required.")

    record = build_sale(
        product=product_s,
        unit_price=up,
        quantity=qty,
        location=locator.current_position(),
        timestamp=timestamp,
        id_factory=id_factory,
    )
    ledger.append(record)
    return record
