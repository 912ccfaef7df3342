from __future__ import annotations

from datetime import datetime, timezone


def iso_now() -> str:
    # Use UTC ISO timestamps for consistency.
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_local_timestamp(value: str) -> str:
    try:
        return parse_iso(value).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return str(value)


def format_money(amount: float, currency: str) -> str:
    amount_f = float(amount)
    if amount_f.is_integer():
        return f"{currency} {int(amount_f):,}"
    return f"{currency} {amount_f:,.2f}"


def format_coords(latitude: float, longitude: float) -> str:
    return f"Lat: {float(latitude):.4f}, Lon: {float(longitude):.4f}"
