from __future__ import annotations

from typing import Protocol

from core.errors import ValidationError
from core.models import Location


class LocationProvider(Protocol):
    def request_permission(self) -> bool: ...

    def current_position(self) -> Location: ...


def make_location(latitude: float, longitude: float) -> Location:
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        raise ValidationError("Latitude and longitude must be numbers.")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90.")
    if not -180.0 <= lon <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180.")
    return Location(latitude=lat, longitude=lon)


class StaticLocationProvider:
    """
    Reports a fixed position.

    `granted` stands in for the user's answer to the permission prompt; the
    New Sale page wires it to the "share location" toggle.
    """

    def __init__(self, location: Location, *, granted: bool = True) -> None:
        self._location = location
        self._granted = bool(granted)

    def request_permission(self) -> bool:
        return self._granted

    def current_position(self) -> Location:
        return self._location
