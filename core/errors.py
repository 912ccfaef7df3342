from __future__ import annotations


class SalesAppError(Exception):
    """Base class for errors raised by the sales recorder."""


class ValidationError(SalesAppError, ValueError):
    """User input is incomplete or invalid. Raised before the ledger is touched."""


class LocationPermissionError(SalesAppError, PermissionError):
    """Location permission was denied; no sale is created."""


class StorageReadError(SalesAppError):
    """Stored ledger content is absent or cannot be parsed."""


class StorageWriteError(SalesAppError):
    """The durable write failed; the sale was not saved."""


class StorageUnavailableError(SalesAppError):
    """The store itself could not be read (locked, missing table, I/O failure)."""
