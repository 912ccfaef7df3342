from __future__ import annotations

import logging
import threading

from core.errors import StorageReadError, StorageUnavailableError
from core.models import SaleRecord, decode_ledger, encode_ledger
from core.storage import KeyValueStore

logger = logging.getLogger(__name__)

LEDGER_KEY = "sales"


class SalesLedger:
    """
    Newest-first list of sale records persisted under a single store key.

    Every append rewrites the whole list. Operations on one ledger instance
    are serialized by a lock, so concurrent sessions sharing the instance
    cannot drop each other's appends.
    """

    def __init__(self, store: KeyValueStore, *, key: str = LEDGER_KEY) -> None:
        self._store = store
        self._key = key
        self._lock = threading.Lock()

    @property
    def key(self) -> str:
        return self._key

    def _read(self) -> list[SaleRecord]:
        # Only bad content degrades to empty; store failures propagate.
        raw = self._store.get(self._key)
        if raw is None:
            return []
        try:
            return decode_ledger(raw)
        except StorageReadError as e:
            logger.warning("Ignoring unreadable ledger under '%s': %s", self._key, e)
            return []

    def append(self, record: SaleRecord) -> None:
        # StorageUnavailableError and StorageWriteError propagate; nothing is written
        # when the current ledger cannot be read.
        with self._lock:
            existing = self._read()
            self._store.set(self._key, encode_ledger([record, *existing]))
        logger.info("Recorded sale %s (%s x%d)", record.id, record.product, record.quantity)

    def list_all(self) -> list[SaleRecord]:
        with self._lock:
            try:
                return self._read()
            except StorageUnavailableError as e:
                logger.warning("Ledger under '%s' unavailable: %s", self._key, e)
                return []

    def clear(self) -> None:
        with self._lock:
            self._store.set(self._key, encode_ledger([]))
        logger.info("Cleared ledger under '%s'", self._key)
