"""
Key-value stores backing the sales ledger.

A store only knows about opaque string values under string keys; the ledger
decides what goes in them.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional, Protocol

from core.db import q, x
from core.errors import StorageUnavailableError, StorageWriteError
from core.utils import iso_now

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class SqliteKeyValueStore:
    """Durable store over the `kv_store` table. Assumes `ensure_schema` has run."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> Optional[str]:
        try:
            rows = q(self._conn, "SELECT value FROM kv_store WHERE key=?", (str(key),))
        except sqlite3.Error as e:
            raise StorageUnavailableError(f"Could not read '{key}': {e}") from e
        if not rows:
            return None
        return rows[0]["value"]

    def set(self, key: str, value: str) -> None:
        try:
            x(
                self._conn,
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
                """,
                (str(key), str(value), iso_now()),
            )
        except sqlite3.Error as e:
            self._conn.rollback()
            logger.error("Write to key '%s' failed: %s", key, e)
            raise StorageWriteError(f"Could not write '{key}': {e}") from e


class InMemoryKeyValueStore:
    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
