"""
Shared pytest fixtures: in-memory stores and ledgers.

Adds the project root to the Python path so tests can import `core`.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.db import _connect, ensure_schema  # noqa: E402
from core.models import Location  # noqa: E402
from core.services.ledger import SalesLedger  # noqa: E402
from core.services.location import StaticLocationProvider  # noqa: E402
from core.storage import InMemoryKeyValueStore, SqliteKeyValueStore  # noqa: E402

KAMPALA = Location(latitude=0.31, longitude=32.58)


@pytest.fixture()
def conn():
    c = _connect(":memory:")
    ensure_schema(c)
    try:
        yield c
    finally:
        c.close()


@pytest.fixture()
def memory_store():
    return InMemoryKeyValueStore()


@pytest.fixture()
def ledger(memory_store):
    return SalesLedger(memory_store)


@pytest.fixture()
def sqlite_ledger(conn):
    return SalesLedger(SqliteKeyValueStore(conn))


@pytest.fixture()
def locator():
    return StaticLocationProvider(KAMPALA)
