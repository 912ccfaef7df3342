"""
Tests for `core/services/ledger.py`.

Covers:
- append places the record at the head, older order preserved.
- list_all degrades to an empty list on absent or corrupt storage.
- write failures propagate as StorageWriteError.
- a store that cannot be read makes append fail without writing.
"""

from __future__ import annotations

import threading

import pytest

from core.errors import StorageUnavailableError, StorageWriteError
from core.models import Location
from core.services.ledger import LEDGER_KEY, SalesLedger
from core.services.sales import build_sale
from core.storage import InMemoryKeyValueStore, SqliteKeyValueStore

LOC = Location(latitude=0.31, longitude=32.58)


def _sale(product: str, unit_price=100, quantity=1):
    return build_sale(product=product, unit_price=unit_price, quantity=quantity, location=LOC)


class FailingStore(InMemoryKeyValueStore):
    def set(self, key: str, value: str) -> None:
        raise StorageWriteError("disk full")


class FlakyReadStore:
    """Wraps a store; the next `get` fails once when `fail_next_get` is set."""

    def __init__(self, inner) -> None:
        self._inner = inner
        self.fail_next_get = False

    def get(self, key: str):
        if self.fail_next_get:
            self.fail_next_get = False
            raise StorageUnavailableError("database is locked")
        return self._inner.get(key)

    def set(self, key: str, value: str) -> None:
        self._inner.set(key, value)


def test_list_all_on_empty_store_is_empty(ledger) -> None:
    assert ledger.list_all() == []


def test_append_then_list_returns_record_at_head(ledger) -> None:
    r = _sale("Laptop", 1000, 2)
    ledger.append(r)

    got = ledger.list_all()
    assert got[0] == r
    assert got[0].total_price == 2000


def test_three_appends_are_listed_newest_first(ledger) -> None:
    a, b, c = _sale("A"), _sale("B"), _sale("C")
    for r in (a, b, c):
        ledger.append(r)

    assert ledger.list_all() == [c, b, a]


def test_n_appends_keep_first_record_last(sqlite_ledger) -> None:
    records = [_sale(f"P{i}") for i in range(10)]
    for r in records:
        sqlite_ledger.append(r)

    got = sqlite_ledger.list_all()
    assert len(got) == 10
    assert got[0] == records[-1]
    assert got[-1] == records[0]
    assert len({r.id for r in got}) == 10


@pytest.mark.parametrize("garbage", ["{{{", "null", "{\"sales\": []}", "[{\"product\": \"x\"}]"])
def test_list_all_on_corrupt_content_is_empty(garbage) -> None:
    ledger = SalesLedger(InMemoryKeyValueStore({LEDGER_KEY: garbage}))

    assert ledger.list_all() == []


def test_append_over_corrupt_content_starts_fresh() -> None:
    store = InMemoryKeyValueStore({LEDGER_KEY: "not json"})
    ledger = SalesLedger(store)
    r = _sale("Phone", 500)

    ledger.append(r)

    assert ledger.list_all() == [r]


def test_write_failure_propagates_and_leaves_store_untouched() -> None:
    store = FailingStore()
    ledger = SalesLedger(store)

    with pytest.raises(StorageWriteError):
        ledger.append(_sale("Tablet", 300))

    assert store.get(LEDGER_KEY) is None


def test_sqlite_write_failure_is_wrapped(conn) -> None:
    ledger = SalesLedger(SqliteKeyValueStore(conn))
    conn.execute(
        "CREATE TRIGGER kv_read_only BEFORE INSERT ON kv_store BEGIN SELECT RAISE(ABORT, 'read-only'); END"
    )

    with pytest.raises(StorageWriteError):
        ledger.append(_sale("Tablet", 300))

    assert ledger.list_all() == []


def test_append_fails_when_store_cannot_be_read(memory_store) -> None:
    store = FlakyReadStore(memory_store)
    ledger = SalesLedger(store)
    a, b, c = _sale("A"), _sale("B"), _sale("C")
    for r in (a, b, c):
        ledger.append(r)

    store.fail_next_get = True
    with pytest.raises(StorageUnavailableError):
        ledger.append(_sale("D"))

    assert ledger.list_all() == [c, b, a]

    d = _sale("D")
    ledger.append(d)
    assert ledger.list_all() == [d, c, b, a]


def test_list_all_degrades_when_store_cannot_be_read(memory_store) -> None:
    store = FlakyReadStore(memory_store)
    ledger = SalesLedger(store)
    ledger.append(_sale("A"))

    store.fail_next_get = True
    assert ledger.list_all() == []
    assert len(ledger.list_all()) == 1


def test_sqlite_missing_table_does_not_write(conn) -> None:
    ledger = SalesLedger(SqliteKeyValueStore(conn))
    conn.execute("DROP TABLE kv_store")

    with pytest.raises(StorageUnavailableError):
        ledger.append(_sale("Tablet", 300))


def test_ledgers_with_different_keys_are_independent(memory_store) -> None:
    first = SalesLedger(memory_store, key="shop-a")
    second = SalesLedger(memory_store, key="shop-b")
    first.append(_sale("Laptop"))

    assert len(first.list_all()) == 1
    assert second.list_all() == []


def test_clear_empties_ledger(sqlite_ledger) -> None:
    sqlite_ledger.append(_sale("Laptop"))
    sqlite_ledger.clear()

    assert sqlite_ledger.list_all() == []


def test_concurrent_appends_are_not_lost(ledger) -> None:
    records = [_sale(f"P{i}") for i in range(40)]
    threads = [threading.Thread(target=ledger.append, args=(r,)) for r in records]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert {r.id for r in ledger.list_all()} == {r.id for r in records}
