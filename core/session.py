from __future__ import annotations

from pathlib import Path

import streamlit as st

from core.db import ensure_schema, get_conn
from core.services.ledger import SalesLedger
from core.storage import SqliteKeyValueStore


@st.cache_resource
def get_ledger(db_path: Path) -> SalesLedger:
    # One ledger (and lock) per database, shared by all sessions.
    conn = get_conn(db_path)
    ensure_schema(conn)
    return SalesLedger(SqliteKeyValueStore(conn))
