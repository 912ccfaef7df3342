SCHEMA_SQL = r"""
-- Key-value store (one row per logical key; the sales ledger lives under 'sales')
CREATE TABLE IF NOT EXISTS kv_store (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL,                   -- serialized payload (JSON for the ledger)
  updated_at TEXT NOT NULL               -- ISO datetime of the last write
);
"""
