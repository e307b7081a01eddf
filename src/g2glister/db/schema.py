"""Database schema - DDL statements for SQLite."""

SCHEMA_VERSION = 1

# Settings table - key/value state (usage counters, schema version)
CREATE_SETTINGS = """
CREATE TABLE IF NOT EXISTS settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
)
"""

ALL_CREATE_STATEMENTS = [
    CREATE_SETTINGS,
]
