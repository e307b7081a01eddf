"""Repository - key/value settings access."""

from datetime import datetime
from typing import Optional

from g2glister.db.connection import Database


class Repository:
    """Data access layer for the settings table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    # --- Settings ---

    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value by key."""
        row = self.db.fetchone("SELECT value FROM settings WHERE key = ?", (key,))
        return row["value"] if row else None

    def set_setting(self, key: str, value: str) -> None:
        """Set a setting value."""
        self.db.execute(
            "INSERT OR REPLACE INTO settings (key, value, updated_at) VALUES (?, ?, ?)",
            (key, value, datetime.now().isoformat()),
        )

    def delete_setting(self, key: str) -> bool:
        """Delete a setting. Returns True if a row was removed."""
        cursor = self.db.execute("DELETE FROM settings WHERE key = ?", (key,))
        return cursor.rowcount > 0
