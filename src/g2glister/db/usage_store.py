"""Persistent backends for the usage counters blob."""

import os
from pathlib import Path
from typing import Optional

from g2glister.config.settings import USAGE_STORE_JSON, USAGE_STORE_SQLITE
from g2glister.db.repository import Repository

USAGE_SETTING_KEY = "champion_usage_count"


class SettingsUsageStore:
    """Stores the usage blob as one row of the settings table."""

    def __init__(self, repo: Repository, key: str = USAGE_SETTING_KEY) -> None:
        self._repo = repo
        self._key = key

    def read(self) -> Optional[str]:
        return self._repo.get_setting(self._key)

    def write(self, blob: str) -> None:
        self._repo.set_setting(self._key, blob)

    def delete(self) -> None:
        self._repo.delete_setting(self._key)


class JsonFileUsageStore:
    """Stores the usage blob as a standalone JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, blob: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Atomic replace
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(blob)
        os.replace(tmp_path, self.path)

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


def open_usage_store(kind: str, repo: Repository, usage_file: Path):
    """
    Create the usage store selected in settings.

    Args:
        kind: "sqlite" or "json"
        repo: Repository for the sqlite backend
        usage_file: File for the json backend
    """
    if kind == USAGE_STORE_JSON:
        return JsonFileUsageStore(usage_file)
    if kind == USAGE_STORE_SQLITE:
        return SettingsUsageStore(repo)
    raise ValueError(f"Unknown usage store: {kind}")
