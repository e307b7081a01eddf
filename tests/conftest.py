"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from g2glister.core.usage_tracker import MemoryUsageStore, UsageTracker
from g2glister.db.connection import Database
from g2glister.db.repository import Repository


CHAMPIONS_DUMP = """Account(Server - Brazil)
Level - 32
Honor level is 2
Champions - 24
Skins - 3
Riot Points - 0
Blue Essence - 1250
Orange Essence - 80
Last Play / Inactive From - 2024-11-03

List of Champions:
Ahri, Annie, Ashe, Garen, Master Yi, Miss Fortune.

List of Skins:
• Pulsefire Ezreal
• DJ Sona
• Star Guardian Lux.
"""

LINK_DUMP = """[Account]
Link: https://www.op.gg/summoners/br/Player-BR1
──────────────
"""


@pytest.fixture
def account_dir(tmp_path):
    """Return a factory that writes an account folder with the given files."""

    def make(name: str = "account", files: dict[str, str] | None = None) -> Path:
        folder = tmp_path / name
        folder.mkdir(parents=True, exist_ok=True)
        for file_name, content in (files or {}).items():
            (folder / file_name).write_text(content, encoding="utf-8")
        return folder

    return make


@pytest.fixture
def sample_account(account_dir):
    """Account folder with a stats dump, a link dump and the empty template."""
    return account_dir(
        "uyep_br1",
        {
            "Info.txt": "",
            "stats.txt": CHAMPIONS_DUMP,
            "link.txt": LINK_DUMP,
            "screenshot.png": "not text",
        },
    )


@pytest.fixture
def memory_store():
    return MemoryUsageStore()


@pytest.fixture
def tracker(memory_store):
    return UsageTracker(memory_store)


@pytest.fixture
def db(tmp_path):
    """Create a temporary database."""
    database = Database(tmp_path / "test.db")
    database.connect()
    yield database
    database.close()


@pytest.fixture
def repo(db):
    return Repository(db)


@pytest.fixture
def accounts_base(tmp_path):
    """Base folder with one readable account and one holding only the template."""
    base = tmp_path / "accounts"
    good = base / "acc_good"
    empty = base / "acc_empty"
    good.mkdir(parents=True)
    empty.mkdir(parents=True)
    (good / "stats.txt").write_text(CHAMPIONS_DUMP, encoding="utf-8")
    (good / "link.txt").write_text(LINK_DUMP, encoding="utf-8")
    (empty / "info.txt").write_text("Level - 30", encoding="utf-8")
    return base
