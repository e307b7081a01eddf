"""Usage counters for items featured in listing titles.

Counters are kept as one JSON object blob in an injected store, so the
backend (SQLite settings row, JSON file, memory) can be swapped freely.
Persistence is best-effort: a broken statistics store must never block
listing generation.
"""

import json
import logging
import threading
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)


class UsageStore(Protocol):
    """Persistence port for the serialized usage counters."""

    def read(self) -> Optional[str]:
        """Return the stored blob, or None if nothing was stored."""
        ...

    def write(self, blob: str) -> None:
        """Replace the stored blob."""
        ...

    def delete(self) -> None:
        """Remove the stored blob. Must not fail if nothing is stored."""
        ...


class MemoryUsageStore:
    """In-process store, used by tests and throwaway sessions."""

    def __init__(self, blob: Optional[str] = None) -> None:
        self.blob = blob

    def read(self) -> Optional[str]:
        return self.blob

    def write(self, blob: str) -> None:
        self.blob = blob

    def delete(self) -> None:
        self.blob = None


class UsageTracker:
    """Counts how often each item has been featured and ranks by scarcity."""

    def __init__(self, store: UsageStore) -> None:
        self._store = store
        # Serializes read-modify-write of the blob across API worker threads
        self._lock = threading.Lock()

    def load(self) -> dict[str, int]:
        """
        Load the current counters.

        Returns an empty mapping if nothing is stored or the stored state is
        unreadable. Entries with invalid counts are dropped.
        """
        try:
            blob = self._store.read()
        except Exception as e:
            logger.warning(f"Could not load usage counters: {e}")
            return {}

        if not blob:
            return {}

        try:
            data = json.loads(blob)
        except ValueError as e:
            logger.warning(f"Usage counters are corrupt, starting empty: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Usage counters are not a JSON object, starting empty")
            return {}

        usage: dict[str, int] = {}
        for name, count in data.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                logger.warning(f"Dropping invalid usage count for {name!r}: {count!r}")
                continue
            usage[name] = count
        return usage

    def _save(self, usage: dict[str, int]) -> bool:
        try:
            self._store.write(json.dumps(usage, ensure_ascii=False))
            return True
        except Exception as e:
            logger.warning(f"Could not save usage counters: {e}")
            return False

    def record(self, names: Iterable[str]) -> bool:
        """
        Increment the counter of every name by one and persist.

        Returns:
            True if the counters were saved
        """
        names = list(names)
        with self._lock:
            usage = self.load()
            for name in names:
                usage[name] = usage.get(name, 0) + 1
            saved = self._save(usage)
        if saved:
            logger.debug(f"Recorded usage for {len(names)} items")
        return saved

    def rank_by_scarcity(self, names: Iterable[str]) -> list[str]:
        """
        Order names from least to most used.

        Unseen names count as 0. Ties are broken by the name itself so the
        result does not depend on input order. Counters are not modified.
        """
        usage = self.load()
        return sorted(names, key=lambda name: (usage.get(name, 0), name))

    def reset(self) -> None:
        """Clear all counters."""
        try:
            with self._lock:
                self._store.delete()
            logger.info("Usage counters cleared")
        except Exception as e:
            logger.warning(f"Could not clear usage counters: {e}")

    def get_stats(self) -> list[tuple[str, int]]:
        """Return (name, count) pairs, least used first."""
        usage = self.load()
        return sorted(usage.items(), key=lambda entry: (entry[1], entry[0]))
