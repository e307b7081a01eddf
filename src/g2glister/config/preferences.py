"""User preferences management - stored as JSON file."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

from g2glister.config.paths import get_data_dir


PREFS_FILENAME = "preferences.json"


@dataclass
class Preferences:
    """User preferences with defaults."""
    last_folder_path: Optional[str] = None  # Last browsed accounts folder
    rank_by_scarcity: bool = True  # Feature least-used champions/skins first
    track_usage: bool = True  # Record featured champions after each listing


def _typed(data: dict, key: str, expected: type, default: Any) -> Any:
    """Return data[key] if it has the expected type, else default."""
    value = data.get(key, default)
    return value if isinstance(value, expected) else default


def get_prefs_path() -> Path:
    """Get the path to the preferences file."""
    return get_data_dir() / PREFS_FILENAME


def load_preferences(path: Optional[Path] = None) -> Preferences:
    """Load preferences from file, returning defaults if not found."""
    prefs_path = path or get_prefs_path()

    if prefs_path.exists():
        try:
            with open(prefs_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            defaults = Preferences()
            return Preferences(
                last_folder_path=_typed(data, "last_folder_path", str, defaults.last_folder_path),
                rank_by_scarcity=_typed(data, "rank_by_scarcity", bool, defaults.rank_by_scarcity),
                track_usage=_typed(data, "track_usage", bool, defaults.track_usage),
            )
        except (json.JSONDecodeError, AttributeError, OSError):
            pass

    return Preferences()


def save_preferences(prefs: Preferences, path: Optional[Path] = None) -> bool:
    """Save preferences to file."""
    prefs_path = path or get_prefs_path()

    try:
        prefs_path.parent.mkdir(parents=True, exist_ok=True)
        with open(prefs_path, "w", encoding="utf-8") as f:
            json.dump(asdict(prefs), f, indent=2, ensure_ascii=False)
        return True
    except OSError:
        return False


def update_preference(key: str, value: Any, path: Optional[Path] = None) -> bool:
    """Update a single preference and save."""
    if key not in {f.name for f in fields(Preferences)}:
        return False

    prefs = load_preferences(path)
    setattr(prefs, key, value)
    return save_preferences(prefs, path)

