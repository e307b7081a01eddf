"""Configuration and settings management."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from g2glister.config.paths import get_data_dir
from g2glister.config.preferences import PREFS_FILENAME

USAGE_STORE_SQLITE = "sqlite"
USAGE_STORE_JSON = "json"
USAGE_STORES = (USAGE_STORE_SQLITE, USAGE_STORE_JSON)

USAGE_FILE_NAME = "champion_usage.json"


@dataclass
class Settings:
    """Application settings."""

    # Directory for database, usage file and preferences
    base_dir: Path = field(default_factory=get_data_dir)

    # Path to database file (defaults to base_dir/lister.db)
    db_path: Optional[Path] = None

    # Use portable mode (data beside exe)
    portable: bool = False

    # Backend for usage counters: "sqlite" or "json"
    usage_store: str = USAGE_STORE_SQLITE

    # JSON usage file (defaults to base_dir/champion_usage.json)
    usage_file: Optional[Path] = None

    # Log level for the application logger
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        """Apply portable mode and derive default file locations."""
        if self.portable:
            self.base_dir = get_data_dir(portable=True)

        if self.db_path is None:
            self.db_path = self.base_dir / "lister.db"

        if self.usage_file is None:
            self.usage_file = self.base_dir / USAGE_FILE_NAME

    @property
    def prefs_path(self) -> Path:
        return self.base_dir / PREFS_FILENAME

    @classmethod
    def from_args(
        cls,
        db_path: Optional[str] = None,
        portable: bool = False,
        usage_store: Optional[str] = None,
        verbose: bool = False,
    ) -> "Settings":
        """
        Create settings from CLI arguments.

        Args:
            db_path: Override database path
            portable: Use portable mode
            usage_store: Usage counters backend
            verbose: Enable debug logging
        """
        return cls(
            db_path=Path(db_path) if db_path else None,
            portable=portable,
            usage_store=usage_store or USAGE_STORE_SQLITE,
            log_level=logging.DEBUG if verbose else logging.INFO,
        )

    def validate(self) -> list[str]:
        """
        Validate settings.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.usage_store not in USAGE_STORES:
            errors.append(
                f"Unknown usage store: {self.usage_store} (expected one of {', '.join(USAGE_STORES)})"
            )

        if self.db_path and self.db_path.exists() and self.db_path.is_dir():
            errors.append(f"Database path is a directory: {self.db_path}")

        return errors
