"""FastAPI dependency injection utilities.

Provides shared dependencies for API routes, configured by app factory.
Each function is replaced by create_app() via dependency_overrides.
"""

from pathlib import Path
from typing import Callable, Optional

from g2glister.config.preferences import Preferences
from g2glister.core.registry import AccountRegistry
from g2glister.core.usage_tracker import UsageTracker
from g2glister.parser.assembler import FileReader


def get_registry() -> AccountRegistry:
    """Dependency injection for the account registry - set by app factory."""
    raise NotImplementedError("Registry not configured")


def get_tracker() -> UsageTracker:
    """Dependency injection for the usage tracker - set by app factory."""
    raise NotImplementedError("Usage tracker not configured")


def get_reader() -> FileReader:
    """Dependency injection for the account file reader - set by app factory."""
    raise NotImplementedError("File reader not configured")


def get_preferences() -> Preferences:
    """Dependency injection for current preferences - set by app factory."""
    raise NotImplementedError("Preferences not configured")


def get_preferences_path() -> Path:
    """Dependency injection for the preferences file location - set by app factory."""
    raise NotImplementedError("Preferences not configured")


def get_folder_saver() -> Callable[[Optional[str]], bool]:
    """Dependency injection for saving the last browsed folder - set by app factory."""
    raise NotImplementedError("Preferences not configured")
