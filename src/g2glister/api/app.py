"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from g2glister.api import dependencies
from g2glister.api.routes import accounts, listing, preferences, usage
from g2glister.api.schemas import StatusResponse
from g2glister.config.preferences import Preferences, load_preferences, update_preference
from g2glister.config.settings import Settings
from g2glister.core.registry import AccountRegistry
from g2glister.core.usage_tracker import UsageTracker
from g2glister.db.connection import Database
from g2glister.db.repository import Repository
from g2glister.db.usage_store import open_usage_store
from g2glister.parser.assembler import FileReader
from g2glister.parser.sources import read_account_file
from g2glister.version import __version__

logger = logging.getLogger(__name__)


def create_app(
    db: Database,
    settings: Optional[Settings] = None,
    registry: Optional[AccountRegistry] = None,
    reader: FileReader = read_account_file,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        db: Connected database
        settings: Application settings (defaults keep preferences and usage
            files in the database directory)
        registry: Account registry (a fresh one by default)
        reader: Account file reader

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = Settings(base_dir=db.db_path.parent, db_path=db.db_path)

    app = FastAPI(
        title="G2G Lister API",
        description="Account listing generator for the G2G marketplace",
        version=__version__,
    )

    # CORS middleware for the local front-end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefs_path = settings.prefs_path
    prefs = load_preferences(prefs_path)

    repo = Repository(db)
    tracker = UsageTracker(open_usage_store(settings.usage_store, repo, settings.usage_file))
    if registry is None:
        registry = AccountRegistry(last_selected_path=prefs.last_folder_path or "")

    def save_folder(path: Optional[str]) -> bool:
        saved = update_preference("last_folder_path", path, prefs_path)
        if not saved:
            logger.warning(f"Could not save last folder path to {prefs_path}")
        return saved

    def get_preferences() -> Preferences:
        return load_preferences(prefs_path)

    app.dependency_overrides[dependencies.get_registry] = lambda: registry
    app.dependency_overrides[dependencies.get_tracker] = lambda: tracker
    app.dependency_overrides[dependencies.get_reader] = lambda: reader
    app.dependency_overrides[dependencies.get_preferences] = get_preferences
    app.dependency_overrides[dependencies.get_preferences_path] = lambda: prefs_path
    app.dependency_overrides[dependencies.get_folder_saver] = lambda: save_folder

    app.include_router(accounts.router)
    app.include_router(listing.router)
    app.include_router(preferences.router)
    app.include_router(usage.router)

    app.state.db = db
    app.state.settings = settings
    app.state.registry = registry
    app.state.tracker = tracker

    @app.get("/api/status", response_model=StatusResponse, tags=["status"])
    def get_status() -> StatusResponse:
        """Get server status."""
        return StatusResponse(
            status="ok",
            version=__version__,
            db_path=str(db.db_path),
            base_path=registry.base_path or None,
            account_count=registry.count,
        )

    return app
