"""Tests for preferences, settings and logging configuration."""

import json
import logging

import pytest

from g2glister.config import logging as log_config
from g2glister.config.preferences import (
    Preferences,
    load_preferences,
    save_preferences,
    update_preference,
)
from g2glister.config.settings import USAGE_STORE_JSON, USAGE_STORE_SQLITE, Settings


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "preferences.json"


class TestPreferences:
    """Tests for JSON preferences."""

    def test_defaults_when_missing(self, prefs_path):
        assert load_preferences(prefs_path) == Preferences()

    def test_defaults_when_corrupt(self, prefs_path):
        prefs_path.write_text("{broken", encoding="utf-8")
        assert load_preferences(prefs_path) == Preferences()

    def test_defaults_when_not_object(self, prefs_path):
        prefs_path.write_text("[]", encoding="utf-8")
        assert load_preferences(prefs_path) == Preferences()

    def test_save_and_load(self, prefs_path):
        prefs = Preferences(last_folder_path="/accounts", rank_by_scarcity=False, track_usage=False)
        assert save_preferences(prefs, prefs_path)
        assert load_preferences(prefs_path) == prefs

    def test_partial_file_uses_defaults(self, prefs_path):
        prefs_path.write_text(json.dumps({"track_usage": False}), encoding="utf-8")
        prefs = load_preferences(prefs_path)
        assert prefs.track_usage is False
        assert prefs.rank_by_scarcity is True
        assert prefs.last_folder_path is None

    def test_update_preference(self, prefs_path):
        assert update_preference("last_folder_path", "/x", prefs_path)
        assert load_preferences(prefs_path).last_folder_path == "/x"

    def test_mistyped_values_use_defaults(self, prefs_path):
        data = {"last_folder_path": 5, "rank_by_scarcity": "false", "track_usage": 0}
        prefs_path.write_text(json.dumps(data), encoding="utf-8")
        assert load_preferences(prefs_path) == Preferences()

    def test_real_booleans_are_kept(self, prefs_path):
        prefs_path.write_text(json.dumps({"rank_by_scarcity": False}), encoding="utf-8")
        assert load_preferences(prefs_path).rank_by_scarcity is False

    def test_update_unknown_key(self, prefs_path):
        assert not update_preference("theme", "dark", prefs_path)
        assert not prefs_path.exists()


class TestSettings:
    """Tests for Settings."""

    def test_derived_paths(self, tmp_path):
        settings = Settings(base_dir=tmp_path)
        assert settings.db_path == tmp_path / "lister.db"
        assert settings.usage_file == tmp_path / "champion_usage.json"
        assert settings.prefs_path == tmp_path / "preferences.json"
        assert settings.usage_store == USAGE_STORE_SQLITE

    def test_explicit_db_path(self, tmp_path):
        settings = Settings(base_dir=tmp_path, db_path=tmp_path / "other.db")
        assert settings.db_path == tmp_path / "other.db"

    def test_default_base_dir_uses_local_app_data(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
        settings = Settings()
        assert settings.base_dir == tmp_path / "G2GLister"
        assert settings.base_dir.is_dir()

    def test_from_args(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
        settings = Settings.from_args(
            db_path=str(tmp_path / "cli.db"),
            usage_store=USAGE_STORE_JSON,
            verbose=True,
        )
        assert settings.db_path == tmp_path / "cli.db"
        assert settings.usage_store == USAGE_STORE_JSON
        assert settings.log_level == logging.DEBUG

    def test_validate_ok(self, tmp_path):
        assert Settings(base_dir=tmp_path).validate() == []

    def test_validate_unknown_store(self, tmp_path):
        errors = Settings(base_dir=tmp_path, usage_store="redis").validate()
        assert len(errors) == 1
        assert "redis" in errors[0]

    def test_validate_db_path_is_directory(self, tmp_path):
        errors = Settings(base_dir=tmp_path, db_path=tmp_path).validate()
        assert errors == [f"Database path is a directory: {tmp_path}"]


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def reset_logger(self):
        logger = logging.getLogger(log_config.LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        saved_global = log_config._logger
        log_config._logger = None
        logger.handlers = []
        yield
        for handler in logger.handlers:
            handler.close()
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)
        log_config._logger = saved_global

    def test_writes_to_log_file(self, tmp_path):
        log_path = tmp_path / "app.log"
        logger = log_config.setup_logging(console=False, log_path=log_path)

        logging.getLogger("g2glister.core.listing").info("hello from listing")
        for handler in logger.handlers:
            handler.flush()

        assert "[INFO] hello from listing" in log_path.read_text(encoding="utf-8")

    def test_second_call_only_changes_level(self, tmp_path):
        logger = log_config.setup_logging(console=False, log_path=tmp_path / "app.log")
        again = log_config.setup_logging(console=False, level=logging.DEBUG)

        assert again is logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
