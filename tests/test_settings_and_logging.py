"""
Unit Tests for application settings and logging setup.
"""

import logging

import pytest
from loguru import logger

from psl_scoreboard.config.settings import DEFAULT_PSL_TEAMS, load_settings
from psl_scoreboard.logging.setup import setup_logging


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory so no .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ["LOG_LEVEL", "LOG_FILE", "SEED_DEFAULT_TEAMS", "DEFAULT_TEAMS", "EXPORT_ENCODING"]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test suite for load_settings."""

    def test_defaults(self, clean_env):
        settings = load_settings()

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.seed_default_teams is True
        assert settings.default_teams == DEFAULT_PSL_TEAMS
        assert settings.export_encoding == "utf-8"

    def test_default_team_list(self):
        assert len(DEFAULT_PSL_TEAMS) == 16
        assert "Kaizer Chiefs" in DEFAULT_PSL_TEAMS
        assert "Orlando Pirates" in DEFAULT_PSL_TEAMS

    def test_log_level_upper_cased(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")

        assert load_settings().log_level == "DEBUG"

    def test_invalid_log_level_falls_back(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "chatty")

        assert load_settings().log_level == "INFO"

    def test_team_overrides_from_env(self, clean_env):
        clean_env.setenv("DEFAULT_TEAMS", '["Tuks", "AmaZulu"]')
        clean_env.setenv("SEED_DEFAULT_TEAMS", "false")

        settings = load_settings()

        assert settings.default_teams == ["Tuks", "AmaZulu"]
        assert settings.seed_default_teams is False

    def test_reads_env_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=warning\n", encoding="utf-8")

        assert load_settings().log_level == "WARNING"


class TestLoggingSetup:
    """Test suite for loguru configuration."""

    def test_file_sink_receives_loguru_and_stdlib_records(self, tmp_path):
        log_file = tmp_path / "logs" / "scoreboard.log"
        try:
            setup_logging(level="DEBUG", log_file=log_file)
            logger.info("league table built")
            logging.getLogger("psl.test").warning("from the standard library")
        finally:
            logger.remove()  # Closes the file sink

        content = log_file.read_text(encoding="utf-8")
        assert "league table built" in content
        assert "from the standard library" in content
