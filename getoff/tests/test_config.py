"""
Tests for environment settings.
"""

import pytest

from ..config import Settings, get_settings
from ..engine_core.config import ConfigError, GameConfig


ENV_VARS = [
    "GETOFF_FIRST_STATION",
    "GETOFF_LAST_STATION",
    "GETOFF_MIN_PLAYERS",
    "GETOFF_MAX_PLAYERS",
    "GETOFF_SESSION_TTL",
    "GETOFF_ENV",
    "GETOFF_LOG_LEVEL",
    "ALLOWED_ORIGINS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:

    def test_defaults(self):
        settings = get_settings()

        assert settings.env == "development"
        assert settings.log_level == "INFO"
        assert settings.allowed_origins == ["*"]
        assert settings.session_ttl == 3600
        assert settings.game == GameConfig()

    def test_game_config_from_env(self, monkeypatch):
        monkeypatch.setenv("GETOFF_FIRST_STATION", "0")
        monkeypatch.setenv("GETOFF_LAST_STATION", "3")
        monkeypatch.setenv("GETOFF_MIN_PLAYERS", "1")
        monkeypatch.setenv("GETOFF_MAX_PLAYERS", "6")

        settings = Settings.from_env()

        assert settings.game == GameConfig(
            first_station=0, last_station=3, min_players=1, max_players=6,
        )

    def test_other_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("GETOFF_ENV", "production")
        monkeypatch.setenv("GETOFF_LOG_LEVEL", "debug")
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
        monkeypatch.setenv("GETOFF_SESSION_TTL", "60")

        settings = Settings.from_env()

        assert settings.env == "production"
        assert settings.log_level == "DEBUG"
        assert settings.allowed_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]
        assert settings.session_ttl == 60

    def test_allowed_origins_are_trimmed(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example ,,")

        settings = Settings.from_env()

        assert settings.allowed_origins == ["http://a.example", "http://b.example"]

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("GETOFF_LAST_STATION", "  ")
        assert Settings.from_env().game.last_station == GameConfig().last_station

    def test_non_integer_rejected(self, monkeypatch):
        monkeypatch.setenv("GETOFF_MAX_PLAYERS", "many")

        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env()
        assert "GETOFF_MAX_PLAYERS" in str(exc_info.value)

    def test_inconsistent_config_rejected(self, monkeypatch):
        monkeypatch.setenv("GETOFF_FIRST_STATION", "9")
        monkeypatch.setenv("GETOFF_LAST_STATION", "2")

        with pytest.raises(ConfigError):
            Settings.from_env()
