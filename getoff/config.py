"""Environment-level configuration for the Get Off app.

This module isolates things that depend on the deployment environment
(log level, CORS origins, default track) from the pure engine, which
only ever sees a GameConfig.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os

from .engine_core.config import GameConfig, ConfigError


def _env_int(name: str, default: int, errors: list[str]) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        errors.append(f"{name} must be an integer, got {raw!r}")
        return default


@dataclass
class Settings:
    """Environment / deployment settings."""

    env: str = "development"
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    session_ttl: int = 3600
    game: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from environment variables.

        Raises ConfigError if a numeric variable is malformed or the
        resulting GameConfig is invalid.
        """
        defaults = GameConfig()
        errors: list[str] = []

        first_station = _env_int("GETOFF_FIRST_STATION", defaults.first_station, errors)
        last_station = _env_int("GETOFF_LAST_STATION", defaults.last_station, errors)
        min_players = _env_int("GETOFF_MIN_PLAYERS", defaults.min_players, errors)
        max_players = _env_int("GETOFF_MAX_PLAYERS", defaults.max_players, errors)
        session_ttl = _env_int("GETOFF_SESSION_TTL", 3600, errors)

        if errors:
            raise ConfigError(errors)

        return cls(
            env=os.getenv("GETOFF_ENV", "development"),
            log_level=os.getenv("GETOFF_LOG_LEVEL", "INFO").upper(),
            allowed_origins=[
                origin.strip()
                for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
                if origin.strip()
            ],
            session_ttl=session_ttl,
            game=GameConfig(
                first_station=first_station,
                last_station=last_station,
                min_players=min_players,
                max_players=max_players,
            ),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()
