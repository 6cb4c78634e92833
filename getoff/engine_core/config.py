"""
Game Config - Construction parameters for a match.

The config is supplied once, when the BEGIN state is created, and is
carried unchanged by every state that follows. Invalid configs are
rejected at construction so the reducer never has to check them.
"""

from __future__ import annotations
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a game config (or its environment source) is invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors) if errors else "Invalid config")


def validate_config(
    first_station: int,
    last_station: int,
    min_players: int,
    max_players: int,
) -> list[str]:
    """
    Check config values.

    Returns a list of error messages (empty if valid).
    """
    errors: list[str] = []

    if first_station < 0:
        errors.append("first_station must be >= 0")
    if first_station >= last_station:
        errors.append("first_station must be < last_station")
    if min_players < 1:
        errors.append("min_players must be >= 1")
    if max_players < min_players:
        errors.append("max_players must be >= min_players")

    return errors


@dataclass(frozen=True)
class GameConfig:
    """
    Track bounds and roster limits for one match.

    Stations are inclusive: a player can stand on first_station
    and on last_station.
    """
    first_station: int = 1
    last_station: int = 8
    min_players: int = 2
    max_players: int = 4

    def __post_init__(self):
        errors = validate_config(
            self.first_station,
            self.last_station,
            self.min_players,
            self.max_players,
        )
        if errors:
            raise ConfigError(errors)

    def contains(self, station: int) -> bool:
        """Check if a station lies on the track."""
        return self.first_station <= station <= self.last_station
