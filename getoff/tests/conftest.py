"""
Pytest fixtures for Get Off tests.
"""

import random

import pytest

from ..engine_core.config import GameConfig
from ..engine_core.state import (
    Player, BeginState, SetupState, TurnState, TurnResultState, OverState,
)
from ..engine_core.reducer import Reducer


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so secret stations are reproducible."""
    return random.Random(1234)


@pytest.fixture
def config() -> GameConfig:
    """Stations 1-5, 2-3 players."""
    return GameConfig(first_station=1, last_station=5, min_players=2, max_players=3)


@pytest.fixture
def small_config() -> GameConfig:
    """Stations 1-3, exactly 2 players."""
    return GameConfig(first_station=1, last_station=3, min_players=2, max_players=2)


@pytest.fixture
def reducer(rng: random.Random) -> Reducer:
    return Reducer(rng=rng)


@pytest.fixture
def players() -> tuple[Player, ...]:
    return (
        Player(name="Ann", station=1),
        Player(name="Bob", station=3),
        Player(name="Cy", station=5),
    )


@pytest.fixture
def begin_state(config: GameConfig) -> BeginState:
    return BeginState(config=config, secret_station=4)


@pytest.fixture
def setup_state(config: GameConfig) -> SetupState:
    """Setup with Ann in seat 0, seat 1 empty, Cy in seat 2."""
    return SetupState(
        config=config,
        secret_station=4,
        seats=(Player(name="Ann", station=1), None, Player(name="Cy", station=1)),
    )


@pytest.fixture
def turn_state(config: GameConfig, players) -> TurnState:
    """Bob's turn, secret station 4."""
    return TurnState(config=config, secret_station=4, players=players, current_player=1)


@pytest.fixture
def turn_result_state(config: GameConfig, players) -> TurnResultState:
    """Cy (the last seat) just missed."""
    return TurnResultState(config=config, secret_station=4, players=players, current_player=2)


@pytest.fixture
def over_state(config: GameConfig) -> OverState:
    """Bob won at station 4."""
    players = (
        Player(name="Ann", station=2),
        Player(name="Bob", station=4),
        Player(name="Cy", station=5),
    )
    return OverState(
        config=config,
        secret_station=4,
        players=players,
        current_player=1,
        winner=players[1],
    )
