"""
Tests for config validation and state shapes.
"""

import pytest

from ..engine_core.config import GameConfig, ConfigError, validate_config
from ..engine_core.state import (
    Player, Tag, SetupState, compact_seats, empty_seats,
)


class TestGameConfig:
    """Config validation."""

    def test_defaults_are_valid(self):
        config = GameConfig()
        assert config.first_station < config.last_station
        assert config.min_players <= config.max_players

    def test_contains(self):
        config = GameConfig(first_station=2, last_station=4)
        assert config.contains(2)
        assert config.contains(4)
        assert not config.contains(1)
        assert not config.contains(5)

    @pytest.mark.parametrize("kwargs, message", [
        ({"first_station": 3, "last_station": 3}, "first_station must be < last_station"),
        ({"first_station": 5, "last_station": 2}, "first_station must be < last_station"),
        ({"first_station": -1, "last_station": 2}, "first_station must be >= 0"),
        ({"min_players": 0}, "min_players must be >= 1"),
        ({"min_players": 4, "max_players": 3}, "max_players must be >= min_players"),
    ])
    def test_invalid_config_fails_fast(self, kwargs, message):
        with pytest.raises(ConfigError) as exc_info:
            GameConfig(**kwargs)
        assert message in exc_info.value.errors

    def test_all_errors_reported(self):
        errors = validate_config(first_station=4, last_station=1, min_players=3, max_players=2)
        assert len(errors) == 2

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            GameConfig(min_players=0)


class TestSeats:
    """Sparse seats vs dense roster."""

    def test_empty_seats(self):
        config = GameConfig(min_players=1, max_players=3)
        assert empty_seats(config) == (None, None, None)

    def test_compact_seats_keeps_order(self):
        seats = (None, Player("Bob", 1), None, Player("Ann", 1))
        assert compact_seats(seats) == (Player("Bob", 1), Player("Ann", 1))

    def test_compact_all_empty(self):
        assert compact_seats((None, None)) == ()

    def test_setup_views(self, setup_state):
        assert setup_state.tag == Tag.SETUP
        assert setup_state.roster_size == 2
        assert setup_state.can_start
        assert [p.name for p in setup_state.roster] == ["Ann", "Cy"]
        assert setup_state.players == setup_state.seats

    def test_with_seat_returns_new_state(self, setup_state):
        new_state = setup_state.with_seat(1, Player("Bob", 1))

        assert isinstance(new_state, SetupState)
        assert new_state.seats[1] == Player("Bob", 1)
        assert setup_state.seats[1] is None


class TestRosterStates:

    def test_current_player(self, turn_state):
        assert turn_state.current == Player("Bob", 3)
        assert turn_state.num_players == 3

    def test_config_fields_exposed(self, turn_state):
        assert turn_state.first_station == 1
        assert turn_state.last_station == 5
        assert turn_state.min_players == 2
        assert turn_state.max_players == 3

    def test_tags(self, begin_state, turn_state, turn_result_state, over_state):
        assert begin_state.tag == Tag.BEGIN
        assert turn_state.tag == Tag.TURN
        assert turn_result_state.tag == Tag.TURN_RESULT
        assert over_state.tag == Tag.OVER
