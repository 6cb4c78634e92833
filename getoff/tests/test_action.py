"""
Tests for actions, their wire form and the legal action generator.
"""

import pytest

from ..engine_core.action import Action, ActionType, ActionPayload, UnknownActionError
from ..engine_core.action_generator import legal_actions
from ..engine_core.state import Player


class TestWireForm:
    """Action.from_dict / to_dict."""

    def test_parse_simple_action(self):
        action = Action.from_dict({"type": "MOVE_LEFT"})
        assert action == Action.move_left()

    def test_parse_is_case_insensitive(self):
        assert Action.from_dict({"type": "get_off"}) == Action.get_off()

    def test_parse_set_player_name(self):
        action = Action.from_dict({"type": "SET_PLAYER_NAME", "seat": 2, "name": "Ann"})

        assert action.action_type == ActionType.SET_PLAYER_NAME
        assert action.payload == ActionPayload(seat=2, name="Ann")

    def test_missing_name_means_blank(self):
        action = Action.from_dict({"type": "SET_PLAYER_NAME", "seat": 0})
        assert action.payload.name == ""

    @pytest.mark.parametrize("data", [
        {},
        {"type": "JUMP"},
        {"type": "SET_PLAYER_NAME", "name": "Ann"},
        {"type": "SET_PLAYER_NAME", "seat": "one", "name": "Ann"},
        {"type": "SET_PLAYER_NAME", "seat": True, "name": "Ann"},
    ])
    def test_bad_wire_actions_rejected(self, data):
        with pytest.raises(UnknownActionError):
            Action.from_dict(data)

    def test_to_dict(self):
        assert Action.play_again().to_dict() == {"type": "PLAY_AGAIN"}
        assert Action.set_player_name(1, "Bob").to_dict() == {
            "type": "SET_PLAYER_NAME", "seat": 1, "name": "Bob",
        }

    def test_every_type_has_a_factory(self):
        factories = [
            Action.start_setup(), Action.set_player_name(0, "x"), Action.start_game(),
            Action.move_left(), Action.move_right(), Action.move_to_first(),
            Action.move_to_last(), Action.get_off(), Action.acknowledge(),
            Action.play_again(), Action.new_game(),
        ]
        assert {a.action_type for a in factories} == set(ActionType)


class TestLegalActions:
    """Actions that change the state."""

    def _types(self, state):
        return [a.action_type for a in legal_actions(state)]

    def test_begin(self, begin_state):
        assert self._types(begin_state) == [ActionType.START_SETUP]

    def test_setup_lists_seats_and_start(self, setup_state):
        actions = legal_actions(setup_state)

        seats = [a.payload.seat for a in actions if a.action_type == ActionType.SET_PLAYER_NAME]
        assert seats == [0, 1, 2]
        assert actions[-1] == Action.start_game()

    def test_setup_without_enough_players(self, setup_state):
        state = setup_state.with_seat(0, None)
        assert ActionType.START_GAME not in self._types(state)

    def test_turn_in_the_middle(self, turn_state):
        assert set(self._types(turn_state)) == {
            ActionType.MOVE_LEFT, ActionType.MOVE_TO_FIRST,
            ActionType.MOVE_RIGHT, ActionType.MOVE_TO_LAST,
            ActionType.GET_OFF,
        }

    def test_turn_at_first_station(self, turn_state):
        state = turn_state._copy_with(current_player=0)
        types = self._types(state)

        assert ActionType.MOVE_LEFT not in types
        assert ActionType.MOVE_TO_FIRST not in types
        assert ActionType.MOVE_RIGHT in types

    def test_turn_at_last_station(self, turn_state):
        players = (Player("Ann", 1), Player("Bob", 5), Player("Cy", 5))
        state = turn_state._copy_with(players=players)
        types = self._types(state)

        assert ActionType.MOVE_RIGHT not in types
        assert ActionType.MOVE_TO_LAST not in types
        assert ActionType.GET_OFF in types

    def test_turn_result(self, turn_result_state):
        assert self._types(turn_result_state) == [ActionType.ACKNOWLEDGE]

    def test_over(self, over_state):
        assert self._types(over_state) == [ActionType.PLAY_AGAIN, ActionType.NEW_GAME]

    def test_listed_moves_change_state(self, reducer, turn_state):
        for action in legal_actions(turn_state):
            assert reducer.apply(turn_state, action) != turn_state
