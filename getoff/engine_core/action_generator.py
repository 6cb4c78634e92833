"""
Action Generator - Lists the actions that would change a game state.

The action generator is used by:
1. UI to enable/disable controls
2. The API to report what can be done next

Every action not listed is a no-op in the given state.
"""

from __future__ import annotations

from .state import GameState, Tag
from .action import Action


class ActionGenerator:
    """Generates the useful actions for the current phase."""

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all actions that would change the state.

        SET_PLAYER_NAME is listed once per seat with an empty name
        as a placeholder; the caller fills in the name.
        """
        if state.tag == Tag.BEGIN:
            return [Action.start_setup()]

        if state.tag == Tag.SETUP:
            return self._generate_setup_actions(state)

        if state.tag == Tag.TURN:
            return self._generate_move_actions(state) + [Action.get_off()]

        if state.tag == Tag.TURN_RESULT:
            return [Action.acknowledge()]

        if state.tag == Tag.OVER:
            return [Action.play_again(), Action.new_game()]

        return []

    def _generate_setup_actions(self, state) -> list[Action]:
        actions = [Action.set_player_name(seat, "") for seat in range(len(state.seats))]
        if state.can_start:
            actions.append(Action.start_game())
        return actions

    def _generate_move_actions(self, state) -> list[Action]:
        station = state.current.station
        actions = []
        if state.config.contains(station - 1):
            actions.extend([Action.move_left(), Action.move_to_first()])
        if state.config.contains(station + 1):
            actions.extend([Action.move_right(), Action.move_to_last()])
        return actions


def legal_actions(state: GameState) -> list[Action]:
    """Convenience function to generate the useful actions."""
    return ActionGenerator().generate(state)
