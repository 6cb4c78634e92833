"""
Reducer - Applies actions to game state.

The reducer is the single point of state change.
All transitions go through Reducer.apply().

Design principles:
- Pure function: (state, action) -> new_state
- Total: an action with no handler for the current phase returns the
  state unchanged ("stay"), it is never an error
- The only non-determinism is the secret station draw, which uses the
  reducer's own random.Random so it can be seeded
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import random

from .config import GameConfig
from .state import (
    GameState, Tag, Player,
    BeginState, SetupState, TurnState, TurnResultState, OverState,
    empty_seats,
)
from .action import Action, ActionType, ActionResult


PlayerTransform = Callable[[TurnState, Player], Player]


def roll_secret_station(config: GameConfig, rng: random.Random) -> int:
    """Draw a station uniformly from [first_station, last_station]."""
    return rng.randint(config.first_station, config.last_station)


def new_game(config: GameConfig | None = None, rng: random.Random | None = None) -> BeginState:
    """Create the BEGIN state for a fresh match."""
    config = config or GameConfig()
    rng = rng or random.Random()
    return BeginState(config=config, secret_station=roll_secret_station(config, rng))


# =============================================================================
# Per-player movement transforms
# =============================================================================

def go_left(state: TurnState, player: Player) -> Player:
    if state.config.contains(player.station - 1):
        return player.at(player.station - 1)
    return player


def go_right(state: TurnState, player: Player) -> Player:
    if state.config.contains(player.station + 1):
        return player.at(player.station + 1)
    return player


def go_first(state: TurnState, player: Player) -> Player:
    return player.at(state.first_station)


def go_last(state: TurnState, player: Player) -> Player:
    return player.at(state.last_station)


def with_current_player(state: TurnState, fn: PlayerTransform) -> TurnState:
    """Apply fn to the current player only; everyone else is untouched."""
    players = tuple(
        fn(state, player) if i == state.current_player else player
        for i, player in enumerate(state.players)
    )
    return state._copy_with(players=players)


# =============================================================================
# Reducer
# =============================================================================

@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless apart from the random source - all game state is in
    the GameState values passed through it.
    """
    rng: random.Random = field(default_factory=random.Random)

    def apply(self, state: GameState, action: Action) -> GameState:
        """
        Apply an action to the game state.

        Returns the new state, or the same state if the action
        means nothing in the current phase.
        """
        handler = self._get_handler(state.tag, action.action_type)
        if not handler:
            return state
        return handler(state, action)

    def step(self, state: GameState, action: Action) -> ActionResult:
        """Apply an action and describe what happened."""
        new_state = self.apply(state, action)
        if new_state == state:
            return ActionResult.stay(state)
        return ActionResult.success_with_state(
            state,
            new_state,
            changes=[describe_transition(state, action, new_state)],
        )

    def new_game(self, config: GameConfig | None = None) -> BeginState:
        """Create a fresh BEGIN state using this reducer's random source."""
        return new_game(config, self.rng)

    def _get_handler(self, tag: Tag, action_type: ActionType):
        """Get the handler for a (phase, action) pair."""
        handlers = {
            (Tag.BEGIN, ActionType.START_SETUP): self._handle_start_setup,
            (Tag.SETUP, ActionType.SET_PLAYER_NAME): self._handle_set_player_name,
            (Tag.SETUP, ActionType.START_GAME): self._handle_start_game,
            (Tag.TURN, ActionType.MOVE_LEFT): self._handle_move(go_left),
            (Tag.TURN, ActionType.MOVE_RIGHT): self._handle_move(go_right),
            (Tag.TURN, ActionType.MOVE_TO_FIRST): self._handle_move(go_first),
            (Tag.TURN, ActionType.MOVE_TO_LAST): self._handle_move(go_last),
            (Tag.TURN, ActionType.GET_OFF): self._handle_get_off,
            (Tag.TURN_RESULT, ActionType.ACKNOWLEDGE): self._handle_acknowledge,
            (Tag.OVER, ActionType.PLAY_AGAIN): self._handle_play_again,
            (Tag.OVER, ActionType.NEW_GAME): self._handle_new_game,
        }
        return handlers.get((tag, action_type))

    def _roll(self, config: GameConfig) -> int:
        return roll_secret_station(config, self.rng)

    def _handle_start_setup(self, state: BeginState, action: Action) -> SetupState:
        return SetupState(
            config=state.config,
            secret_station=state.secret_station,
            seats=empty_seats(state.config),
        )

    def _handle_set_player_name(self, state: SetupState, action: Action) -> SetupState:
        """Name a seat, or clear it when the name is blank."""
        seat = action.payload.seat
        if seat is None or not 0 <= seat < len(state.seats):
            return state

        name = (action.payload.name or "").strip()
        if not name:
            return state.with_seat(seat, None)
        return state.with_seat(seat, Player(name=name, station=state.first_station))

    def _handle_start_game(self, state: SetupState, action: Action) -> GameState:
        if not state.can_start:
            return state

        return TurnState(
            config=state.config,
            secret_station=self._roll(state.config),
            players=state.roster,
            current_player=0,
        )

    def _handle_move(self, fn: PlayerTransform):
        def handler(state: TurnState, action: Action) -> TurnState:
            return with_current_player(state, fn)
        return handler

    def _handle_get_off(self, state: TurnState, action: Action) -> GameState:
        """Check the current player's station against the secret."""
        if state.current.station == state.secret_station:
            return OverState(
                config=state.config,
                secret_station=state.secret_station,
                players=state.players,
                current_player=state.current_player,
                winner=state.current,
            )

        return TurnResultState(
            config=state.config,
            secret_station=state.secret_station,
            players=state.players,
            current_player=state.current_player,
        )

    def _handle_acknowledge(self, state: TurnResultState, action: Action) -> TurnState:
        return TurnState(
            config=state.config,
            secret_station=state.secret_station,
            players=state.players,
            current_player=(state.current_player + 1) % state.num_players,
        )

    def _handle_play_again(self, state: OverState, action: Action) -> TurnState:
        """Same roster, everyone back to the first station, new secret."""
        return TurnState(
            config=state.config,
            secret_station=self._roll(state.config),
            players=tuple(player.at(state.first_station) for player in state.players),
            current_player=0,
        )

    def _handle_new_game(self, state: OverState, action: Action) -> BeginState:
        return BeginState(config=state.config, secret_station=self._roll(state.config))


def describe_transition(previous: GameState, action: Action, state: GameState) -> str:
    """Human-readable summary of a transition, for logs and UI."""
    action_type = action.action_type

    if action_type == ActionType.START_SETUP:
        return f"Opened {state.max_players} seats"
    if action_type == ActionType.SET_PLAYER_NAME:
        player = state.seats[action.payload.seat]
        if player is None:
            return f"Cleared seat {action.payload.seat}"
        return f"Seat {action.payload.seat} is {player.name}"
    if action_type == ActionType.START_GAME:
        return f"Game started with {state.num_players} players"
    if action_type in (
        ActionType.MOVE_LEFT, ActionType.MOVE_RIGHT,
        ActionType.MOVE_TO_FIRST, ActionType.MOVE_TO_LAST,
    ):
        return f"{state.current.name} moved to station {state.current.station}"
    if action_type == ActionType.GET_OFF:
        if state.tag == Tag.OVER:
            return f"{state.winner.name} got off at the secret station {state.secret_station}"
        return f"{state.current.name} got off at station {state.current.station}, wrong station"
    if action_type == ActionType.ACKNOWLEDGE:
        return f"{state.current.name}'s turn"
    if action_type == ActionType.PLAY_AGAIN:
        return "New round with the same players"
    if action_type == ActionType.NEW_GAME:
        return "Roster discarded, back to the start"
    return f"{previous.tag.value} -> {state.tag.value}"


def apply_action(state: GameState, action: Action, rng: random.Random | None = None) -> GameState:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rng=rng) if rng is not None else Reducer()
    return reducer.apply(state, action)
