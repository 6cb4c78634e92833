"""
Engine Core - The turn engine of the secret station game.

The engine is a pure state machine:
1. new_game() creates the BEGIN state for a GameConfig
2. Reducer.apply() maps (state, action) to the next state
3. legal_actions() lists what would change the current state

It performs no I/O and never raises during play.
"""

from .config import GameConfig, ConfigError, validate_config
from .state import (
    GameState,
    Tag,
    Player,
    Seat,
    BeginState,
    SetupState,
    TurnState,
    TurnResultState,
    OverState,
    compact_seats,
)
from .action import Action, ActionType, ActionPayload, ActionResult, UnknownActionError
from .reducer import Reducer, apply_action, new_game, roll_secret_station, with_current_player
from .action_generator import ActionGenerator, legal_actions

__all__ = [
    "GameConfig",
    "ConfigError",
    "validate_config",
    "GameState",
    "Tag",
    "Player",
    "Seat",
    "BeginState",
    "SetupState",
    "TurnState",
    "TurnResultState",
    "OverState",
    "compact_seats",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "UnknownActionError",
    "Reducer",
    "apply_action",
    "new_game",
    "roll_secret_station",
    "with_current_player",
    "ActionGenerator",
    "legal_actions",
]
