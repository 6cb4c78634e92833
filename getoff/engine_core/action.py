"""
Action System - Inputs to the engine and the result of applying them.

Actions represent everything a player can ask for:
1. Setup (open the roster, name a seat, start the game)
2. Movement along the track
3. Getting off the train
4. Round control (acknowledge a miss, play again, new game)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UnknownActionError(ValueError):
    """Raised when a wire action names no known action type."""


class ActionType(Enum):
    """Types of actions in the system."""
    # Setup
    START_SETUP = "START_SETUP"
    SET_PLAYER_NAME = "SET_PLAYER_NAME"
    START_GAME = "START_GAME"

    # Movement (current player only)
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    MOVE_TO_FIRST = "MOVE_TO_FIRST"
    MOVE_TO_LAST = "MOVE_TO_LAST"

    # Turn end
    GET_OFF = "GET_OFF"
    ACKNOWLEDGE = "ACKNOWLEDGE"

    # Round control
    PLAY_AGAIN = "PLAY_AGAIN"
    NEW_GAME = "NEW_GAME"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action.

    Only SET_PLAYER_NAME carries one; every other action uses the
    empty payload.
    """
    seat: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class Action:
    """A complete input to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def start_setup(cls) -> Action:
        return cls(ActionType.START_SETUP)

    @classmethod
    def set_player_name(cls, seat: int, name: str) -> Action:
        """Factory for naming (or clearing, with a blank name) a seat."""
        return cls(
            action_type=ActionType.SET_PLAYER_NAME,
            payload=ActionPayload(seat=seat, name=name),
        )

    @classmethod
    def start_game(cls) -> Action:
        return cls(ActionType.START_GAME)

    @classmethod
    def move_left(cls) -> Action:
        return cls(ActionType.MOVE_LEFT)

    @classmethod
    def move_right(cls) -> Action:
        return cls(ActionType.MOVE_RIGHT)

    @classmethod
    def move_to_first(cls) -> Action:
        return cls(ActionType.MOVE_TO_FIRST)

    @classmethod
    def move_to_last(cls) -> Action:
        return cls(ActionType.MOVE_TO_LAST)

    @classmethod
    def get_off(cls) -> Action:
        return cls(ActionType.GET_OFF)

    @classmethod
    def acknowledge(cls) -> Action:
        return cls(ActionType.ACKNOWLEDGE)

    @classmethod
    def play_again(cls) -> Action:
        return cls(ActionType.PLAY_AGAIN)

    @classmethod
    def new_game(cls) -> Action:
        return cls(ActionType.NEW_GAME)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Action:
        """
        Parse the wire form: {"type": "SET_PLAYER_NAME", "seat": 0, "name": "Ann"}.

        Raises UnknownActionError if the type is missing or unknown.
        """
        type_name = str(data.get("type", "")).strip().upper()
        try:
            action_type = ActionType(type_name)
        except ValueError:
            raise UnknownActionError(f"Unknown action type: {data.get('type')!r}") from None

        if action_type == ActionType.SET_PLAYER_NAME:
            seat = data.get("seat")
            if isinstance(seat, bool) or not isinstance(seat, int):
                raise UnknownActionError("SET_PLAYER_NAME needs an integer seat")
            return cls.set_player_name(seat, data.get("name") or "")
        return cls(action_type)

    def to_dict(self) -> dict[str, Any]:
        """Wire form of the action."""
        data: dict[str, Any] = {"type": self.action_type.value}
        if self.action_type == ActionType.SET_PLAYER_NAME:
            data["seat"] = self.payload.seat
            data["name"] = self.payload.name
        return data


@dataclass
class ActionResult:
    """
    Result of applying an action.

    The engine never fails: an out-of-phase action simply leaves the
    state unchanged, which is reported with changed=False.
    """
    new_state: Any  # GameState
    changed: bool
    previous_tag: Any = None  # Tag

    # Human-readable changes, for logs and UI
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def stay(cls, state: Any) -> ActionResult:
        """The action did nothing in this state."""
        return cls(new_state=state, changed=False, previous_tag=state.tag)

    @classmethod
    def success_with_state(
        cls,
        previous: Any,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a result for a transition."""
        return cls(
            new_state=state,
            changed=True,
            previous_tag=previous.tag,
            state_changes=changes or [],
        )
