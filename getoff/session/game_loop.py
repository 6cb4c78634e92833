"""
Game Loop - Turns physical key presses into engine actions.

The loop:
1. Presentation layer renders the session's current state
2. A key is pressed (arrow, shift+arrow, Enter)
3. The key is mapped to an action for the current phase
4. The action is dispatched and the new state is rendered
5. Repeat

Enter is the confirm key and means different things per phase.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..engine_core.state import GameState, Tag
from ..engine_core.action import Action, ActionResult

if TYPE_CHECKING:
    from .manager import Session


LEFT = "ArrowLeft"
RIGHT = "ArrowRight"
SHIFT_LEFT = "Shift+ArrowLeft"
SHIFT_RIGHT = "Shift+ArrowRight"
ENTER = "Enter"


def key_name(key: str, shift: bool = False) -> str:
    """Combine a key and the shift modifier into one binding name."""
    if shift and not key.startswith("Shift+"):
        return f"Shift+{key}"
    return key


def _default_movement() -> dict[str, Action]:
    return {
        LEFT: Action.move_left(),
        RIGHT: Action.move_right(),
        SHIFT_LEFT: Action.move_to_first(),
        SHIFT_RIGHT: Action.move_to_last(),
    }


def _default_confirm() -> dict[Tag, Action]:
    return {
        Tag.BEGIN: Action.start_setup(),
        Tag.SETUP: Action.start_game(),
        Tag.TURN: Action.get_off(),
        Tag.TURN_RESULT: Action.acknowledge(),
        Tag.OVER: Action.play_again(),
    }


@dataclass
class KeyBindings:
    """
    Key -> action mapping.

    Movement keys map to the same action in every phase (the engine
    ignores them outside TURN). The confirm key is looked up by phase.
    """
    movement: dict[str, Action] = field(default_factory=_default_movement)
    confirm_key: str = ENTER
    confirm: dict[Tag, Action] = field(default_factory=_default_confirm)

    def action_for(self, key: str, state: GameState) -> Action | None:
        """Return the action bound to key in this state, or None."""
        if key == self.confirm_key:
            return self.confirm.get(state.tag)
        return self.movement.get(key)

    @property
    def keys(self) -> list[str]:
        return list(self.movement) + [self.confirm_key]


class GameLoop:
    """
    Drives a session from key presses.

    Usage:
        loop = GameLoop(session)
        result = loop.press("ArrowRight")
        result = loop.press("ArrowRight", shift=True)
        result = loop.press("Enter")
    """

    def __init__(self, session: Session, bindings: KeyBindings | None = None):
        self.session = session
        self.bindings = bindings or KeyBindings()

    @property
    def state(self) -> GameState:
        return self.session.game_state

    def press(self, key: str, shift: bool = False) -> ActionResult | None:
        """
        Handle a key press.

        Returns None for unbound keys, otherwise the dispatch result.
        """
        action = self.bindings.action_for(key_name(key, shift), self.state)
        if action is None:
            return None
        return self.session.dispatch(action)

    def set_name(self, seat: int, name: str) -> ActionResult:
        """Text entry for a seat during setup."""
        return self.session.dispatch(Action.set_player_name(seat, name))
