"""
Session Management - Holding the latest state and feeding inputs to it.

A session:
1. Starts at BEGIN for a GameConfig
2. Receives actions (directly or from key presses)
3. Replaces its state with the reducer's result
4. Is discarded when the players are done

Sessions are in-memory only.
"""

from .manager import SessionManager, Session, SessionState, HistoryEntry
from .game_loop import GameLoop, KeyBindings, key_name
from .render import render_text

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "HistoryEntry",
    "GameLoop",
    "KeyBindings",
    "key_name",
    "render_text",
]
