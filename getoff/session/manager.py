"""
Session Manager - Creates and manages game sessions.

A session is the presentation side of the state-passing loop:
it holds the latest GameState, feeds each input through the reducer,
and replaces the held state with the result. Nothing is mutated in
place and nothing is persisted.

LIFECYCLE:
1. Caller creates a session with a GameConfig -> BEGIN state
2. Inputs are dispatched one at a time; each replaces game_state
3. restart() throws the match away and starts a new BEGIN state
4. end_session() removes the session and its state from memory
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import random
import time
import uuid

from ..engine_core.config import GameConfig
from ..engine_core.state import GameState, Tag
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)

MAX_HISTORY = 500


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    ENDED = "ended"
    ABANDONED = "abandoned"


@dataclass
class HistoryEntry:
    """An action that changed the game state."""
    action: Action
    from_tag: Tag
    to_tag: Tag
    changes: list[str]
    timestamp: float


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The match config
    - The latest game state
    - The reducer (and its random source)
    - A bounded history of state-changing actions
    """
    session_id: str
    config: GameConfig
    game_state: GameState
    reducer: Reducer
    created_at: float
    updated_at: float

    state: SessionState = SessionState.ACTIVE
    history: list[HistoryEntry] = field(default_factory=list)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply an action to the held state and keep the result.

        Inputs must be dispatched one at a time per session.
        """
        result = self.reducer.step(self.game_state, action)
        if not result.changed:
            logger.debug(
                "Session %s: %s ignored in %s",
                self.session_id, action.action_type.value, self.game_state.tag.value,
            )
            return result

        self.game_state = result.new_state
        self.updated_at = time.time()
        self._record(action, result)

        logger.info(
            "Session %s: %s -> %s (%s)",
            self.session_id,
            result.previous_tag.value,
            result.new_state.tag.value,
            "; ".join(result.state_changes),
        )
        return result

    def restart(self) -> GameState:
        """Discard the current match and start over at BEGIN."""
        self.game_state = self.reducer.new_game(self.config)
        self.updated_at = time.time()
        self.history.clear()
        logger.info("Session %s restarted", self.session_id)
        return self.game_state

    def _record(self, action: Action, result: ActionResult):
        self.history.append(HistoryEntry(
            action=action,
            from_tag=result.previous_tag,
            to_tag=result.new_state.tag,
            changes=list(result.state_changes),
            timestamp=self.updated_at,
        ))
        if len(self.history) > MAX_HISTORY:
            del self.history[: len(self.history) - MAX_HISTORY]


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from configs
    - Track active sessions
    - Clean up stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            config: Track and roster limits (defaults if not given)
            rng: Random source for secret stations (seed it for replays)

        Returns:
            New Session in the BEGIN state
        """
        config = config or GameConfig()
        reducer = Reducer(rng=rng) if rng is not None else Reducer()
        now = time.time()

        session = Session(
            session_id=str(uuid.uuid4()),
            config=config,
            game_state=reducer.new_game(config),
            reducer=reducer,
            created_at=now,
            updated_at=now,
        )

        self._sessions[session.session_id] = session
        logger.info(
            "Session %s created (stations %d-%d, %d-%d players)",
            session.session_id,
            config.first_station, config.last_station,
            config.min_players, config.max_players,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns True if the session existed.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        session.state = SessionState.ENDED if reason == "completed" else SessionState.ABANDONED
        session.history.clear()
        logger.info("Session %s ended (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End sessions that have not changed for max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.updated_at > max_age_seconds
        ]

        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
