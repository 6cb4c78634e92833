"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Manages sessions
3. Builds the public view of a state (secret hidden until OVER)

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
and never raises for bad input: errors come back as ErrorResponse.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from .schemas import (
    # Requests
    CreateSessionRequest,
    ActionRequest,
    KeyPressRequest,
    # Responses
    SessionResponse,
    ActionResponse,
    LegalActionsResponse,
    ErrorResponse,
    # Shared
    GameConfigModel,
    GameView,
    PlayerInfo,
    SeatInfo,
    # Enums
    ActionName,
    ErrorCode,
    GamePhase,
)
from ..engine_core import (
    Action,
    ActionResult,
    ConfigError,
    GameConfig,
    GameState,
    Tag,
    UnknownActionError,
    legal_actions,
)
from ..session import SessionManager, Session, GameLoop, key_name, render_text

logger = logging.getLogger(__name__)


def build_view(state: GameState) -> GameView:
    """Public view of a state. The secret station is revealed only at OVER."""
    view = GameView(
        tag=GamePhase(state.tag.value),
        first_station=state.first_station,
        last_station=state.last_station,
        min_players=state.min_players,
        max_players=state.max_players,
        text=render_text(state),
    )

    if state.tag == Tag.SETUP:
        view.seats = [
            SeatInfo(seat=i, name=player.name if player else None)
            for i, player in enumerate(state.seats)
        ]
        view.can_start = state.can_start

    if state.tag in (Tag.TURN, Tag.TURN_RESULT, Tag.OVER):
        view.players = [
            PlayerInfo(
                name=player.name,
                station=player.station,
                is_current_turn=i == state.current_player,
            )
            for i, player in enumerate(state.players)
        ]
        view.current_player = state.current_player

    if state.tag == Tag.OVER:
        view.winner = PlayerInfo(name=state.winner.name, station=state.winner.station)
        view.secret_station = state.secret_station

    return view


def action_to_request(action: Action) -> ActionRequest:
    """Wire form of an engine action."""
    return ActionRequest(
        type=ActionName(action.action_type.value),
        seat=action.payload.seat,
        name=action.payload.name,
    )


def _config_model(config: GameConfig) -> GameConfigModel:
    return GameConfigModel.model_validate(config)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        response = service.apply_action(session.session_id, ActionRequest(type="START_SETUP"))
        response = service.press_key(session.session_id, KeyPressRequest(key="Enter"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    default_config: GameConfig = field(default_factory=GameConfig)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """Create a new game session in the BEGIN state."""
        try:
            if request.config:
                config = GameConfig(**request.config.model_dump())
            else:
                config = self.default_config
        except ConfigError as e:
            logger.warning("Rejected config: %s", e)
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVALID_CONFIG,
                details={"errors": e.errors},
            )

        rng = random.Random(request.seed) if request.seed is not None else None
        session = self.session_manager.create_session(config, rng=rng)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session status and view."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_response(session)

    def apply_action(self, session_id: str, request: ActionRequest) -> ActionResponse | ErrorResponse:
        """Feed one engine input to a session."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        try:
            action = Action.from_dict(request.to_wire())
        except UnknownActionError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.INVALID_ACTION)

        result = session.dispatch(action)
        return self._action_response(session, action, result)

    def press_key(self, session_id: str, request: KeyPressRequest) -> ActionResponse | ErrorResponse:
        """Map a key press to an action for the current phase and apply it."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        loop = GameLoop(session)
        key = key_name(request.key, request.shift)
        action = loop.bindings.action_for(key, session.game_state)
        if action is None:
            return ErrorResponse(
                error=f"No binding for key {key!r}",
                error_code=ErrorCode.UNKNOWN_KEY,
                details={"keys": loop.bindings.keys},
            )

        result = session.dispatch(action)
        return self._action_response(session, action, result)

    def legal_actions(self, session_id: str) -> LegalActionsResponse | ErrorResponse:
        """List the actions that would change the session's state."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        return LegalActionsResponse(
            session_id=session_id,
            tag=GamePhase(session.game_state.tag.value),
            actions=[action_to_request(a) for a in legal_actions(session.game_state)],
        )

    def restart(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Throw away the current match and go back to BEGIN."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.restart()
        return self._session_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session. Returns False if it did not exist."""
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def cleanup(self, max_age_seconds: int) -> int:
        return self.session_manager.cleanup_stale_sessions(max_age_seconds)

    def _session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            config=_config_model(session.config),
            view=build_view(session.game_state),
            created_at=session.created_at,
            updated_at=session.updated_at,
        )

    def _action_response(self, session: Session, action: Action, result: ActionResult) -> ActionResponse:
        return ActionResponse(
            session_id=session.session_id,
            action=action_to_request(action),
            changed=result.changed,
            changes=result.state_changes,
            view=build_view(session.game_state),
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )
