"""
FastAPI Application - HTTP surface for a local game client.

Endpoints:
    GET    /api/v1/health                          Health check
    POST   /api/v1/sessions                        Create game session (BEGIN)
    GET    /api/v1/sessions                        List active sessions
    GET    /api/v1/sessions/{id}                   Get session view
    DELETE /api/v1/sessions/{id}                   End session
    POST   /api/v1/sessions/{id}/actions           Apply an engine action
    POST   /api/v1/sessions/{id}/keys              Apply a key press
    GET    /api/v1/sessions/{id}/legal-actions     Actions that change the state
    POST   /api/v1/sessions/{id}/restart           Start a brand-new match

One session is one shared screen: all players sit at the same client.
All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, get_settings
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    ActionRequest,
    KeyPressRequest,
    # Response models
    SessionResponse,
    ActionResponse,
    LegalActionsResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 422,
}


def create_app(service: Optional[APIService] = None, settings: Optional[Settings] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Get Off API",
        description="""
Guess the secret station - a hot-seat party game.

## Game Flow

1. `POST /sessions` creates a session at `BEGIN`
2. `START_SETUP`, then `SET_PLAYER_NAME` per seat, then `START_GAME`
3. On each turn: `MOVE_*` actions, then `GET_OFF`
4. A miss lands in `TURN_RESULT`; `ACKNOWLEDGE` passes the turn
5. A hit lands in `OVER`; `PLAY_AGAIN` or `NEW_GAME`

Actions that make no sense in the current phase are ignored
(`changed=false`), never rejected.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_CONFIG` | Station bounds or player limits are inconsistent |
| `INVALID_ACTION` | Action payload is malformed |
| `UNKNOWN_KEY` | Key press has no binding |
| `VALIDATION_ERROR` | Request body failed validation (422) |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(default_config=settings.game)

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        status_code = ERROR_STATUS.get(error.error_code, 400)
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    def respond(response):
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
        return make_error_response(ErrorResponse(
            error="Request body failed validation",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": errors},
        ))

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Health"],
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="getoff", version=__version__)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid config"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(request: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new game session at BEGIN.

        Omit `config` to use the server's default track.
        """
        removed = api_service.cleanup(settings.session_ttl)
        if removed:
            logger.info("Removed %d stale session(s)", removed)
        return respond(api_service.create_session(request))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session view",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: str = Query("user_ended", description="Reason for ending"),
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.post(
        "/api/v1/sessions/{session_id}/restart",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Discard the match and return to BEGIN",
    )
    async def restart(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.restart(session_id))

    # =========================================================================
    # Game Loop Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/actions",
        response_model=ActionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Malformed action"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game Loop"],
        summary="Apply an engine action",
    )
    async def apply_action(
        session_id: str, request: ActionRequest
    ) -> Union[ActionResponse, JSONResponse]:
        """Apply one action; the response carries the view to render next."""
        return respond(api_service.apply_action(session_id, request))

    @app.post(
        "/api/v1/sessions/{session_id}/keys",
        response_model=ActionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Unbound key"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game Loop"],
        summary="Apply a key press",
    )
    async def press_key(
        session_id: str, request: KeyPressRequest
    ) -> Union[ActionResponse, JSONResponse]:
        """Arrows move, shift+arrows jump to the ends, Enter confirms."""
        return respond(api_service.press_key(session_id, request))

    @app.get(
        "/api/v1/sessions/{session_id}/legal-actions",
        response_model=LegalActionsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="List actions that would change the state",
    )
    async def get_legal_actions(session_id: str) -> Union[LegalActionsResponse, JSONResponse]:
        return respond(api_service.legal_actions(session_id))

    return app
