"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a local UI client and the engine.
The client renders exclusively from GameView; it never needs the raw state.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- INVALID_CONFIG: Station bounds or player limits are inconsistent
- INVALID_ACTION: Action type is unknown or its payload is malformed
- UNKNOWN_KEY: Key press has no binding
- VALIDATION_ERROR: Request body failed validation (HTTP 422)
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GamePhase(str, Enum):
    """Engine phases as seen by the client."""
    BEGIN = "BEGIN"
    SETUP = "SETUP"
    TURN = "TURN"
    TURN_RESULT = "TURN_RESULT"
    OVER = "OVER"


class ActionName(str, Enum):
    """Input vocabulary of the engine."""
    START_SETUP = "START_SETUP"
    SET_PLAYER_NAME = "SET_PLAYER_NAME"
    START_GAME = "START_GAME"
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    MOVE_TO_FIRST = "MOVE_TO_FIRST"
    MOVE_TO_LAST = "MOVE_TO_LAST"
    GET_OFF = "GET_OFF"
    ACKNOWLEDGE = "ACKNOWLEDGE"
    PLAY_AGAIN = "PLAY_AGAIN"
    NEW_GAME = "NEW_GAME"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_ACTION = "INVALID_ACTION"
    UNKNOWN_KEY = "UNKNOWN_KEY"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GameConfigModel(BaseModel):
    """
    Track bounds and roster limits.

    Bounds are checked by GameConfig; violations come back as INVALID_CONFIG.
    """
    first_station: int = Field(1, description="First station on the track")
    last_station: int = Field(8, description="Last station on the track")
    min_players: int = 2
    max_players: int = 4

    model_config = {"from_attributes": True}


class PlayerInfo(BaseModel):
    """A player on the track."""
    name: str
    station: int
    is_current_turn: bool = False

    model_config = {"from_attributes": True}


class SeatInfo(BaseModel):
    """A roster seat during setup."""
    seat: int
    name: Optional[str] = Field(None, description="None for an empty seat")


class GameView(BaseModel):
    """
    Everything a client needs to render the current screen.

    secret_station is only filled in once the game is over.
    """
    tag: GamePhase
    first_station: int
    last_station: int
    min_players: int
    max_players: int
    seats: list[SeatInfo] = Field(default_factory=list, description="SETUP only")
    players: list[PlayerInfo] = Field(default_factory=list, description="TURN, TURN_RESULT, OVER")
    current_player: Optional[int] = None
    winner: Optional[PlayerInfo] = None
    secret_station: Optional[int] = None
    can_start: Optional[bool] = Field(None, description="SETUP only: enough players seated")
    text: str = Field("", description="Plain-text rendering of the screen")


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a game session."""
    config: Optional[GameConfigModel] = Field(None, description="Defaults from the environment")
    seed: Optional[int] = Field(None, description="Seed for the secret station draw")


class ActionRequest(BaseModel):
    """An engine input."""
    type: ActionName
    seat: Optional[int] = Field(None, description="SET_PLAYER_NAME only")
    name: Optional[str] = Field(None, description="SET_PLAYER_NAME only; blank clears the seat")

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.seat is not None:
            data["seat"] = self.seat
        if self.name is not None:
            data["name"] = self.name
        return data


class KeyPressRequest(BaseModel):
    """A physical key press, mapped to an action by the server."""
    key: str = Field(..., description="ArrowLeft, ArrowRight or Enter")
    shift: bool = False


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """A session and its current view."""
    session_id: str
    config: GameConfigModel
    view: GameView
    created_at: float
    updated_at: float
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Result of applying an action or key press."""
    session_id: str
    action: ActionRequest = Field(..., description="The action that was applied")
    changed: bool
    changes: list[str] = Field(default_factory=list)
    view: GameView


class LegalActionsResponse(BaseModel):
    """Actions that would change the current state."""
    session_id: str
    tag: GamePhase
    actions: list[ActionRequest]


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
