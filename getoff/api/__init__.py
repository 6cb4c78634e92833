"""
API Layer - HTTP interface for a local game client.

Provides:
- Pydantic request/response schemas
- APIService (framework-agnostic business logic)
- FastAPI app factory

Run with: uvicorn getoff.api.app:create_app --factory
"""

from .schemas import (
    CreateSessionRequest,
    ActionRequest,
    KeyPressRequest,
    SessionResponse,
    ActionResponse,
    LegalActionsResponse,
    GameView,
    PlayerInfo,
    SeatInfo,
    ErrorResponse,
    ErrorCode,
)
from .service import APIService, build_view
from .app import create_app

__all__ = [
    "CreateSessionRequest",
    "ActionRequest",
    "KeyPressRequest",
    "SessionResponse",
    "ActionResponse",
    "LegalActionsResponse",
    "GameView",
    "PlayerInfo",
    "SeatInfo",
    "ErrorResponse",
    "ErrorCode",
    "APIService",
    "build_view",
    "create_app",
]
