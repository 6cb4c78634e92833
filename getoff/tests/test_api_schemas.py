"""
Tests for API Pydantic schemas.

Validates that:
- Request/response models serialize correctly
- Enums serialize to their wire names
- Invalid requests are rejected by validation
"""

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_action_request_enum(self):
        from getoff.api.schemas import ActionRequest, ActionName

        request = ActionRequest(type="MOVE_LEFT")

        assert request.type == ActionName.MOVE_LEFT
        assert request.to_wire() == {"type": "MOVE_LEFT"}

    def test_action_request_with_payload(self):
        from getoff.api.schemas import ActionRequest

        request = ActionRequest(type="SET_PLAYER_NAME", seat=0, name="Ann")
        assert request.to_wire() == {"type": "SET_PLAYER_NAME", "seat": 0, "name": "Ann"}

    def test_action_request_rejects_unknown_type(self):
        from getoff.api.schemas import ActionRequest

        with pytest.raises(ValidationError):
            ActionRequest(type="FLY")

    def test_config_model_leaves_bounds_to_engine(self):
        from getoff.api.schemas import GameConfigModel

        model = GameConfigModel(first_station=-1, min_players=0)
        assert model.first_station == -1

        with pytest.raises(ValidationError):
            GameConfigModel(first_station="far")

    def test_config_model_from_dataclass(self):
        from getoff.api.schemas import GameConfigModel
        from getoff.engine_core import GameConfig

        model = GameConfigModel.model_validate(GameConfig(first_station=0, last_station=3))
        assert model.model_dump() == {
            "first_station": 0,
            "last_station": 3,
            "min_players": 2,
            "max_players": 4,
        }

    def test_game_view_serializes(self):
        from getoff.api.schemas import GameView, GamePhase, PlayerInfo

        view = GameView(
            tag=GamePhase.OVER,
            first_station=1,
            last_station=3,
            min_players=2,
            max_players=2,
            players=[
                PlayerInfo(name="Ann", station=3, is_current_turn=True),
                PlayerInfo(name="Bob", station=1),
            ],
            current_player=0,
            winner=PlayerInfo(name="Ann", station=3),
            secret_station=3,
        )

        data = view.model_dump(mode="json")
        assert data["tag"] == "OVER"
        assert data["winner"]["name"] == "Ann"
        assert data["players"][1]["is_current_turn"] is False
        assert data["seats"] == []

    def test_action_response_requires_action(self):
        from getoff.api.schemas import ActionResponse, GameView, GamePhase

        view = GameView(tag=GamePhase.BEGIN, first_station=1, last_station=3, min_players=2, max_players=2)

        with pytest.raises(ValidationError):
            ActionResponse(session_id="abc", changed=False, view=view)

    def test_error_response_schema(self):
        from getoff.api.schemas import ErrorResponse, ErrorCode

        error = ErrorResponse(
            error="Session abc not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

        data = error.model_dump(mode="json")
        assert data["error_code"] == "SESSION_NOT_FOUND"
        assert data["api_version"] == "v1"
        assert data["details"] is None
