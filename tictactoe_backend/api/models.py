"""Requests and Response models"""

from datetime import datetime
from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, StrictInt, field_validator

from tictactoe_backend.core.exceptions import InvalidRequestError
from tictactoe_backend.core.models import GameView, StatusView
from tictactoe_backend.core.shared_types import GameStatus, Player
from tictactoe_backend.game.board import BOARD_SIZE


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    player: Player
    # strict: JSON true/false, floats and numeric strings are not board positions
    position: StrictInt

    @field_validator("player", mode="before")
    @classmethod
    def validate_player(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequestError("Player is required (X or O)")

        symbol = value.strip().upper()
        if symbol not in Player.__members__:
            raise InvalidRequestError("Player must be 'X' or 'O'")
        return symbol

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Position must be between 0 and {BOARD_SIZE - 1}."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: UUID
    board: list[str]
    current_turn: Optional[Player]
    status: GameStatus
    winner: Optional[Player]
    created_at: datetime

    @classmethod
    def from_view(cls, view: GameView) -> Self:
        """Empty cells go over the wire as empty strings."""
        return cls(
            id=view.id,
            board=[cell.value for cell in view.board],
            current_turn=view.current_turn,
            status=view.status,
            winner=view.winner,
            created_at=view.created_at,
        )


class StatusResponse(BaseModel):
    id: UUID
    status: GameStatus
    winner: Optional[Player]
    current_turn: Optional[Player]

    @classmethod
    def from_view(cls, view: StatusView) -> Self:
        return cls(
            id=view.id,
            status=view.status,
            winner=view.winner,
            current_turn=view.current_turn,
        )


class GameListResponse(BaseModel):
    game_ids: list[UUID]


class HealthResponse(BaseModel):
    message: str = "Healthy"


class ErrorResponse(BaseModel):
    error: str
    code: Optional[str] = None
