"""
Boundary layer data model(s).

Read-only snapshots of a Game. The registry hands these out instead of the live Game,
so nothing outside the registry's lock ever holds a reference to mutable game state.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from tictactoe_backend.core.shared_types import Cell, GameStatus, Player


@dataclass(frozen=True)
class GameView:
    """Snapshot of everything a client may see about a game."""

    id: UUID
    board: tuple[Cell, ...]
    current_turn: Optional[Player]
    status: GameStatus
    winner: Optional[Player]
    created_at: datetime

    def to_status_view(self) -> "StatusView":
        return StatusView(
            id=self.id,
            status=self.status,
            winner=self.winner,
            current_turn=self.current_turn,
        )


@dataclass(frozen=True)
class StatusView:
    """Outcome of a game. `current_turn` is None once the game has ended."""

    id: UUID
    status: GameStatus
    winner: Optional[Player]
    current_turn: Optional[Player]
