"""
The Game class is the entrypoint into the domain layer for the registry and service layer.
It is responsible for enforcing the rules of a single match: whose turn it is, which cells are free,
and when the game has been won or drawn.

A Game knows nothing about other games or about how it is stored. The registry serializes access to it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Self
from uuid import UUID

from tictactoe_backend.core.exceptions import (
    CellOccupiedError,
    InvalidPlayerError,
    NotActiveError,
    OutOfRangeError,
    WrongTurnError,
)
from tictactoe_backend.core.models import GameView, StatusView
from tictactoe_backend.core.shared_types import WINNING_STATUS, GameStatus, Player
from tictactoe_backend.game.board import BOARD_SIZE, Board


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY REGISTRY / SERVICE ---

    id: UUID
    board: Board = field(default_factory=Board)
    current_turn: Player = Player.X
    status: GameStatus = GameStatus.IN_PROGRESS
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def new_game(cls, game_id: UUID) -> Self:
        """Empty board, X to move."""
        return cls(id=game_id)

    @property
    def winner(self) -> Optional[Player]:
        match self.status:
            case GameStatus.X_WON:
                return Player.X
            case GameStatus.O_WON:
                return Player.O
            case _:
                return None

    def apply_move(self, player: Player | str, position: int) -> GameView:
        """
        Attempt to place the player's symbol on the board
        -----

        1. the game must still be in progress
        2. the player must be X or O
        3. the position must be on the board
        4. it must be the player's turn
        5. the cell must be empty

        All checks happen before anything is written, so a rejected move leaves the game untouched.
        After writing, the status is recomputed BEFORE the turn passes, and the turn only passes while the game is still in progress.
        """
        # make sure the game is (still) in progress
        if self.status != GameStatus.IN_PROGRESS:
            raise NotActiveError("Game is already complete")

        mover = self._parse_player(player)
        self._assert_on_board(position)
        self._assert_your_turn(mover)

        if not self.board.is_empty(position):
            raise CellOccupiedError("Cell already occupied")

        # update the board
        self.board.place(mover, position)

        # update the Game Status / check for end condition
        self._update_game_status()

        # pass the turn (only if nobody won and the board is not full)
        if self.status == GameStatus.IN_PROGRESS:
            self.current_turn = self.current_turn.opponent

        return self.to_view()

    def to_view(self) -> GameView:
        return GameView(
            id=self.id,
            board=self.board.snapshot(),
            current_turn=self._turn_if_active(),
            status=self.status,
            winner=self.winner,
            created_at=self.created_at,
        )

    def status_view(self) -> StatusView:
        return self.to_view().to_status_view()

    # -- PRIVATE HELPERS ---
    def _turn_if_active(self) -> Optional[Player]:
        """Whose turn it is has no meaning once the game has ended."""
        return self.current_turn if self.status == GameStatus.IN_PROGRESS else None

    @staticmethod
    def _parse_player(player: Any) -> Player:
        """Accept the Player enum or its symbol in any casing (surrounding whitespace is ignored)."""
        if not isinstance(player, str):
            raise InvalidPlayerError("Player must be 'X' or 'O'")
        try:
            return Player(player.strip().upper())
        except ValueError:
            raise InvalidPlayerError("Player must be 'X' or 'O'") from None

    @staticmethod
    def _assert_on_board(position: Any) -> None:
        # bool is a subclass of int, but True/False are not board positions
        if (
            not isinstance(position, int)
            or isinstance(position, bool)
            or not 0 <= position < BOARD_SIZE
        ):
            raise OutOfRangeError(f"Position must be between 0 and {BOARD_SIZE - 1}")

    def _assert_your_turn(self, player: Player) -> None:
        if player != self.current_turn:
            raise WrongTurnError(f"It is not {player}'s turn")

    def _update_game_status(self) -> None:
        """A completed line wins (X checked first). A full board without a line is a draw."""
        winner = self.board.winner()
        if winner is not None:
            self._change_status(WINNING_STATUS[winner])
        elif self.board.is_full():
            self._change_status(GameStatus.DRAW)

    def _change_status(self, new_status: GameStatus) -> None:
        self.status = new_status
