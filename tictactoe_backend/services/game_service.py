"""Orchestration of communication from API router to business logic and the game registry (and the reverse direction)."""

import logging
from uuid import UUID

from tictactoe_backend.api.models import (
    GameResponse,
    MoveRequest,
    StatusResponse,
)
from tictactoe_backend.core.exceptions import GameNotFoundError
from tictactoe_backend.core.models import GameView
from tictactoe_backend.game.game import Game
from tictactoe_backend.registry.repository import GameRegistry

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for tic tac toe."""

    def __init__(self, registry: GameRegistry) -> None:
        self.registry = registry

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """A client requested a fresh game."""
        game_id, view = self.registry.create_game()
        logger.info("Created game %s", game_id)
        return GameResponse.from_view(view)

    def get_game_state(self, game_id: UUID) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        return GameResponse.from_view(self._fetch_game(game_id))

    def make_move(self, game_id: UUID, request: MoveRequest) -> GameResponse:
        """Make a move attempt. Move errors raised by the Game propagate unchanged."""

        def _apply(game: Game) -> GameView:
            return game.apply_move(request.player, request.position)

        view = self.registry.mutate_game(game_id, _apply)
        logger.debug(
            "Game %s: %s played position %d", game_id, request.player, request.position
        )
        if view.status.is_terminal:
            logger.info("Game %s finished with status %s", game_id, view.status)
        return GameResponse.from_view(view)

    def get_status(self, game_id: UUID) -> StatusResponse:
        """Status + winner (if any) of the game."""
        view = self._fetch_game(game_id)
        return StatusResponse.from_view(view.to_status_view())

    def list_games(self) -> list[UUID]:
        """Show all recorded games."""
        return self.registry.list_game_ids()

    # -- Internal helpers --
    def _fetch_game(self, game_id: UUID) -> GameView:
        """Attempt to find the game in the registry and raise error if it fails."""
        view = self.registry.get_game(game_id)
        if view is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return view
