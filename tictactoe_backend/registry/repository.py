"""Protocol registry (the service only depends on this contract, not on how games are held)"""

from typing import Callable, Protocol, TypeVar
from uuid import UUID

from tictactoe_backend.core.models import GameView
from tictactoe_backend.game.game import Game

T = TypeVar("T")


class GameRegistry(Protocol):
    """Owns every Game and serializes access to each of them."""

    def create_game(self) -> tuple[UUID, GameView]:
        """Store a new game and return its newly allocated ID + initial state."""
        ...

    def get_game(self, game_id: UUID) -> GameView | None:
        """Snapshot of the game, if it exists."""
        ...

    def mutate_game(self, game_id: UUID, fn: Callable[[Game], T]) -> T:
        """Run `fn` on the stored game with exclusive access. Raises GameNotFoundError for an unknown ID."""
        ...

    def list_game_ids(self) -> list[UUID]:
        """IDs of all games, oldest first."""
        ...
