"""Implementation of GameRegistry keeping all games in process memory.

Locking
----
* `_index_lock` only guards the id -> slot mapping. It is held for the dict insert / lookup and released
  before any game is touched.
* Every game lives in its own `_GameSlot` with a dedicated lock. Reads and writes of one game are
  serialized on that lock, so two moves on the same game can never interleave.
* The index lock is never acquired while a slot lock is held, so the two levels cannot deadlock.
  Operations on different games only ever share the (briefly held) index lock.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, TypeVar
from uuid import UUID, uuid4

from tictactoe_backend.core.exceptions import GameNotFoundError
from tictactoe_backend.core.models import GameView
from tictactoe_backend.game.game import Game

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _GameSlot:
    game: Game
    lock: threading.Lock = field(default_factory=threading.Lock)


class InMemoryGameRegistry:
    """Games are kept for the lifetime of the process (nothing is ever evicted)."""

    def __init__(self) -> None:
        self._slots: dict[UUID, _GameSlot] = {}
        self._index_lock = threading.Lock()

    def __len__(self) -> int:
        with self._index_lock:
            return len(self._slots)

    def __contains__(self, game_id: object) -> bool:
        with self._index_lock:
            return game_id in self._slots

    def create_game(self) -> tuple[UUID, GameView]:
        """Store new game and return the newly created game ID + initial state."""
        game_id = uuid4()
        slot = _GameSlot(Game.new_game(game_id))
        # Nobody else can see the slot yet, so the snapshot needs no slot lock
        view = slot.game.to_view()
        with self._index_lock:
            self._slots[game_id] = slot
            game_count = len(self._slots)
        logger.debug("Registered game %s (%d games in registry)", game_id, game_count)
        return game_id, view

    def get_game(self, game_id: UUID) -> GameView | None:
        """Get a snapshot of the game by ID, if it exists."""
        slot = self._find_slot(game_id)
        if slot is None:
            return None
        with slot.lock:
            return slot.game.to_view()

    def mutate_game(self, game_id: UUID, fn: Callable[[Game], T]) -> T:
        """
        Apply `fn` to the stored game while holding that game's lock.
        ----

        Whatever `fn` returns or raises is passed through unchanged.
        """
        slot = self._find_slot(game_id)
        if slot is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        with slot.lock:
            return fn(slot.game)

    def list_game_ids(self) -> list[UUID]:
        """dicts keep insertion order, so this is creation order."""
        with self._index_lock:
            return list(self._slots.keys())

    def _find_slot(self, game_id: UUID) -> _GameSlot | None:
        with self._index_lock:
            return self._slots.get(game_id)
