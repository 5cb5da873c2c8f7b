"""
Custom exceptions shared across layers.

Every exception derives from GameError, so the API layer can catch one top-level type.
Each concrete error carries a short `code` so callers can tell the failure kinds apart without parsing messages.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game."""

    code: str = "game_error"


# --- MOVE VALIDATION (raised by the Game) ---
class MoveError(GameError):
    """A move was rejected. The game is left exactly as it was before the attempt."""

    code = "move_error"


class NotActiveError(MoveError):
    code = "not_active"


class WrongTurnError(MoveError):
    code = "wrong_turn"


class OutOfRangeError(MoveError):
    code = "out_of_range"


class InvalidPlayerError(MoveError):
    code = "invalid_player"


class CellOccupiedError(MoveError):
    code = "cell_occupied"


# --- REGISTRY ---
class RegistryError(GameError):
    code = "registry_error"


class GameNotFoundError(RegistryError):
    code = "not_found"


# --- API ---
class InvalidRequestError(GameError, ValueError):
    """Request payload could not be interpreted.

    Also a ValueError, so pydantic validators raising it produce a regular ValidationError.
    """

    code = "invalid_request"
