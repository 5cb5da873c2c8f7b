"""
Type definitions used across layers

Values are the strings that end up on the wire, so there is a single representation per concept.
"""

from enum import StrEnum


class Player(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Cell(StrEnum):
    """Content of a single board slot. An empty slot serializes as an empty string."""

    EMPTY = ""
    X = "X"
    O = "O"  # noqa: E741

    @classmethod
    def of(cls, player: Player) -> "Cell":
        return cls(player.value)


class GameStatus(StrEnum):
    IN_PROGRESS = "InProgress"
    DRAW = "Draw"
    X_WON = "XWon"
    O_WON = "OWon"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


# Which status a player reaches by completing a line
WINNING_STATUS: dict[Player, GameStatus] = {
    Player.X: GameStatus.X_WON,
    Player.O: GameStatus.O_WON,
}
