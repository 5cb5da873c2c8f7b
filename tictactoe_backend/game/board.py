"""The Game board implements all rules that only depend on the `cells` (the configuration of X's and O's)"""

from dataclasses import dataclass, field
from typing import Optional

from tictactoe_backend.core.shared_types import Cell, Player

# Board is always 3x3, read row-major: 0,1,2 is the top row and 6,7,8 the bottom row
BOARD_SIZE = 9

# The 8 triples that win the game
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass
class Board:
    cells: list[Cell] = field(default_factory=lambda: [Cell.EMPTY] * BOARD_SIZE)

    def is_empty(self, position: int) -> bool:
        return self.cells[position] == Cell.EMPTY

    def place(self, player: Player, position: int) -> None:
        self.cells[position] = Cell.of(player)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def has_line(self, player: Player) -> bool:
        """True if any of the winning lines is entirely filled with the player's symbol."""
        symbol = Cell.of(player)
        return any(
            all(self.cells[idx] == symbol for idx in line) for line in WINNING_LINES
        )

    def winner(self) -> Optional[Player]:
        """X is checked before O. Both cannot hold when moves are applied one at a time."""
        for player in (Player.X, Player.O):
            if self.has_line(player):
                return player
        return None

    def snapshot(self) -> tuple[Cell, ...]:
        return tuple(self.cells)
