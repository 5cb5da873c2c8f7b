"""Unit tests for tictactoe_backend/game/board.py"""

import pytest

from tictactoe_backend.game.board import BOARD_SIZE, WINNING_LINES, Board
from tictactoe_backend.core.shared_types import Cell, Player


def board_from(symbols: str) -> Board:
    """Board from a 9 character string like 'XO.X.O...' (anything but X/O is an empty cell)."""
    assert len(symbols) == BOARD_SIZE
    return Board([Cell(s) if s in ("X", "O") else Cell.EMPTY for s in symbols])


def test_new_board_is_empty() -> None:
    board = Board()
    assert len(board.cells) == BOARD_SIZE
    assert all(cell == Cell.EMPTY for cell in board.cells)
    assert all(board.is_empty(idx) for idx in range(BOARD_SIZE))
    assert not board.is_full()
    assert board.winner() is None


def test_boards_do_not_share_cells() -> None:
    """default_factory must hand every board its own list"""
    first, second = Board(), Board()
    first.place(Player.X, 4)
    assert second.is_empty(4)


def test_place_writes_player_symbol() -> None:
    board = Board()
    board.place(Player.O, 8)
    assert board.cells[8] == Cell.O
    assert not board.is_empty(8)
    assert board.cells.count(Cell.EMPTY) == BOARD_SIZE - 1


def test_there_are_eight_distinct_lines() -> None:
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8
    assert all(0 <= idx < BOARD_SIZE for line in WINNING_LINES for idx in line)


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_every_line_wins(line: tuple[int, int, int], player: Player) -> None:
    board = Board()
    for idx in line:
        board.place(player, idx)
    assert board.has_line(player)
    assert not board.has_line(player.opponent)
    assert board.winner() == player


def test_two_in_a_row_is_not_a_win() -> None:
    board = board_from("XX.OO....")
    assert board.winner() is None


def test_full_board_without_line() -> None:
    board = board_from("XOXXOOOXX")
    assert board.is_full()
    assert board.winner() is None


def test_x_is_reported_before_o() -> None:
    """Cannot happen during a real game, but evaluation order is fixed."""
    board = board_from("XXXOOO...")
    assert board.winner() == Player.X


def test_snapshot_is_detached_from_board() -> None:
    board = Board()
    snapshot = board.snapshot()
    board.place(Player.X, 0)
    assert snapshot[0] == Cell.EMPTY
    assert isinstance(snapshot, tuple)
