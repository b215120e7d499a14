"""Shared fixtures and helpers for the Connect Four tests."""

import numpy as np
import pytest

from c4search.debug import debug, DebugLevel
from c4search.game.board import Board
from c4search.utils import ROWS, COLS, CONNECT_N, Player


@pytest.fixture(autouse=True)
def reset_debug():
    """Keep log output quiet and undo any configuration a test makes."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file='')


@pytest.fixture
def board():
    return Board()


def play_moves(board, moves, first=Player.ONE):
    """Play alternating moves starting with first; returns the player to move next."""
    player = first
    for column in moves:
        board.play_in_column(column, player)
        player = player.other()
    return player


def drawn_board():
    """A full board without any four-in-a-row."""
    board = Board()
    for col in range(COLS):
        for row in range(ROWS - 1, -1, -1):
            # Colours alternate along rows and flip every two rows
            player = Player.ONE if (col + row // 2) % 2 == 0 else Player.TWO
            board.play(col, player)
    return board


def has_four(grid: np.ndarray, player: Player) -> bool:
    """Brute-force four-in-a-row check over the whole grid."""
    for row in range(ROWS):
        for col in range(COLS):
            for dr, dc in ((0, 1), (1, 0), (1, 1), (-1, 1)):
                cells = [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]
                if all(0 <= r < ROWS and 0 <= c < COLS and grid[r, c] == player.value
                       for r, c in cells):
                    return True
    return False


def board_state(board):
    """Everything play/undo must restore."""
    return (board.grid.copy(), list(board.heights), board.last_move,
            list(board.moves_made), board.snapshot_alignments())


def assert_same_state(before, after):
    assert np.array_equal(before[0], after[0])
    assert before[1:] == after[1:]
