"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board dimensions, the sign-encoded Player enumeration,
direction vectors used by the alignment scans, the domain exceptions, and
ASCII rendering shared by the board, the engines and the CLI.
"""

from enum import Enum, auto
from typing import Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
CENTER_COLUMN = COLS // 2


class Player(Enum):
    """
    Enumeration representing players and cell states.

    The values are sign-encoded so that negating a player yields its opponent.
    """
    EMPTY = 0
    ONE = 1     # X, moves first
    TWO = -1    # O

    def other(self) -> 'Player':
        """Get the other player (EMPTY stays EMPTY)."""
        return Player(-self.value)

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class Direction(Enum):
    """Enumeration representing the four alignment directions."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_UP = auto()    # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# Direction vectors (row, col), in scan order. Row 0 is the top of the board,
# so "down" is +1. Each scan walks the vector first, then the opposite vector
# if the run is still short. VERTICAL only walks downward.
DIRECTION_VECTORS = {
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.HORIZONTAL: (0, 1),
}


class ConnectFourError(Exception):
    """Base class for errors raised at the engine boundary."""


class InvalidMoveError(ConnectFourError, ValueError):
    """Raised when a column is out of range or already full."""

    def __init__(self, column, reason: str = "column is full"):
        self.column = column
        self.reason = reason
        super().__init__(f"Invalid move in column {column}: {reason}")


class BoardFullError(ConnectFourError):
    """Raised when a move is requested on a board with no playable column."""


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def parse_moves(moves_str: str) -> Tuple[int, ...]:
    """Parse a comma-separated list of columns such as "3,3,4"."""
    if not moves_str.strip():
        return ()
    return tuple(int(part) for part in moves_str.split(','))


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid

    Returns:
        ASCII representation of the board
    """
    result = []
    result.append("|" + "-" * (COLS * 2 - 1) + "|")

    for row in range(ROWS):
        cells = [str(Player(int(board[row, col]))) for col in range(COLS)]
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
