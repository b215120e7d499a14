"""
board.py - Board representation and incremental alignment tracking

This module implements the Board class which owns the Connect Four grid, the
column fill levels and the last placed cell. Each placement rescans the four
directions through that cell and updates per-player alignment buckets, so win
detection and position evaluation never need a full board scan.
"""

from contextlib import contextmanager
from typing import Dict, List, Optional, Tuple

import numpy as np

from c4search.debug import debug, DebugLevel
from c4search.utils import (ROWS, COLS, CONNECT_N, Player, Direction, DIRECTION_VECTORS,
                            InvalidMoveError, is_valid_position, render_board_ascii)

# Bucket indices: runs of length 2, 3 and CONNECT_N (or more)
BUCKET_COUNT = CONNECT_N - 1

AlignmentSnapshot = Tuple[Tuple[int, ...], Tuple[int, ...]]


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top row. Pieces in a column are always contiguous from the
    bottom row upward.

    Attributes:
        grid: ROWS x COLS array of Player values
        heights: Number of pieces in each column
        last_move: (row, column) of the most recent placement, None before any
        moves_made: Stack of placed (row, column) cells
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.reset()

    def reset(self):
        """Reset the board and both players' alignment buckets."""
        debug.debug("Resetting board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.heights: List[int] = [0] * COLS
        self.moves_made: List[Tuple[int, int]] = []
        self.last_move: Optional[Tuple[int, int]] = None
        self._alignments: Dict[Player, List[int]] = {
            Player.ONE: [0] * BUCKET_COUNT,
            Player.TWO: [0] * BUCKET_COUNT,
        }

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        debug.trace(f"Copying board after {self.move_count} moves", "board")
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.heights = self.heights.copy()
        new_board.moves_made = self.moves_made.copy()
        new_board.last_move = self.last_move
        new_board.restore_alignments(self.snapshot_alignments())
        return new_board

    @property
    def move_count(self) -> int:
        return len(self.moves_made)

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a piece can be dropped in a column.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the column exists and its top cell is empty
        """
        return 0 <= column < COLS and bool(self.grid[0, column] == Player.EMPTY.value)

    def get_valid_moves(self) -> List[int]:
        """Get the playable columns in ascending order."""
        return [col for col in range(COLS) if self.is_valid_move(col)]

    def is_game_over(self) -> bool:
        """True when no column can take another piece."""
        for col in range(COLS):
            if self.is_valid_move(col):
                return False
        return True

    def is_winner(self, player: Player) -> bool:
        """True if the player has CONNECT_N pieces aligned anywhere."""
        return bool(self._alignments[player][-1])

    def alignments(self, player: Player) -> Tuple[int, ...]:
        """Get the (length-2, length-3, length-4) bucket counts of a player."""
        return tuple(self._alignments[player])

    def snapshot_alignments(self) -> AlignmentSnapshot:
        """Copy out both players' alignment buckets."""
        return (tuple(self._alignments[Player.ONE]), tuple(self._alignments[Player.TWO]))

    def restore_alignments(self, snapshot: AlignmentSnapshot):
        """Put back alignment buckets previously taken with snapshot_alignments()."""
        self._alignments[Player.ONE] = list(snapshot[0])
        self._alignments[Player.TWO] = list(snapshot[1])

    def play_in_column(self, column: int, player: Player):
        """
        Commit a move, checking it first.

        Args:
            column: The column to place a piece (0-indexed)
            player: The player placing the piece

        Raises:
            InvalidMoveError: If the column is out of range or full, or the
                player is EMPTY
        """
        if not isinstance(column, (int, np.integer)) or isinstance(column, bool):
            raise InvalidMoveError(column, "column must be an integer")
        if not 0 <= column < COLS:
            raise InvalidMoveError(column, f"column must be between 0 and {COLS - 1}")
        if player == Player.EMPTY:
            raise InvalidMoveError(column, "cannot play an empty piece")
        if not self.is_valid_move(column):
            raise InvalidMoveError(column)

        self.play(int(column), player)
        debug.debug(f"Player {player} played column {column} at {self.last_move}", "board")

    def play(self, column: int, player: Player):
        """
        Drop a piece without validation.

        Passing Player.EMPTY removes the top piece of the column instead. Only
        real pieces update the alignment buckets.

        Args:
            column: A column for which is_valid_move() holds
            player: The player placing the piece, or Player.EMPTY to undo
        """
        if player == Player.EMPTY:
            self._remove_top(column)
            return

        row = ROWS - 1 - self.heights[column]
        self.grid[row, column] = player.value
        self.heights[column] += 1
        self.last_move = (row, column)
        self.moves_made.append(self.last_move)

        self._update_alignments(player)

    def undo(self, column: int):
        """
        Remove the top piece of a column.

        Alignment buckets are left untouched; callers restore them from a
        snapshot.
        """
        self.play(column, Player.EMPTY)

    @contextmanager
    def trial_move(self, column: int, player: Player):
        """
        Play a move for the duration of a with-block.

        The move is undone and the alignment buckets restored on exit, whether
        the block finishes normally, breaks out of a loop or raises.
        """
        snapshot = self.snapshot_alignments()
        self.play(column, player)
        try:
            yield self
        finally:
            self.undo(column)
            self.restore_alignments(snapshot)

    def _remove_top(self, column: int):
        assert self.heights[column] > 0, f"column {column} is empty"
        row = ROWS - self.heights[column]

        self.grid[row, column] = Player.EMPTY.value
        self.heights[column] -= 1
        self.moves_made.remove((row, column))
        self.last_move = self.moves_made[-1] if self.moves_made else None

    def _update_alignments(self, player: Player):
        """Rescan the four directions through the last move."""
        assert self.last_move is not None, "no piece has been placed"
        buckets = self._alignments[player]

        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            length = self._run_length(dr, dc, both_ways=direction != Direction.VERTICAL)
            self._count_alignment(length, buckets)

    def _run_length(self, dr: int, dc: int, both_ways: bool = True) -> int:
        """
        Count same-player pieces in a line through the last move.

        Counting starts at 1 for the placed piece and stops at CONNECT_N.
        """
        row, col = self.last_move
        value = self.grid[row, col]
        length = 1

        r, c = row + dr, col + dc
        while length < CONNECT_N and is_valid_position(r, c) and self.grid[r, c] == value:
            length += 1
            r += dr
            c += dc

        if both_ways:
            r, c = row - dr, col - dc
            while length < CONNECT_N and is_valid_position(r, c) and self.grid[r, c] == value:
                length += 1
                r -= dr
                c -= dc

        return length

    @staticmethod
    def _count_alignment(length: int, buckets: List[int]):
        """
        Record a run in the buckets.

        A run that grew from length-1 moves out of the shorter bucket so it is
        not counted twice. Single pieces are ignored.
        """
        if length < 2:
            return

        if length >= 3 and buckets[length - 3]:
            buckets[length - 3] -= 1

        buckets[length - 2] += 1

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    for col in [0, 0, 0]:
        board.play_in_column(col, Player.ONE)
    print(board)
    print(f"X alignments: {board.alignments(Player.ONE)}")

    board.play_in_column(1, Player.ONE)
    board.play_in_column(2, Player.ONE)
    board.play_in_column(3, Player.ONE)
    print(board)
    print(f"X alignments: {board.alignments(Player.ONE)}, winner: {board.is_winner(Player.ONE)}")
