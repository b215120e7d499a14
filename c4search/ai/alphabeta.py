"""
alphabeta.py - Negamax search with alpha-beta pruning for Connect Four

This module provides AlphaBetaPlayer, an engine that searches the game tree on
its own board up to a given depth. Every exploratory move is played on the
board and undone afterwards, and the alignment buckets are restored from a
snapshot, so the board is left exactly as it was found.

Scoring, from the point of view of the player to move:
1. A position the opponent has already won scores -100 * (remaining depth + 1),
   so quicker wins and slower losses are preferred
2. At the search horizon the alignment heuristic is used
3. A full board is a draw and scores 0
"""

import math
import random
from typing import Callable, Optional, Tuple

from c4search.ai.base import Engine
from c4search.ai.evaluator import evaluate
from c4search.debug import debug, DebugLevel
from c4search.game.board import Board
from c4search.utils import CENTER_COLUMN, ROWS, Player, BoardFullError

# Center-out base order; it is shuffled at every node
SEARCH_ORDER = (3, 4, 5, 0, 1, 2, 6)

WIN_SCORE = 100


class AlphaBetaPlayer(Engine):
    """
    A Connect Four engine using negamax with alpha-beta pruning.

    Move ordering among equally scored columns is randomised through an
    injectable random.Random so that games vary but tests can be reproduced
    with a seed.
    """

    name = "alphabeta"

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None,
                 evaluator: Callable[[Board, Player], int] = evaluate):
        """
        Initialize the engine.

        Args:
            rng: Random source for move ordering (takes precedence over seed)
            seed: Seed for a private random.Random when rng is not given
            evaluator: Heuristic applied at the search horizon
        """
        super().__init__()
        self.rng = rng if rng is not None else random.Random(seed)
        self.evaluator = evaluator
        self.nodes_evaluated = 0  # For performance tracking

    def choose_next_move(self, player: Player, depth: int) -> int:
        """
        Get the best column for player.

        An empty center column is returned straight away.

        Args:
            player: The player to move
            depth: Number of plies to search

        Returns:
            The recommended column

        Raises:
            BoardFullError: If no column is playable
            ValueError: If depth is less than 1 or player is EMPTY
        """
        self.nodes_evaluated = 0
        if player == Player.EMPTY:
            raise ValueError("the player to move cannot be EMPTY")
        if self.board.is_game_over():
            raise BoardFullError("cannot choose a move on a full board")

        if self.board.grid[ROWS - 1, CENTER_COLUMN] == Player.EMPTY.value:
            debug.debug(f"Center column empty, playing {CENTER_COLUMN}", "search")
            return CENTER_COLUMN

        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")

        debug.start_timer("search")
        score, column = self.search(depth, -math.inf, math.inf, player)
        elapsed = debug.end_timer("search", "search")

        if column is None:
            # Only reachable when the opponent has already won
            column = next(c for c in SEARCH_ORDER if self.board.is_valid_move(c))
            debug.warning(f"Search found no move for {player}, falling back to {column}", "search")

        debug.info(f"Player {player} chose column {column} (score {score}, depth {depth}, "
                   f"{self.nodes_evaluated} nodes, {elapsed:.3f}s)", "search")
        return column

    def search(self, depth: int, alpha: float, beta: float,
               player: Player) -> Tuple[float, Optional[int]]:
        """
        Negamax search with alpha-beta pruning.

        Args:
            depth: Remaining search depth
            alpha: Best score the player to move can already guarantee
            beta: Best score the opponent can already guarantee
            player: The player to move

        Returns:
            (score, column) where column is None at terminal and horizon nodes
        """
        self.nodes_evaluated += 1
        board = self.board

        # The opponent made the last move
        if board.is_winner(player.other()):
            return -WIN_SCORE * (depth + 1), None

        if depth == 0:
            return self.evaluator(board, player), None

        if board.is_game_over():
            return 0, None

        columns = list(SEARCH_ORDER)
        self.rng.shuffle(columns)

        best_score = -math.inf
        best_column = None
        opponent = player.other()

        for column in columns:
            if not board.is_valid_move(column):
                continue

            with board.trial_move(column, player):
                score = -self.search(depth - 1, -beta, -alpha, opponent)[0]

            if score > best_score:
                best_score = score
                best_column = column

            if score > alpha:
                alpha = score
                if alpha > beta:
                    break

        return best_score, best_column


if __name__ == "__main__":
    import time

    debug.configure(level=DebugLevel.INFO)

    engine = AlphaBetaPlayer(seed=0)
    for column, player in [(3, Player.ONE), (6, Player.TWO), (4, Player.ONE),
                           (0, Player.TWO), (5, Player.ONE)]:
        engine.play_in_column(column, player)
    print(engine.board)

    start = time.time()
    move = engine.choose_next_move(Player.TWO, 6)
    print(f"Best move for O: column {move} (should be 2 to block)")
    print(f"Nodes evaluated: {engine.nodes_evaluated}, time: {time.time() - start:.3f}s")
