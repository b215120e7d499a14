"""
evaluator.py - Static evaluation of a Connect Four position

The score is read straight from the board's alignment buckets, so it costs
O(1) per search leaf.
"""

from c4search.game.board import Board
from c4search.utils import Player

# Weight of a run of length 2, 3 and 4
ALIGNMENT_WEIGHTS = (1, 10, 100)


def weighted_alignments(board: Board, player: Player) -> int:
    """Weighted sum of one player's alignment buckets."""
    return sum(weight * count
               for weight, count in zip(ALIGNMENT_WEIGHTS, board.alignments(player)))


def evaluate(board: Board, player: Player) -> int:
    """
    Heuristic value of the position from player's point of view.

    The evaluation is zero-sum: evaluate(board, p) == -evaluate(board, p.other()).

    Args:
        board: The board to evaluate
        player: The player we're evaluating for

    Returns:
        Player's weighted alignments minus the opponent's
    """
    return weighted_alignments(board, player) - weighted_alignments(board, player.other())
