"""Abstract base class for Connect Four engines."""

import abc

from c4search.game.board import Board
from c4search.utils import Player


class Engine(abc.ABC):
    """
    A move-choosing strategy that tracks the game on its own board.

    The driver forwards every committed move, both its own and the
    opponent's, through play_in_column() so that each engine's board mirrors
    the referee board.
    """

    name: str = "engine"

    def __init__(self):
        self.board = Board()

    def get_name(self) -> str:
        return self.name

    @abc.abstractmethod
    def choose_next_move(self, player: Player, depth: int) -> int:
        """Recommend a column for player without changing the board."""
        raise NotImplementedError

    def play_in_column(self, column: int, player: Player):
        self.board.play_in_column(column, player)

    def reset(self):
        self.board.reset()

    def is_valid_move(self, column: int) -> bool:
        return self.board.is_valid_move(column)

    def is_winner(self, player: Player) -> bool:
        return self.board.is_winner(player)

    def is_game_over(self) -> bool:
        return self.board.is_game_over()
