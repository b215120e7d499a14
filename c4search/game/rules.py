"""
rules.py - Turn-taking game driver for Connect Four

This module provides ConnectFourGame, which keeps the referee board, knows
whose turn it is, forwards committed moves to every seated engine and deepens
the engines' search while it stays fast.
"""

from typing import TYPE_CHECKING, Dict, List, Optional

from c4search.debug import debug
from c4search.game.board import Board
from c4search.utils import ROWS, COLS, Player, InvalidMoveError, BoardFullError

if TYPE_CHECKING:
    from c4search.ai.base import Engine

INITIAL_DEPTH = 5
INCREASE_DEPTH_IF_FASTER_THAN = 0.2  # seconds


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    Each seat holds an Engine for a computer player or None for a human.
    Player.ONE (X) always moves first.
    """

    def __init__(self, seats: Optional[Dict[Player, Optional['Engine']]] = None,
                 depth: int = INITIAL_DEPTH,
                 increase_depth_if_faster_than: float = INCREASE_DEPTH_IF_FASTER_THAN):
        """
        Initialize a new Connect Four game.

        Args:
            seats: Engine (or None for a human) for each player
            depth: Initial search depth for the engines
            increase_depth_if_faster_than: Search time in seconds under which
                the depth is increased by one
        """
        debug.debug("Initializing ConnectFourGame", "game")
        seats = seats or {}
        self.seats: Dict[Player, Optional['Engine']] = {
            Player.ONE: seats.get(Player.ONE),
            Player.TWO: seats.get(Player.TWO),
        }
        self.initial_depth = depth
        self.increase_depth_if_faster_than = increase_depth_if_faster_than
        self.board = Board()
        self.reset()

    def reset(self) -> None:
        """Reset the game, the engines and the search depth."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        for engine in self._engines():
            engine.reset()
        self.current_player = Player.ONE
        self.depth = self.initial_depth

    def _engines(self) -> List['Engine']:
        # The same engine may sit in both seats; it must see each move once
        seen = []
        for engine in self.seats.values():
            if engine is not None and all(engine is not other for other in seen):
                seen.append(engine)
        return seen

    @property
    def moves_played(self) -> int:
        return self.board.move_count

    def is_human_turn(self) -> bool:
        return self.seats[self.current_player] is None

    def make_move(self, column: int) -> None:
        """
        Commit a move for the current player.

        Args:
            column: Column to place a piece (0-indexed)

        Raises:
            InvalidMoveError: If the game is over or the column cannot be played
        """
        if self.is_game_over():
            raise InvalidMoveError(column, "the game is over")

        player = self.current_player
        self.board.play_in_column(column, player)
        for engine in self._engines():
            engine.play_in_column(column, player)
        debug.info(f"Player {player} plays column {column}", "game")

        if not self.is_game_over():
            self.current_player = player.other()

    def request_ai_move(self) -> int:
        """
        Ask the current player's engine for a column.

        The move is not committed. If the search was faster than the
        threshold and there are enough empty cells left, the depth grows by one.

        Raises:
            BoardFullError: If the game is already over
            ValueError: If the current seat is a human
        """
        engine = self.seats[self.current_player]
        if engine is None:
            raise ValueError(f"player {self.current_player} is human")
        if self.is_game_over():
            raise BoardFullError("the game is over")

        debug.start_timer("ai_move")
        column = engine.choose_next_move(self.current_player, self.depth)
        elapsed = debug.end_timer("ai_move", "game")

        if (elapsed is not None and elapsed < self.increase_depth_if_faster_than
                and self.depth + self.moves_played <= ROWS * COLS):
            self.depth += 1
            debug.info(f"New search depth: {self.depth}", "game")

        return column

    def play_ai_move(self) -> int:
        """Choose and commit the current engine's move."""
        column = self.request_ai_move()
        self.make_move(column)
        return column

    def is_game_over(self) -> bool:
        return self.get_winner() is not None or self.board.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        for player in (Player.ONE, Player.TWO):
            if self.board.is_winner(player):
                return player
        return None

    def is_draw(self) -> bool:
        return self.board.is_game_over() and self.get_winner() is None

    def get_current_player(self) -> Player:
        return self.current_player

    def get_valid_moves(self):
        return [] if self.is_game_over() else self.board.get_valid_moves()

    def render(self) -> str:
        return self.board.render()
