"""
c4search.game - Core game mechanics for Connect Four

This package contains the board with its alignment tracking and the
turn-taking game driver.
"""

from c4search.game.board import Board
from c4search.game.rules import ConnectFourGame

__all__ = ['Board', 'ConnectFourGame']
