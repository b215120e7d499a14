"""
c4search.ai - Move-choosing engines for Connect Four

Every engine implements the Engine interface so the game driver can seat any
of them without knowing how they pick their moves.
"""

from c4search.ai.alphabeta import AlphaBetaPlayer
from c4search.ai.base import Engine
from c4search.ai.evaluator import evaluate
from c4search.ai.random_player import RandomPlayer

ENGINES = {
    AlphaBetaPlayer.name: AlphaBetaPlayer,
    RandomPlayer.name: RandomPlayer,
}

__all__ = ['Engine', 'AlphaBetaPlayer', 'RandomPlayer', 'evaluate', 'ENGINES']
