"""
c4search - Connect Four engine with alpha-beta search

This package provides a Connect Four board with incremental alignment
tracking, a negamax search engine with alpha-beta pruning, a turn-taking game
driver and a console interface for playing against the engine.
"""

# Version number
__version__ = '0.1.0'
