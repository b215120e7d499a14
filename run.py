#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:

    # Play against the engine (who moves first is chosen at random)
    python run.py play

    # Watch two engines play, starting at depth 4
    python run.py play --humans 0 --depth 4

    # Two humans on one terminal
    python run.py play --humans 2

    # Ask for the best move after X:3, O:3, X:4
    python run.py analyze --moves 3,3,4 --depth 6

    # Time 10 engine-versus-engine games at depth 5
    python run.py --debug_level info benchmark --games 10 --depth 5
"""

from c4search.interfaces.cli import main

if __name__ == "__main__":
    main()
