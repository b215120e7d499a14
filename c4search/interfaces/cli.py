"""
cli.py - Command-line interface for the Connect Four engine

This module provides a CLI for playing against the engine, asking it for a
move in a given position and timing engine-versus-engine games.
"""

import argparse
import random
import sys
from typing import List, Optional

from c4search.ai import ENGINES, AlphaBetaPlayer
from c4search.debug import debug, DebugLevel
from c4search.game.rules import ConnectFourGame, INITIAL_DEPTH
from c4search.utils import COLS, Player, ConnectFourError, parse_moves


def search_depth(value: str) -> int:
    """argparse type for search depths, which must be at least 1."""
    depth = int(value)
    if depth < 1:
        raise argparse.ArgumentTypeError(f"search depth must be at least 1, got {depth}")
    return depth


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        self.args = None
        self.game: Optional[ConnectFourGame] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four with alpha-beta search')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Set debug level: none (silent), error, warning, info, debug, trace')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--humans', type=int, choices=[0, 1, 2], default=1,
                                 help='Number of human players')
        play_parser.add_argument('--depth', type=search_depth, default=INITIAL_DEPTH,
                                 help='Initial search depth (grows while searches are fast)')
        play_parser.add_argument('--opponent', choices=sorted(ENGINES), default='alphabeta',
                                 help='Engine used for computer players')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Random seed for seat order and move ordering')

        analyze_parser = subparsers.add_parser('analyze', help='Recommend a move for a position')
        analyze_parser.add_argument('--moves', type=str, default='',
                                    help='Comma-separated columns played so far, X first (e.g. "3,3,4")')
        analyze_parser.add_argument('--depth', type=search_depth, default=INITIAL_DEPTH,
                                    help='Search depth')
        analyze_parser.add_argument('--seed', type=int, default=None,
                                    help='Random seed for move ordering')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time engine-versus-engine games')
        benchmark_parser.add_argument('--games', type=int, default=5,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--depth', type=search_depth, default=4,
                                      help='Fixed search depth')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for move ordering')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'analyze':
            self.analyze_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            sys.exit(1)

    def create_game(self, humans: int, opponent: str, depth: int,
                    rng: random.Random) -> ConnectFourGame:
        """Seat the humans first, then shuffle who moves first."""
        engine_class = ENGINES[opponent]
        seats = [None if i < humans else engine_class(seed=rng.randrange(2 ** 32))
                 for i in range(2)]
        if rng.randrange(2):
            seats.reverse()
        return ConnectFourGame({Player.ONE: seats[0], Player.TWO: seats[1]}, depth=depth)

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        rng = random.Random(self.args.seed)
        self.game = self.create_game(self.args.humans, self.args.opponent, self.args.depth, rng)
        game = self.game

        print("Starting a new Connect Four game!")
        for player in (Player.ONE, Player.TWO):
            engine = game.seats[player]
            print(f"  {player}: {'human' if engine is None else engine.get_name()}")
        print(f"Enter a column number (0-{COLS - 1}) to move, 'q' to quit.")

        while not game.is_game_over():
            print(game.render())
            player = game.get_current_player()

            if game.is_human_turn():
                move = self.get_human_move(player)
                if move is None:
                    print("Quitting game.")
                    return
            else:
                print(f"AI ({player}) is thinking...")
                depth = game.depth
                move = game.request_ai_move()
                print(f"AI ({player}) plays column {move}")
                if game.depth != depth:
                    print(f"New search depth: {game.depth}")

            game.make_move(move)

        print(game.render())
        print("Game over!")
        winner = game.get_winner()
        if winner is None:
            print("It's a draw!")
        else:
            print(f"{winner} wins!")

    def get_human_move(self, player: Player) -> Optional[int]:
        """
        Get a move from human player input, asking again until it is valid.

        Returns:
            Column index, or None if the player quits
        """
        while True:
            try:
                user_input = input(f"Next move for player {player} (0-{COLS - 1}, q): ").strip().lower()
            except EOFError:
                return None

            if user_input == 'q':
                return None

            try:
                move = int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or 'q'.")
                continue

            if self.game.board.is_valid_move(move):
                return move
            print("Invalid move. Try again.")

    def analyze_position(self) -> None:
        """Replay the given moves and print the engine's recommendation."""
        engine = AlphaBetaPlayer(seed=self.args.seed)
        player = Player.ONE

        try:
            moves = parse_moves(self.args.moves)
            for column in moves:
                if engine.is_winner(player.other()):
                    raise ConnectFourError(f"the game was already won by {player.other()}")
                engine.play_in_column(column, player)
                player = player.other()
        except (ValueError, ConnectFourError) as e:
            print(f"Error in move list: {e}")
            return

        print(engine.board.render())
        for side in (Player.ONE, Player.TWO):
            counts = engine.board.alignments(side)
            print(f"{side}: runs of 2={counts[0]}, 3={counts[1]}, 4={counts[2]}")

        if engine.is_winner(player.other()):
            print(f"{player.other()} has won.")
            return
        if engine.is_game_over():
            print("The board is full: draw.")
            return

        move = engine.choose_next_move(player, self.args.depth)
        print(f"Recommended move for {player}: column {move} "
              f"({engine.nodes_evaluated} nodes searched)")

    def benchmark(self) -> None:
        """Benchmark engine-versus-engine games at a fixed depth."""
        print(f"Running benchmark with {self.args.games} games at depth {self.args.depth}...")
        rng = random.Random(self.args.seed)
        results = {Player.ONE: 0, Player.TWO: 0, None: 0}
        total_moves = 0
        total_nodes = 0

        debug.start_timer("benchmark")
        for _ in range(self.args.games):
            engines = {player: AlphaBetaPlayer(seed=rng.randrange(2 ** 32))
                       for player in (Player.ONE, Player.TWO)}
            game = ConnectFourGame(engines, depth=self.args.depth,
                                   increase_depth_if_faster_than=0.0)
            while not game.is_game_over():
                engine = engines[game.get_current_player()]
                game.play_ai_move()
                total_nodes += engine.nodes_evaluated
            total_moves += game.moves_played
            results[game.get_winner()] += 1
        elapsed = debug.end_timer("benchmark")

        print(f"X wins: {results[Player.ONE]}, O wins: {results[Player.TWO]}, draws: {results[None]}")
        print(f"Played {total_moves} moves in {elapsed:.3f} seconds, "
              f"{elapsed / max(total_moves, 1) * 1000:.3f} ms per move, "
              f"{total_nodes} nodes searched")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.run(argv)


if __name__ == "__main__":
    main()
