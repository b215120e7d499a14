"""
Tests for the alpha-beta search engine.
"""

import math
import random

import pytest

from c4search.ai.alphabeta import AlphaBetaPlayer, SEARCH_ORDER, WIN_SCORE
from c4search.ai.evaluator import evaluate
from c4search.ai.random_player import RandomPlayer
from c4search.utils import CENTER_COLUMN, Player, BoardFullError

from conftest import play_moves, drawn_board, board_state, assert_same_state


@pytest.fixture
def engine():
    return AlphaBetaPlayer(seed=1234)


class TestOpening:

    @pytest.mark.parametrize("depth", [0, 1, 4, 9])
    def test_empty_board_plays_center(self, engine, depth):
        assert engine.choose_next_move(Player.ONE, depth) == CENTER_COLUMN
        assert engine.nodes_evaluated == 0

    def test_center_reply_when_center_still_empty(self, engine):
        engine.play_in_column(0, Player.ONE)
        assert engine.choose_next_move(Player.TWO, 5) == CENTER_COLUMN

    def test_search_order_covers_every_column(self):
        assert sorted(SEARCH_ORDER) == list(range(7))


class TestSearch:

    def test_depth_zero_returns_heuristic(self, engine):
        play_moves(engine.board, [0, 3, 0, 3, 0])
        assert engine.search(0, -math.inf, math.inf, Player.TWO) == \
            (evaluate(engine.board, Player.TWO), None)
        assert engine.nodes_evaluated == 1

    def test_takes_immediate_win(self):
        for seed in range(5):
            engine = AlphaBetaPlayer(seed=seed)
            play_moves(engine.board, [0, 3, 0, 3, 0, 6])
            for depth in (1, 2, 3):
                assert engine.choose_next_move(Player.ONE, depth) == 0

    def test_blocks_immediate_loss(self):
        for seed in range(5):
            engine = AlphaBetaPlayer(seed=seed)
            # X holds columns 3-5 on the bottom row, O holds 0 and 6
            play_moves(engine.board, [3, 6, 4, 0, 5])
            for depth in (2, 3):
                assert engine.choose_next_move(Player.TWO, depth) == 2

    def test_win_score_reflects_remaining_depth(self, engine):
        play_moves(engine.board, [0, 3, 0, 3, 0, 6])
        score, column = engine.search(3, -math.inf, math.inf, Player.ONE)
        assert column == 0
        assert score == WIN_SCORE * 3

    def test_lost_position_scores_negative(self, engine):
        play_moves(engine.board, [0, 1, 0, 1, 0, 1, 0])
        score, column = engine.search(2, -math.inf, math.inf, Player.TWO)
        assert score == -WIN_SCORE * 3
        assert column is None

    def test_full_board_is_a_draw(self, engine):
        engine.board = drawn_board()
        assert engine.search(3, -math.inf, math.inf, Player.ONE) == (0, None)
        with pytest.raises(BoardFullError):
            engine.choose_next_move(Player.ONE, 3)

    def test_depth_must_be_positive(self, engine):
        engine.play_in_column(CENTER_COLUMN, Player.ONE)
        with pytest.raises(ValueError):
            engine.choose_next_move(Player.TWO, 0)

    def test_empty_player_rejected(self, engine):
        engine.play_in_column(CENTER_COLUMN, Player.ONE)
        with pytest.raises(ValueError):
            engine.choose_next_move(Player.EMPTY, 2)

    def test_search_leaves_board_unchanged(self, engine):
        play_moves(engine.board, [3, 3, 2, 4, 4, 2, 5])
        before = board_state(engine.board)
        engine.choose_next_move(Player.TWO, 4)
        assert_same_state(before, board_state(engine.board))
        assert engine.nodes_evaluated > 1

    def test_same_seed_same_moves(self):
        moves = [3, 3, 2, 4]
        chosen = []
        for _ in range(2):
            engine = AlphaBetaPlayer(rng=random.Random(99))
            play_moves(engine.board, moves)
            chosen.append([engine.choose_next_move(Player.ONE, depth) for depth in (1, 2, 3)])
        assert chosen[0] == chosen[1]

    def test_custom_evaluator(self):
        calls = []

        def flat(board, player):
            calls.append(player)
            return 0

        engine = AlphaBetaPlayer(seed=0, evaluator=flat)
        play_moves(engine.board, [3, 3])
        column = engine.choose_next_move(Player.ONE, 2)
        assert engine.is_valid_move(column)
        assert calls


class TestEngines:

    def test_interface(self, engine):
        assert engine.get_name() == "alphabeta"
        engine.play_in_column(3, Player.ONE)
        assert not engine.is_valid_move(7)
        assert not engine.is_game_over()
        engine.reset()
        assert engine.board.move_count == 0

    def test_random_player_picks_valid_columns(self):
        player = RandomPlayer(seed=3)
        assert player.get_name() == "random"
        for _ in range(6):
            player.play_in_column(0, Player.ONE if player.board.heights[0] % 2 == 0 else Player.TWO)
        for _ in range(20):
            column = player.choose_next_move(Player.ONE, 0)
            assert column != 0
            assert player.is_valid_move(column)

    def test_random_player_on_full_board(self):
        player = RandomPlayer(seed=3)
        player.board = drawn_board()
        with pytest.raises(BoardFullError):
            player.choose_next_move(Player.ONE, 1)
