"""Uniformly random Connect Four engine."""

import random
from typing import Optional

from c4search.ai.base import Engine
from c4search.utils import Player, BoardFullError


class RandomPlayer(Engine):
    """Picks any playable column; the depth argument is ignored."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        super().__init__()
        self.rng = rng if rng is not None else random.Random(seed)

    def choose_next_move(self, player: Player, depth: int) -> int:
        valid_moves = self.board.get_valid_moves()
        if not valid_moves:
            raise BoardFullError("cannot choose a move on a full board")
        return self.rng.choice(valid_moves)
