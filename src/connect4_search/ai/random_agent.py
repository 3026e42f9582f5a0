from __future__ import annotations
import random
from typing import Optional

from connect4_search.ai.search import NoLegalMoves
from connect4_search.game.state import GameState
from connect4_search.types import Move


class RandomAgent:
    name = "Random AI"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.valid_moves()
        if not moves:
            raise NoLegalMoves("No valid moves.")
        return self.rng.choice(moves)
