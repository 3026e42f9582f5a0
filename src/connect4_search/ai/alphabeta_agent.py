from __future__ import annotations

from dataclasses import dataclass
from math import inf

from connect4_search.ai.search import NodeCounter
from connect4_search.core.board import Board
from connect4_search.core.scoring import evaluate
from connect4_search.types import Player


@dataclass(slots=True)
class AlphaBetaSearch:
    """
    Minimax with alpha-beta pruning.

    Every root child starts from a full (-inf, +inf) window, so its value is
    exact and the driver picks the same column minimax would.
    """
    name: str = "alphabeta"

    def score(self, board: Board, depth: int, perspective: Player, counter: NodeCounter) -> float:
        return self._value(board, depth, -inf, inf, False, perspective, counter)

    def _value(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        perspective: Player,
        counter: NodeCounter,
    ) -> float:
        counter.visit()

        if board.outcome is not None or depth <= 0:
            return float(evaluate(board, perspective))

        if maximizing:
            v = -inf
            for m in board.valid_moves():
                v = max(v, self._value(board.play(m), depth - 1, alpha, beta, False, perspective, counter))
                alpha = max(alpha, v)
                if beta <= alpha:
                    counter.cutoffs += 1
                    break
            return v

        v = inf
        for m in board.valid_moves():
            v = min(v, self._value(board.play(m), depth - 1, alpha, beta, True, perspective, counter))
            beta = min(beta, v)
            if beta <= alpha:
                counter.cutoffs += 1
                break
        return v
