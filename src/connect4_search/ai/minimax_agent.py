from __future__ import annotations

from dataclasses import dataclass

from connect4_search.ai.search import NodeCounter
from connect4_search.core.board import Board
from connect4_search.core.scoring import evaluate
from connect4_search.types import Player


@dataclass(slots=True)
class MinimaxSearch:
    """
    Plain minimax. Levels alternate max/min by the `maximizing` flag alone,
    whatever side the board says is to move.
    """
    name: str = "minimax"

    def score(self, board: Board, depth: int, perspective: Player, counter: NodeCounter) -> float:
        return self._value(board, depth, False, perspective, counter)

    def _value(self, board: Board, depth: int, maximizing: bool, perspective: Player, counter: NodeCounter) -> float:
        counter.visit()

        if board.outcome is not None or depth <= 0:
            return float(evaluate(board, perspective))

        children = (
            self._value(board.play(m), depth - 1, not maximizing, perspective, counter)
            for m in board.valid_moves()
        )
        return max(children) if maximizing else min(children)
