from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

from connect4_search.ai.search import NodeCounter
from connect4_search.core.board import Board
from connect4_search.core.scoring import evaluate
from connect4_search.types import Player

NodeKind = Literal["max", "min", "chance"]

NEXT_KIND: Dict[NodeKind, NodeKind] = {"max": "min", "min": "chance", "chance": "max"}


@dataclass(slots=True)
class ExpectiMiniMaxSearch:
    """
    ExpectiMinimax with a uniform chance layer.

    Node kinds rotate max -> min -> chance -> max by depth level, independent
    of whose turn the board records:
      - max:    best child value
      - min:    worst child value
      - chance: mean over all legal children (every move equally likely)

    Root children are entered at "min", like the opponent reply in the other
    two searches.
    """
    name: str = "expectiminimax"

    def score(self, board: Board, depth: int, perspective: Player, counter: NodeCounter) -> float:
        return self._value(board, depth, "min", perspective, counter)

    def _value(self, board: Board, depth: int, kind: NodeKind, perspective: Player, counter: NodeCounter) -> float:
        counter.visit()

        if board.outcome is not None or depth <= 0:
            return float(evaluate(board, perspective))

        nxt = NEXT_KIND[kind]
        vals: List[float] = [
            self._value(board.play(m), depth - 1, nxt, perspective, counter)
            for m in board.valid_moves()
        ]

        if kind == "max":
            return max(vals)
        if kind == "min":
            return min(vals)
        return sum(vals) / len(vals)
