from __future__ import annotations

from dataclasses import dataclass
from math import inf
import time
from typing import Callable, Optional, Protocol

from connect4_search.core.board import Board
from connect4_search.evaluation import EvaluationRecord, board_size_label
from connect4_search.types import Move, Player


class NoLegalMoves(ValueError):
    """Search asked for a move on a full or decided board."""


@dataclass(slots=True)
class NodeCounter:
    """Owned by one top-level search and passed down its recursion."""
    nodes: int = 0
    cutoffs: int = 0

    def visit(self) -> None:
        self.nodes += 1


@dataclass(frozen=True, slots=True)
class SearchResult:
    column: Move
    nodes: int
    score: float
    cutoffs: int = 0
    time_ms: float = 0.0


class SearchStrategy(Protocol):
    name: str

    def score(self, board: Board, depth: int, perspective: Player, counter: NodeCounter) -> float:
        """
        Value for `perspective` of a root child, i.e. a position where the
        opponent is to respond.
        """
        ...


def best_move(
    strategy: SearchStrategy,
    board: Board,
    depth: int,
    on_record: Optional[Callable[[EvaluationRecord], None]] = None,
) -> SearchResult:
    """
    Score every legal root move in ascending column order and keep the first
    one with the strictly highest value. depth <= 0 scores the root children
    directly with the evaluator.
    """
    moves = board.valid_moves()
    if not moves:
        raise NoLegalMoves("No valid moves.")

    me: Player = board.current
    child_depth = max(0, depth - 1)
    counter = NodeCounter()

    start = time.perf_counter()

    best: Optional[Move] = None
    best_score = -inf
    best_child: Optional[Board] = None

    for m in moves:
        child = board.play(m)
        score = strategy.score(child, child_depth, me, counter)
        if score > best_score:
            best, best_score, best_child = m, score, child

    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if best is None or best_child is None:
        raise NoLegalMoves("No move could be scored.")

    result = SearchResult(
        column=best,
        nodes=counter.nodes,
        score=best_score,
        cutoffs=counter.cutoffs,
        time_ms=elapsed_ms,
    )

    if on_record is not None:
        on_record(
            EvaluationRecord(
                algorithm=strategy.name,
                depth=depth,
                nodes=result.nodes,
                time_ms=round(elapsed_ms, 3),
                outcome=best_child.outcome or "none",
                board_size=board_size_label(board.rows, board.cols),
                rows=board.rows,
                cols=board.cols,
                column=int(best),
                score=best_score,
            )
        )

    return result
