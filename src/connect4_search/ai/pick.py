from __future__ import annotations

from typing import Callable, Dict, Optional

from connect4_search.ai.alphabeta_agent import AlphaBetaSearch
from connect4_search.ai.expectiminimax_agent import ExpectiMiniMaxSearch
from connect4_search.ai.minimax_agent import MinimaxSearch
from connect4_search.ai.search import SearchResult, SearchStrategy, best_move
from connect4_search.core.board import Board
from connect4_search.evaluation import EvaluationRecord

STRATEGIES: Dict[str, Callable[[], SearchStrategy]] = {
    "minimax": MinimaxSearch,
    "alphabeta": AlphaBetaSearch,
    "expectiminimax": ExpectiMiniMaxSearch,
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


def make_strategy(name: str) -> SearchStrategy:
    """
    Look up a search strategy by name. "alpha-beta", "Alpha_Beta" and
    "alphabeta" are all the same algorithm.
    """
    factory = STRATEGIES.get(_normalize(name))
    if factory is None:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown algorithm {name!r}. Known: {known}")
    return factory()


def search(
    name: str,
    board: Board,
    depth: int,
    on_record: Optional[Callable[[EvaluationRecord], None]] = None,
) -> SearchResult:
    return best_move(make_strategy(name), board, depth, on_record=on_record)
